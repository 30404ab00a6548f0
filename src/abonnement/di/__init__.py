"""
Dependency injection package.
"""

from abonnement.di.container import DIContainer

__all__ = ["DIContainer"]
