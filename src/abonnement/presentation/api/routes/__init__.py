"""
API routes package.
"""

from abonnement.presentation.api.routes import health, subscriptions

__all__ = ["health", "subscriptions"]
