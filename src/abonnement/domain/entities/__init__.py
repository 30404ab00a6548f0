"""
Domain entities.
"""

from abonnement.domain.entities.subscription import Subscription

__all__ = ["Subscription"]
