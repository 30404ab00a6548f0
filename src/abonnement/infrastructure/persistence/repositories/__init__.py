"""
SQLAlchemy repository implementations.
"""

from abonnement.infrastructure.persistence.repositories.subscription_repository import (  # noqa: E501
    SubscriptionRepository,
)

__all__ = ["SubscriptionRepository"]
