"""
Domain exceptions package.
"""

# Base exceptions
from abonnement.domain.exceptions.base import (
    AbonnementException,
    EntityNotFoundError,
    StorageError,
    ValidationError,
)

# Subscription exceptions
from abonnement.domain.exceptions.subscription import (
    NoUpdatesError,
    SubscriptionError,
)

__all__ = [
    # Base
    "AbonnementException",
    "EntityNotFoundError",
    "ValidationError",
    "StorageError",
    # Subscription
    "SubscriptionError",
    "NoUpdatesError",
]
