"""
Application DTOs.
"""

from abonnement.application.dto.subscription_dto import (
    AggregateCostRequest,
    CreateSubscriptionRequest,
    ListSubscriptionsRequest,
    UpdateSubscriptionRequest,
)

__all__ = [
    "CreateSubscriptionRequest",
    "UpdateSubscriptionRequest",
    "ListSubscriptionsRequest",
    "AggregateCostRequest",
]
