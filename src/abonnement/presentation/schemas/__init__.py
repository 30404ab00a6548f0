"""
API request/response schemas.
"""

from abonnement.presentation.schemas.subscription_schemas import (
    AggregateCostResponse,
    CreateSubscriptionBody,
    ErrorResponse,
    MessageResponse,
    SubscriptionListResponse,
    SubscriptionResponse,
    UpdateSubscriptionBody,
)

__all__ = [
    "CreateSubscriptionBody",
    "UpdateSubscriptionBody",
    "SubscriptionResponse",
    "SubscriptionListResponse",
    "AggregateCostResponse",
    "MessageResponse",
    "ErrorResponse",
]
