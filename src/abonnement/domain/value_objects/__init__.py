"""
Domain value objects.
"""

from abonnement.domain.value_objects.month import (
    MONTH_FORMAT,
    format_month,
    parse_month,
)
from abonnement.domain.value_objects.subscription_changes import (
    SetEndDate,
    SetPrice,
    SetServiceName,
    SubscriptionChange,
)
from abonnement.domain.value_objects.subscription_filter import (
    CostQuery,
    SubscriptionFilter,
)

__all__ = [
    "MONTH_FORMAT",
    "parse_month",
    "format_month",
    "SetServiceName",
    "SetPrice",
    "SetEndDate",
    "SubscriptionChange",
    "SubscriptionFilter",
    "CostQuery",
]
