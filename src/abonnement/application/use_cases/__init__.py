"""
Application use cases.
"""

from abonnement.application.use_cases.aggregate_subscription_costs import (
    AggregateSubscriptionCosts,
)
from abonnement.application.use_cases.create_subscription import CreateSubscription
from abonnement.application.use_cases.delete_subscription import DeleteSubscription
from abonnement.application.use_cases.get_subscription import GetSubscription
from abonnement.application.use_cases.list_subscriptions import ListSubscriptions
from abonnement.application.use_cases.update_subscription import UpdateSubscription

__all__ = [
    "CreateSubscription",
    "GetSubscription",
    "UpdateSubscription",
    "DeleteSubscription",
    "ListSubscriptions",
    "AggregateSubscriptionCosts",
]
