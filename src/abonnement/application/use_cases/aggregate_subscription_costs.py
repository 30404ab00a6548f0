"""
Aggregate subscription costs use case.

Sums declared prices of subscriptions active during a period.
"""

from abonnement.application.dto.subscription_dto import AggregateCostRequest
from abonnement.application.validation import build_cost_query
from abonnement.domain.repositories.i_subscription_repository import (
    ISubscriptionRepository,
)


class AggregateSubscriptionCosts:
    """
    Use case for summing subscription prices over a period.

    Overlap semantics: a subscription active for any part of the
    period contributes its full price. No pro-rating.
    """

    def __init__(self, subscription_repository: ISubscriptionRepository):
        """
        Initialize use case.

        Args:
            subscription_repository: Subscription repository
        """
        self.subscription_repository = subscription_repository

    async def execute(self, request: AggregateCostRequest) -> int:
        """
        Compute total price.

        Args:
            request: Period and optional filters

        Returns:
            Total price in minor currency units (0 if nothing overlaps)

        Raises:
            ValidationError: If dates or user_id are invalid, or the
                period is inverted
            StorageError: If persistence fails
        """
        query = build_cost_query(request)

        return await self.subscription_repository.sum_prices(query)
