"""
List subscriptions use case.
"""

from abonnement.application.dto.subscription_dto import ListSubscriptionsRequest
from abonnement.application.validation import build_subscription_filter
from abonnement.domain.entities.subscription import Subscription
from abonnement.domain.repositories.i_subscription_repository import (
    ISubscriptionRepository,
)


class ListSubscriptions:
    """
    Use case for filtered, paginated listing.

    Results are ordered by start date, newest first.
    """

    def __init__(self, subscription_repository: ISubscriptionRepository):
        self.subscription_repository = subscription_repository

    async def execute(self, request: ListSubscriptionsRequest) -> list[Subscription]:
        """
        List subscriptions.

        Args:
            request: Raw filter and pagination request

        Returns:
            Matching subscriptions (empty list when none match)

        Raises:
            ValidationError: If filter values are invalid
            StorageError: If persistence fails
        """
        subscription_filter = build_subscription_filter(request)

        return await self.subscription_repository.list_filtered(subscription_filter)
