"""
Get subscription use case.
"""

from typing import Optional

from abonnement.application.validation import parse_uuid
from abonnement.domain.entities.subscription import Subscription
from abonnement.domain.repositories.i_subscription_repository import (
    ISubscriptionRepository,
)


class GetSubscription:
    """
    Use case for retrieving a subscription by ID.

    Absence is a normal result (None), not an error.
    """

    def __init__(self, subscription_repository: ISubscriptionRepository):
        self.subscription_repository = subscription_repository

    async def execute(self, subscription_id: str) -> Optional[Subscription]:
        """
        Get subscription.

        Args:
            subscription_id: Subscription ID string

        Returns:
            Subscription if found, None otherwise

        Raises:
            ValidationError: If ID is not a valid UUID
        """
        uuid_id = parse_uuid(subscription_id, "id")

        return await self.subscription_repository.get_by_id(uuid_id)
