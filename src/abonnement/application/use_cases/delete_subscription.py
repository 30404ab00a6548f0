"""
Delete subscription use case.
"""

import logging

from abonnement.application.validation import parse_uuid
from abonnement.domain.exceptions import EntityNotFoundError
from abonnement.domain.repositories.i_subscription_repository import (
    ISubscriptionRepository,
)

logger = logging.getLogger(__name__)


class DeleteSubscription:
    """Use case for hard-deleting a subscription."""

    def __init__(self, subscription_repository: ISubscriptionRepository):
        self.subscription_repository = subscription_repository

    async def execute(self, subscription_id: str) -> None:
        """
        Delete subscription.

        Raises:
            ValidationError: If ID is not a valid UUID
            EntityNotFoundError: If subscription does not exist
            StorageError: If persistence fails
        """
        uuid_id = parse_uuid(subscription_id, "id")

        deleted = await self.subscription_repository.delete(uuid_id)

        if not deleted:
            raise EntityNotFoundError("Subscription", str(uuid_id))

        logger.info("Subscription deleted", extra={"subscription_id": str(uuid_id)})
