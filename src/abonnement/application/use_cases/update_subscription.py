"""
Update subscription use case.

Applies a partial update: only supplied fields change.
"""

import logging

from abonnement.application.dto.subscription_dto import UpdateSubscriptionRequest
from abonnement.application.validation import (
    build_subscription_changes,
    parse_uuid,
)
from abonnement.domain.exceptions import EntityNotFoundError
from abonnement.domain.repositories.i_subscription_repository import (
    ISubscriptionRepository,
)

logger = logging.getLogger(__name__)


class UpdateSubscription:
    """
    Use case for partial subscription update.

    Flow:
    1. Validate ID
    2. Build change set (fails with NoUpdatesError when empty)
    3. Apply changes in one statement
    4. Translate "no row matched" into EntityNotFoundError
    """

    def __init__(self, subscription_repository: ISubscriptionRepository):
        """
        Initialize use case.

        Args:
            subscription_repository: Subscription repository
        """
        self.subscription_repository = subscription_repository

    async def execute(
        self, subscription_id: str, request: UpdateSubscriptionRequest
    ) -> None:
        """
        Update subscription.

        Args:
            subscription_id: Subscription ID string
            request: Partial update request

        Raises:
            ValidationError: If ID or field values are invalid
            NoUpdatesError: If request carries no field
            EntityNotFoundError: If subscription does not exist
            StorageError: If persistence fails
        """
        uuid_id = parse_uuid(subscription_id, "id")
        changes = build_subscription_changes(request)

        matched = await self.subscription_repository.apply_changes(uuid_id, changes)

        if not matched:
            raise EntityNotFoundError("Subscription", str(uuid_id))

        logger.info(
            "Subscription updated",
            extra={
                "subscription_id": str(uuid_id),
                "fields": [type(change).__name__ for change in changes],
            },
        )
