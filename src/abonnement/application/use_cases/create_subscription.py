"""
Create subscription use case.

Validates the create request and persists a new subscription.
"""

import logging

from abonnement.application.dto.subscription_dto import CreateSubscriptionRequest
from abonnement.application.validation import build_subscription
from abonnement.domain.entities.subscription import Subscription
from abonnement.domain.repositories.i_subscription_repository import (
    ISubscriptionRepository,
)

logger = logging.getLogger(__name__)


class CreateSubscription:
    """
    Use case for creating a subscription.

    Flow:
    1. Normalize request into a Subscription entity (fresh ID)
    2. Persist it (timestamps assigned by repository)
    3. Return stored subscription
    """

    def __init__(self, subscription_repository: ISubscriptionRepository):
        """
        Initialize use case.

        Args:
            subscription_repository: Subscription repository
        """
        self.subscription_repository = subscription_repository

    async def execute(self, request: CreateSubscriptionRequest) -> Subscription:
        """
        Create subscription.

        Args:
            request: Raw create request

        Returns:
            Created subscription entity

        Raises:
            ValidationError: If request data is invalid
            StorageError: If persistence fails
        """
        subscription = build_subscription(request)

        created = await self.subscription_repository.create(subscription)

        logger.info(
            "Subscription created",
            extra={
                "subscription_id": str(created.id),
                "user_id": str(created.user_id),
            },
        )

        return created
