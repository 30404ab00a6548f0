"""
Subscription repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from uuid import UUID

from abonnement.domain.entities.subscription import Subscription
from abonnement.domain.value_objects.subscription_changes import SubscriptionChange
from abonnement.domain.value_objects.subscription_filter import (
    CostQuery,
    SubscriptionFilter,
)


class ISubscriptionRepository(ABC):
    """
    Abstract repository interface for Subscription entity persistence.

    Implementations raise StorageError for any backend failure.
    """

    @abstractmethod
    async def create(self, subscription: Subscription) -> Subscription:
        """
        Persist a new subscription.

        Args:
            subscription: Fully-formed subscription entity

        Returns:
            Stored subscription with created_at/updated_at assigned
        """

    @abstractmethod
    async def get_by_id(self, subscription_id: UUID) -> Optional[Subscription]:
        """
        Retrieve subscription by ID.

        Args:
            subscription_id: Subscription unique identifier

        Returns:
            Subscription entity if found, None otherwise
        """

    @abstractmethod
    async def apply_changes(
        self, subscription_id: UUID, changes: Sequence[SubscriptionChange]
    ) -> bool:
        """
        Apply a non-empty set of changes and advance updated_at.

        Args:
            subscription_id: Subscription unique identifier
            changes: Changes to apply in a single statement

        Returns:
            True if a row matched, False otherwise
        """

    @abstractmethod
    async def delete(self, subscription_id: UUID) -> bool:
        """
        Delete subscription by ID.

        Args:
            subscription_id: Subscription unique identifier

        Returns:
            True if a row was removed, False otherwise
        """

    @abstractmethod
    async def list_filtered(
        self, subscription_filter: SubscriptionFilter
    ) -> list[Subscription]:
        """
        List subscriptions matching filter, newest start date first.

        Args:
            subscription_filter: Validated filter and pagination window

        Returns:
            List of subscription entities (possibly empty)
        """

    @abstractmethod
    async def sum_prices(self, query: CostQuery) -> int:
        """
        Sum prices of subscriptions overlapping the query period.

        Args:
            query: Validated period and filters

        Returns:
            Total price, 0 if nothing overlaps
        """
