"""
Subscription repository implementation using SQLAlchemy.
"""

import asyncio
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator, Optional, Sequence
from uuid import UUID

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from abonnement.domain.entities.subscription import Subscription
from abonnement.domain.exceptions import (
    NoUpdatesError,
    StorageError,
    ValidationError,
)
from abonnement.domain.repositories.i_subscription_repository import (
    ISubscriptionRepository,
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
from abonnement.infrastructure.monitoring import get_logger, log_performance, metrics
from abonnement.infrastructure.persistence.models import SubscriptionModel

logger = get_logger(__name__)

END_DATE_CONSTRAINT = "check_end_date_after_start"


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _change_to_column(change: SubscriptionChange) -> tuple[str, Any]:
    """Map a change to the single column it is allowed to touch."""
    if isinstance(change, SetServiceName):
        return "service_name", change.service_name
    if isinstance(change, SetPrice):
        return "price", change.price
    if isinstance(change, SetEndDate):
        return "end_date", change.end_date
    raise TypeError(f"Unsupported subscription change: {change!r}")


class SubscriptionRepository(ISubscriptionRepository):
    """
    SQLAlchemy implementation of subscription repository.

    Handles Subscription entity persistence in PostgreSQL. Backend
    failures are logged with their raw detail and surfaced as
    StorageError carrying only the operation name.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @contextmanager
    def _storage_operation(self, operation: str) -> Iterator[None]:
        """Time a storage operation and translate backend failures."""
        start_time = time.perf_counter()
        try:
            yield
        except (SQLAlchemyError, OSError, asyncio.TimeoutError) as e:
            metrics.db_queries_total.labels(operation=operation, outcome="error").inc()
            if isinstance(e, IntegrityError) and END_DATE_CONSTRAINT in str(e.orig):
                logger.warning(
                    f"Rejected {operation} of subscription: {e}",
                    extra={"operation": operation},
                )
                raise ValidationError(
                    "end_date", "must not be before start_date"
                ) from e
            logger.error(
                f"Failed to {operation} subscription: {e}",
                extra={"operation": operation},
            )
            raise StorageError(operation) from e
        else:
            metrics.db_queries_total.labels(
                operation=operation, outcome="success"
            ).inc()
            log_performance(logger, f"{operation} subscription", start_time)
        finally:
            metrics.db_query_duration_seconds.labels(operation=operation).observe(
                time.perf_counter() - start_time
            )

    async def create(self, subscription: Subscription) -> Subscription:
        """
        Insert a new subscription.

        Args:
            subscription: Subscription entity to persist

        Returns:
            Stored subscription with timestamps set

        Raises:
            StorageError: On constraint violation or connectivity failure
        """
        now = datetime.now(timezone.utc)
        model = SubscriptionModel(
            id=subscription.id,
            service_name=subscription.service_name,
            price=subscription.price,
            user_id=subscription.user_id,
            start_date=subscription.start_date,
            end_date=subscription.end_date,
            created_at=now,
            updated_at=now,
        )

        with self._storage_operation("create"):
            self.session.add(model)
            await self.session.flush()

        metrics.subscriptions_mutations_total.labels(operation="create").inc()
        return self._to_entity(model)

    async def get_by_id(self, subscription_id: UUID) -> Optional[Subscription]:
        """
        Retrieve subscription by ID.

        Args:
            subscription_id: Subscription unique identifier

        Returns:
            Subscription entity if found, None otherwise
        """
        stmt = select(SubscriptionModel).where(SubscriptionModel.id == subscription_id)

        with self._storage_operation("get"):
            result = await self.session.execute(stmt)
            model = result.scalar_one_or_none()

        return self._to_entity(model) if model else None

    async def apply_changes(
        self, subscription_id: UUID, changes: Sequence[SubscriptionChange]
    ) -> bool:
        """
        Apply a partial update in a single statement.

        Args:
            subscription_id: Subscription unique identifier
            changes: Changes to apply, at most one per column

        Returns:
            True if a row matched, False otherwise

        Raises:
            NoUpdatesError: If changes is empty
            ValidationError: If end_date would precede the stored start_date
            StorageError: On constraint violation or connectivity failure
        """
        if not changes:
            raise NoUpdatesError()

        values = dict(_change_to_column(change) for change in changes)
        values["updated_at"] = datetime.now(timezone.utc)

        stmt = (
            update(SubscriptionModel)
            .where(SubscriptionModel.id == subscription_id)
            .values(**values)
        )

        with self._storage_operation("update"):
            result = await self.session.execute(stmt)

        if result.rowcount:
            metrics.subscriptions_mutations_total.labels(operation="update").inc()
        return result.rowcount > 0

    async def delete(self, subscription_id: UUID) -> bool:
        """
        Delete subscription by ID.

        Returns:
            True if a row was removed, False otherwise
        """
        stmt = delete(SubscriptionModel).where(SubscriptionModel.id == subscription_id)

        with self._storage_operation("delete"):
            result = await self.session.execute(stmt)

        if result.rowcount:
            metrics.subscriptions_mutations_total.labels(operation="delete").inc()
        return result.rowcount > 0

    async def list_filtered(
        self, subscription_filter: SubscriptionFilter
    ) -> list[Subscription]:
        """
        List subscriptions matching filter, newest start first.

        Args:
            subscription_filter: Filters and pagination window

        Returns:
            List of subscriptions (empty if none match)
        """
        stmt = select(SubscriptionModel)

        if subscription_filter.user_id is not None:
            stmt = stmt.where(SubscriptionModel.user_id == subscription_filter.user_id)

        if subscription_filter.service_name:
            pattern = f"%{escape_like(subscription_filter.service_name)}%"
            stmt = stmt.where(
                SubscriptionModel.service_name.ilike(pattern, escape="\\")
            )

        if subscription_filter.start_date is not None:
            stmt = stmt.where(
                SubscriptionModel.start_date >= subscription_filter.start_date
            )

        if subscription_filter.end_date is not None:
            stmt = stmt.where(
                or_(
                    SubscriptionModel.end_date.is_(None),
                    SubscriptionModel.end_date <= subscription_filter.end_date,
                )
            )

        stmt = stmt.order_by(SubscriptionModel.start_date.desc())

        if subscription_filter.limit > 0:
            stmt = stmt.limit(subscription_filter.limit)
        if subscription_filter.offset > 0:
            stmt = stmt.offset(subscription_filter.offset)

        with self._storage_operation("list"):
            result = await self.session.execute(stmt)
            models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    async def sum_prices(self, query: CostQuery) -> int:
        """
        Sum prices of subscriptions overlapping the period.

        A subscription overlaps when it starts on or before the period
        end and is ongoing or ends on or after the period start.

        Args:
            query: Period and optional filters

        Returns:
            Total price, 0 when nothing overlaps
        """
        stmt = select(func.coalesce(func.sum(SubscriptionModel.price), 0)).where(
            SubscriptionModel.start_date <= query.period_end,
            or_(
                SubscriptionModel.end_date.is_(None),
                SubscriptionModel.end_date >= query.period_start,
            ),
        )

        if query.user_id is not None:
            stmt = stmt.where(SubscriptionModel.user_id == query.user_id)

        if query.service_name:
            stmt = stmt.where(
                SubscriptionModel.service_name.ilike(
                    escape_like(query.service_name), escape="\\"
                )
            )

        with self._storage_operation("aggregate"):
            result = await self.session.execute(stmt)
            total = result.scalar_one()

        return int(total)

    def _to_entity(self, model: SubscriptionModel) -> Subscription:
        """
        Convert SQLAlchemy model to domain entity.

        Args:
            model: SQLAlchemy model instance

        Returns:
            Subscription domain entity
        """
        return Subscription(
            id=model.id,
            service_name=model.service_name,
            price=model.price,
            user_id=model.user_id,
            start_date=model.start_date,
            end_date=model.end_date,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
