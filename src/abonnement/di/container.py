"""
Dependency Injection Container for Abonnement.

Owns the database and builds session-scoped repositories and use cases.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from abonnement.application.use_cases import (
    AggregateSubscriptionCosts,
    CreateSubscription,
    DeleteSubscription,
    GetSubscription,
    ListSubscriptions,
    UpdateSubscription,
)
from abonnement.config.settings import Settings
from abonnement.domain.repositories.i_subscription_repository import (
    ISubscriptionRepository,
)
from abonnement.infrastructure.persistence.database import Database
from abonnement.infrastructure.persistence.repositories.subscription_repository import (  # noqa: E501
    SubscriptionRepository,
)


class DIContainer:
    """
    Dependency Injection Container.

    One instance per application, built from an explicit Settings
    object and stored on app.state. Repositories and use cases are
    session-scoped and never cached.
    """

    def __init__(self, settings: Settings):
        """
        Initialize container.

        Args:
            settings: Application settings
        """
        self.settings = settings
        self._database: Optional[Database] = None

    async def initialize(self) -> None:
        """Establish database connection."""
        await self.database.connect()

    async def shutdown(self) -> None:
        """Close database connection."""
        if self._database:
            await self._database.disconnect()

    # Infrastructure Getters

    @property
    def database(self) -> Database:
        """Get database instance."""
        if self._database is None:
            self._database = Database(
                database_url=self.settings.DATABASE_URL,
                echo=self.settings.DATABASE_ECHO,
                pool_size=self.settings.DATABASE_POOL_SIZE,
                max_overflow=self.settings.DATABASE_MAX_OVERFLOW,
                pool_timeout=self.settings.DATABASE_POOL_TIMEOUT,
                pool_recycle=self.settings.DATABASE_POOL_RECYCLE,
            )
        return self._database

    # Repository Factories (session-scoped)

    def get_subscription_repository(
        self, session: AsyncSession
    ) -> ISubscriptionRepository:
        """Create subscription repository bound to session."""
        return SubscriptionRepository(session)

    # Use Case Factories (session-scoped)

    def get_create_subscription(self, session: AsyncSession) -> CreateSubscription:
        """Create CreateSubscription use case."""
        return CreateSubscription(
            subscription_repository=self.get_subscription_repository(session)
        )

    def get_get_subscription(self, session: AsyncSession) -> GetSubscription:
        """Create GetSubscription use case."""
        return GetSubscription(
            subscription_repository=self.get_subscription_repository(session)
        )

    def get_update_subscription(self, session: AsyncSession) -> UpdateSubscription:
        """Create UpdateSubscription use case."""
        return UpdateSubscription(
            subscription_repository=self.get_subscription_repository(session)
        )

    def get_delete_subscription(self, session: AsyncSession) -> DeleteSubscription:
        """Create DeleteSubscription use case."""
        return DeleteSubscription(
            subscription_repository=self.get_subscription_repository(session)
        )

    def get_list_subscriptions(self, session: AsyncSession) -> ListSubscriptions:
        """Create ListSubscriptions use case."""
        return ListSubscriptions(
            subscription_repository=self.get_subscription_repository(session)
        )

    def get_aggregate_subscription_costs(
        self, session: AsyncSession
    ) -> AggregateSubscriptionCosts:
        """Create AggregateSubscriptionCosts use case."""
        return AggregateSubscriptionCosts(
            subscription_repository=self.get_subscription_repository(session)
        )
