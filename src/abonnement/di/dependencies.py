"""
FastAPI dependency injection.

Provides dependencies for FastAPI routes using the DI container
stored on the application state.
"""

from typing import AsyncGenerator

from fastapi import Depends, Request
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
from abonnement.di.container import DIContainer

# ================================================================
# Container Dependencies
# ================================================================


def get_container(request: Request) -> DIContainer:
    """Get DI container of the application serving the request."""
    return request.app.state.container


def get_settings(container: DIContainer = Depends(get_container)) -> Settings:
    """Get application settings."""
    return container.settings


# ================================================================
# Database Dependencies
# ================================================================


async def get_db_session(
    container: DIContainer = Depends(get_container),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session dependency.

    Yields async database session from container.
    Commits after the route returns, rolls back if it raises.
    """
    async with container.database.session() as session:
        yield session


# ================================================================
# Use Case Dependencies
# ================================================================


def get_create_subscription(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> CreateSubscription:
    """Get CreateSubscription use case dependency."""
    return container.get_create_subscription(session)


def get_get_subscription(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> GetSubscription:
    """Get GetSubscription use case dependency."""
    return container.get_get_subscription(session)


def get_update_subscription(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> UpdateSubscription:
    """Get UpdateSubscription use case dependency."""
    return container.get_update_subscription(session)


def get_delete_subscription(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> DeleteSubscription:
    """Get DeleteSubscription use case dependency."""
    return container.get_delete_subscription(session)


def get_list_subscriptions(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> ListSubscriptions:
    """Get ListSubscriptions use case dependency."""
    return container.get_list_subscriptions(session)


def get_aggregate_subscription_costs(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> AggregateSubscriptionCosts:
    """Get AggregateSubscriptionCosts use case dependency."""
    return container.get_aggregate_subscription_costs(session)
