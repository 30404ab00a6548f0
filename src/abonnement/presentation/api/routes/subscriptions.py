"""
Subscription management API routes.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from abonnement.application.dto.subscription_dto import (
    AggregateCostRequest,
    ListSubscriptionsRequest,
)
from abonnement.application.use_cases import (
    AggregateSubscriptionCosts,
    CreateSubscription,
    DeleteSubscription,
    GetSubscription,
    ListSubscriptions,
    UpdateSubscription,
)
from abonnement.config.settings import Settings
from abonnement.di.dependencies import (
    get_aggregate_subscription_costs,
    get_create_subscription,
    get_delete_subscription,
    get_get_subscription,
    get_list_subscriptions,
    get_settings,
    get_update_subscription,
)
from abonnement.domain.exceptions import EntityNotFoundError
from abonnement.presentation.schemas.subscription_schemas import (
    AggregateCostResponse,
    CreateSubscriptionBody,
    ErrorResponse,
    MessageResponse,
    SubscriptionListResponse,
    SubscriptionResponse,
    UpdateSubscriptionBody,
)

router = APIRouter(
    prefix="/subscriptions",
    tags=["subscriptions"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
    },
)


@router.post(
    "/",
    response_model=SubscriptionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create subscription",
    description="Declare a new subscription for a user",
)
async def create_subscription(
    body: CreateSubscriptionBody,
    create_subscription_use_case: CreateSubscription = Depends(get_create_subscription),
) -> SubscriptionResponse:
    """Create a new subscription and return the stored record."""
    subscription = await create_subscription_use_case.execute(body.to_request())

    return SubscriptionResponse.from_entity(subscription)


@router.get(
    "/",
    response_model=SubscriptionListResponse,
    summary="List subscriptions",
    description="Filtered, paginated listing ordered by start date (newest first)",
)
async def list_subscriptions(
    user_id: Optional[str] = Query(None, description="Owner UUID"),
    service_name: Optional[str] = Query(
        None, description="Case-insensitive substring of the service name"
    ),
    start_date: Optional[str] = Query(
        None, description="Only subscriptions starting on or after (MM-YYYY)"
    ),
    end_date: Optional[str] = Query(
        None, description="Only subscriptions ending on or before (MM-YYYY)"
    ),
    limit: Optional[int] = Query(None, description="Page size, 0 for all"),
    offset: int = Query(0, description="Rows to skip"),
    settings: Settings = Depends(get_settings),
    list_subscriptions_use_case: ListSubscriptions = Depends(get_list_subscriptions),
) -> SubscriptionListResponse:
    """
    List subscriptions.

    Ongoing subscriptions always pass the end_date filter.
    """
    if limit is None:
        limit = settings.DEFAULT_PAGE_SIZE

    subscriptions = await list_subscriptions_use_case.execute(
        ListSubscriptionsRequest(
            user_id=user_id,
            service_name=service_name,
            start_date=start_date,
            end_date=end_date,
            limit=limit,
            offset=offset,
        )
    )

    return SubscriptionListResponse(
        data=[SubscriptionResponse.from_entity(s) for s in subscriptions],
        limit=limit,
        offset=offset,
        total=len(subscriptions),
    )


@router.get(
    "/aggregate",
    response_model=AggregateCostResponse,
    summary="Total subscription cost",
    description=(
        "Sum of prices of subscriptions active at any point between "
        "start_date and end_date (inclusive, MM-YYYY)"
    ),
)
async def aggregate_subscription_costs(
    start_date: str = Query(..., description="Period start (MM-YYYY)"),
    end_date: str = Query(..., description="Period end (MM-YYYY)"),
    user_id: Optional[str] = Query(None, description="Owner UUID"),
    service_name: Optional[str] = Query(
        None, description="Exact service name, case-insensitive"
    ),
    aggregate_use_case: AggregateSubscriptionCosts = Depends(
        get_aggregate_subscription_costs
    ),
) -> AggregateCostResponse:
    """Compute total price over a period."""
    total_price = await aggregate_use_case.execute(
        AggregateCostRequest(
            start_date=start_date,
            end_date=end_date,
            user_id=user_id,
            service_name=service_name,
        )
    )

    return AggregateCostResponse(total_price=total_price)


@router.get(
    "/{subscription_id}",
    response_model=SubscriptionResponse,
    summary="Get subscription",
    responses={404: {"model": ErrorResponse, "description": "Not found"}},
)
async def get_subscription(
    subscription_id: str,
    get_subscription_use_case: GetSubscription = Depends(get_get_subscription),
) -> SubscriptionResponse:
    """Get subscription by ID."""
    subscription = await get_subscription_use_case.execute(subscription_id)

    if subscription is None:
        raise EntityNotFoundError("Subscription", subscription_id)

    return SubscriptionResponse.from_entity(subscription)


@router.put(
    "/{subscription_id}",
    response_model=MessageResponse,
    summary="Update subscription",
    description="Partial update, only supplied fields change",
    responses={404: {"model": ErrorResponse, "description": "Not found"}},
)
@router.patch(
    "/{subscription_id}",
    response_model=MessageResponse,
    summary="Update subscription",
    description="Partial update, only supplied fields change",
    responses={404: {"model": ErrorResponse, "description": "Not found"}},
)
async def update_subscription(
    subscription_id: str,
    body: UpdateSubscriptionBody,
    update_subscription_use_case: UpdateSubscription = Depends(get_update_subscription),
) -> MessageResponse:
    """Update subscription fields."""
    await update_subscription_use_case.execute(subscription_id, body.to_request())

    return MessageResponse(
        message="Subscription updated successfully", id=subscription_id
    )


@router.delete(
    "/{subscription_id}",
    response_model=MessageResponse,
    summary="Delete subscription",
    responses={404: {"model": ErrorResponse, "description": "Not found"}},
)
async def delete_subscription(
    subscription_id: str,
    delete_subscription_use_case: DeleteSubscription = Depends(get_delete_subscription),
) -> MessageResponse:
    """Delete subscription permanently."""
    await delete_subscription_use_case.execute(subscription_id)

    return MessageResponse(
        message="Subscription deleted successfully", id=subscription_id
    )
