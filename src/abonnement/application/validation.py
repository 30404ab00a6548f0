"""
Request validation and normalization.

Converts untrusted request DTOs into validated domain values or raises
a field-tagged ValidationError. Nothing here touches storage.
"""

from datetime import date
from typing import Optional
from uuid import UUID

from abonnement.application.dto.subscription_dto import (
    AggregateCostRequest,
    CreateSubscriptionRequest,
    ListSubscriptionsRequest,
    UpdateSubscriptionRequest,
)
from abonnement.domain.entities.subscription import Subscription
from abonnement.domain.exceptions import NoUpdatesError, ValidationError
from abonnement.domain.value_objects.month import MONTH_FORMAT, parse_month
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


def parse_uuid(value: str, field: str = "id") -> UUID:
    """
    Parse identifier string into UUID.

    Args:
        value: UUID string
        field: Field name used to tag the error

    Returns:
        Parsed UUID

    Raises:
        ValidationError: If value is not a valid UUID
    """
    if not isinstance(value, str):
        raise ValidationError(field, "must be a UUID string")
    try:
        return UUID(value.strip())
    except ValueError:
        raise ValidationError(field, f"invalid UUID format: {value!r}")


def parse_month_field(value: str, field: str) -> date:
    """
    Parse "MM-YYYY" month into the first day of the month.

    Raises:
        ValidationError: If value is not a valid month, tagged with field
    """
    try:
        return parse_month(value)
    except ValueError:
        raise ValidationError(field, f"invalid date format, expected {MONTH_FORMAT}")


def require_non_negative_price(price: int) -> int:
    """Validate price is an integer >= 0."""
    if isinstance(price, bool) or not isinstance(price, int):
        raise ValidationError("price", "must be an integer")
    if price < 0:
        raise ValidationError("price", "must be greater than or equal to 0")
    return price


def require_service_name(service_name: str) -> str:
    """Validate service name is a non-blank string."""
    if not isinstance(service_name, str) or not service_name.strip():
        raise ValidationError("service_name", "must not be empty")
    return service_name


def _optional(value: Optional[str]) -> Optional[str]:
    """Treat blank filter strings as absent."""
    if value is None or not value.strip():
        return None
    return value


def build_subscription(request: CreateSubscriptionRequest) -> Subscription:
    """
    Build new Subscription entity from create request.

    Generates a fresh identifier. Timestamps stay unset until persisted.

    Raises:
        ValidationError: On malformed service name, price, user_id or
            dates, or when start_date is after end_date
    """
    service_name = require_service_name(request.service_name)
    price = require_non_negative_price(request.price)
    user_id = parse_uuid(request.user_id, "user_id")
    start_date = parse_month_field(request.start_date, "start_date")

    end_date = None
    if _optional(request.end_date) is not None:
        end_date = parse_month_field(request.end_date, "end_date")
        if end_date < start_date:
            raise ValidationError("end_date", "must not be before start_date")

    return Subscription(
        service_name=service_name,
        price=price,
        user_id=user_id,
        start_date=start_date,
        end_date=end_date,
    )


def build_subscription_changes(
    request: UpdateSubscriptionRequest,
) -> tuple[SubscriptionChange, ...]:
    """
    Build the set of changes for a partial update.

    Only supplied fields produce a change. An empty end_date clears
    the end date; an absent one leaves it untouched.

    Raises:
        ValidationError: On malformed field values
        NoUpdatesError: If no field was supplied
    """
    changes: list[SubscriptionChange] = []

    if request.service_name is not None:
        changes.append(SetServiceName(require_service_name(request.service_name)))

    if request.price is not None:
        changes.append(SetPrice(require_non_negative_price(request.price)))

    if request.end_date is not None:
        if request.end_date == "":
            changes.append(SetEndDate(None))
        else:
            changes.append(SetEndDate(parse_month_field(request.end_date, "end_date")))

    if not changes:
        raise NoUpdatesError()

    return tuple(changes)


def build_subscription_filter(request: ListSubscriptionsRequest) -> SubscriptionFilter:
    """
    Build validated listing filter.

    Raises:
        ValidationError: On malformed user_id or dates, or negative
            limit/offset
    """
    if request.limit < 0:
        raise ValidationError("limit", "must be non-negative")
    if request.offset < 0:
        raise ValidationError("offset", "must be non-negative")

    user_id = None
    if _optional(request.user_id) is not None:
        user_id = parse_uuid(request.user_id, "user_id")

    start_date = None
    if _optional(request.start_date) is not None:
        start_date = parse_month_field(request.start_date, "start_date")

    end_date = None
    if _optional(request.end_date) is not None:
        end_date = parse_month_field(request.end_date, "end_date")

    return SubscriptionFilter(
        user_id=user_id,
        service_name=_optional(request.service_name),
        start_date=start_date,
        end_date=end_date,
        limit=request.limit,
        offset=request.offset,
    )


def build_cost_query(request: AggregateCostRequest) -> CostQuery:
    """
    Build validated aggregation query.

    Raises:
        ValidationError: On malformed dates or user_id, or when the
            period start is after the period end ("date_range")
    """
    period_start = parse_month_field(request.start_date, "start_date")
    period_end = parse_month_field(request.end_date, "end_date")

    if period_start > period_end:
        raise ValidationError("date_range", "start_date must not be after end_date")

    user_id = None
    if _optional(request.user_id) is not None:
        user_id = parse_uuid(request.user_id, "user_id")

    return CostQuery(
        period_start=period_start,
        period_end=period_end,
        user_id=user_id,
        service_name=_optional(request.service_name),
    )
