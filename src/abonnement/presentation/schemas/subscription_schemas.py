"""
Subscription API schemas.

Dates travel as "MM-YYYY" strings in both directions. Field values are
checked by the application layer so every failure carries the same
error shape.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, StrictInt

from abonnement.application.dto.subscription_dto import (
    CreateSubscriptionRequest,
    UpdateSubscriptionRequest,
)
from abonnement.domain.entities.subscription import Subscription
from abonnement.domain.value_objects.month import format_month

# ================================================================
# Request Schemas
# ================================================================


class CreateSubscriptionBody(BaseModel):
    """Request to declare a new subscription."""

    service_name: str = Field(
        ..., description="Service name", examples=["Yandex Plus"]
    )
    price: StrictInt = Field(..., description="Price as a non-negative integer")
    user_id: str = Field(..., description="Owner UUID")
    start_date: str = Field(
        ..., description="First month (MM-YYYY)", examples=["07-2025"]
    )
    end_date: Optional[str] = Field(
        None, description="Last month (MM-YYYY), omitted if ongoing"
    )

    def to_request(self) -> CreateSubscriptionRequest:
        """Convert to application DTO."""
        return CreateSubscriptionRequest(
            service_name=self.service_name,
            price=self.price,
            user_id=self.user_id,
            start_date=self.start_date,
            end_date=self.end_date,
        )


class UpdateSubscriptionBody(BaseModel):
    """
    Partial update request.

    Omitted or null fields stay unchanged. An empty end_date clears it.
    """

    service_name: Optional[str] = Field(None, description="New service name")
    price: Optional[StrictInt] = Field(None, description="New price")
    end_date: Optional[str] = Field(
        None, description='New last month (MM-YYYY), "" to mark ongoing'
    )

    def to_request(self) -> UpdateSubscriptionRequest:
        """Convert to application DTO."""
        return UpdateSubscriptionRequest(
            service_name=self.service_name,
            price=self.price,
            end_date=self.end_date,
        )


# ================================================================
# Response Schemas
# ================================================================


class SubscriptionResponse(BaseModel):
    """Stored subscription."""

    id: str
    service_name: str
    price: int
    user_id: str
    start_date: str = Field(..., description="MM-YYYY")
    end_date: Optional[str] = Field(None, description="MM-YYYY or null if ongoing")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, subscription: Subscription) -> "SubscriptionResponse":
        """Map domain entity to response."""
        return cls(
            id=str(subscription.id),
            service_name=subscription.service_name,
            price=subscription.price,
            user_id=str(subscription.user_id),
            start_date=format_month(subscription.start_date),
            end_date=(
                format_month(subscription.end_date) if subscription.end_date else None
            ),
            created_at=subscription.created_at,
            updated_at=subscription.updated_at,
        )


class SubscriptionListResponse(BaseModel):
    """One page of subscriptions."""

    data: List[SubscriptionResponse]
    limit: int
    offset: int
    total: int = Field(..., description="Number of items in this page")


class AggregateCostResponse(BaseModel):
    """Total price over a period."""

    total_price: int


class MessageResponse(BaseModel):
    """Acknowledgement of a mutation."""

    message: str
    id: str


class ErrorResponse(BaseModel):
    """Error body returned for every handled failure."""

    error: str = Field(..., description="Machine-readable error code")
    message: str
    field: Optional[str] = Field(None, description="Offending field, if any")
