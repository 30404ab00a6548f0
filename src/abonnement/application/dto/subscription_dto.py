"""
Subscription Data Transfer Objects - Application Layer.

Raw, unvalidated request shapes handed over by the presentation layer.
Normalization into domain values lives in abonnement.application.validation.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class CreateSubscriptionRequest:
    """Request DTO for creating subscription."""

    service_name: str
    price: int
    user_id: str
    start_date: str  # MM-YYYY
    end_date: Optional[str] = None  # MM-YYYY


@dataclass
class UpdateSubscriptionRequest:
    """
    Request DTO for partial subscription update.

    end_date: None leaves it unchanged, "" clears it, "MM-YYYY" sets it.
    """

    service_name: Optional[str] = None
    price: Optional[int] = None
    end_date: Optional[str] = None


@dataclass
class ListSubscriptionsRequest:
    """Request DTO for filtered, paginated listing."""

    user_id: Optional[str] = None
    service_name: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    limit: int = 10
    offset: int = 0


@dataclass
class AggregateCostRequest:
    """Request DTO for summing subscription prices over a period."""

    start_date: str
    end_date: str
    user_id: Optional[str] = None
    service_name: Optional[str] = None
