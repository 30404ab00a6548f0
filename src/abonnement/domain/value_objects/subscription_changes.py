"""
Subscription changes - closed set of partial update operations.

An update is expressed as a tuple of these values. Fields that are
not supplied have no entry; clearing the end date is SetEndDate(None).
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union


@dataclass(frozen=True)
class SetServiceName:
    """Replace the service name."""

    service_name: str


@dataclass(frozen=True)
class SetPrice:
    """Replace the price (minor currency units)."""

    price: int


@dataclass(frozen=True)
class SetEndDate:
    """Set the end month, or clear it with None (ongoing)."""

    end_date: Optional[date]


SubscriptionChange = Union[SetServiceName, SetPrice, SetEndDate]
