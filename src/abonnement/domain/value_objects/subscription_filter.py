"""
Validated query values for listing and aggregating subscriptions.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class SubscriptionFilter:
    """
    Filter and pagination window for listing subscriptions.

    Business rules:
    - start_date is an inclusive lower bound on the subscription start
    - end_date is an inclusive upper bound on the subscription end;
      ongoing subscriptions (no end) always satisfy it
    - limit 0 means unbounded, offset 0 means from the first row
    """

    user_id: Optional[UUID] = None
    service_name: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    limit: int = 10
    offset: int = 0

    def __post_init__(self):
        """Validate pagination window."""
        if self.limit < 0:
            raise ValueError("limit must be non-negative")
        if self.offset < 0:
            raise ValueError("offset must be non-negative")


@dataclass(frozen=True)
class CostQuery:
    """
    Period and optional filters for summing subscription prices.

    Every subscription whose active interval overlaps
    [period_start, period_end] contributes its full price.
    """

    period_start: date
    period_end: date
    user_id: Optional[UUID] = None
    service_name: Optional[str] = None

    def __post_init__(self):
        """Validate period ordering."""
        if self.period_start > self.period_end:
            raise ValueError("period_start must not be after period_end")
