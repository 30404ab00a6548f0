"""
Subscription entity - Domain model for a declared service subscription.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from abonnement.domain.exceptions import ValidationError


@dataclass
class Subscription:
    """
    Subscription entity representing a priced service used by a user.

    Business rules:
    - Price is an integer amount of minor currency units, never negative
    - Service name is required
    - End date, when present, is not before start date
    - No end date means the subscription is ongoing
    - Timestamps are assigned by the persistence layer
    """

    service_name: str
    price: int
    user_id: UUID
    start_date: date
    end_date: Optional[date] = None
    id: UUID = field(default_factory=uuid4)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate subscription data after initialization."""
        if not self.service_name or not self.service_name.strip():
            raise ValidationError("service_name", "must not be empty")

        if isinstance(self.price, bool) or not isinstance(self.price, int):
            raise ValidationError("price", "must be an integer")

        if self.price < 0:
            raise ValidationError("price", "must be greater than or equal to 0")

        if self.end_date is not None and self.end_date < self.start_date:
            raise ValidationError("end_date", "must not be before start_date")

    def is_ongoing(self) -> bool:
        """Check if subscription has no end date."""
        return self.end_date is None

    def overlaps(self, period_start: date, period_end: date) -> bool:
        """Check if subscription is active at any point of the period."""
        if self.start_date > period_end:
            return False
        return self.end_date is None or self.end_date >= period_start
