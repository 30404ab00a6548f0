"""
Subscription domain exceptions.
"""

from abonnement.domain.exceptions.base import AbonnementException


class SubscriptionError(AbonnementException):
    """Base exception for subscription-related errors."""


class NoUpdatesError(SubscriptionError):
    """Raised when an update request carries no field to change."""

    def __init__(self):
        super().__init__("No fields to update", code="NO_UPDATES")
