"""
PostgreSQL persistence layer.
"""

from abonnement.infrastructure.persistence.database import Database
from abonnement.infrastructure.persistence.models import Base, SubscriptionModel

__all__ = ["Database", "Base", "SubscriptionModel"]
