"""
Test helpers.
"""

from tests.helpers.in_memory_repository import InMemorySubscriptionRepository

__all__ = ["InMemorySubscriptionRepository"]
