"""
Unit tests for listing filter and cost query value objects.

Usage:
    pytest tests/unit/domain/test_subscription_filter.py
"""

from datetime import date

import pytest

from abonnement.domain.value_objects.subscription_changes import (
    SetEndDate,
    SetPrice,
)
from abonnement.domain.value_objects.subscription_filter import (
    CostQuery,
    SubscriptionFilter,
)


class TestSubscriptionFilter:
    """Tests for SubscriptionFilter."""

    def test_defaults(self):
        f = SubscriptionFilter()

        assert f.limit == 10
        assert f.offset == 0
        assert f.user_id is None

    def test_negative_limit_rejected(self):
        with pytest.raises(ValueError):
            SubscriptionFilter(limit=-1)

    def test_negative_offset_rejected(self):
        with pytest.raises(ValueError):
            SubscriptionFilter(offset=-5)

    def test_immutable(self):
        f = SubscriptionFilter()
        with pytest.raises(AttributeError):
            f.limit = 20


class TestCostQuery:
    """Tests for CostQuery."""

    def test_single_month_period(self):
        q = CostQuery(period_start=date(2024, 5, 1), period_end=date(2024, 5, 1))
        assert q.period_start == q.period_end

    def test_inverted_period_rejected(self):
        with pytest.raises(ValueError):
            CostQuery(period_start=date(2024, 6, 1), period_end=date(2024, 5, 1))


class TestSubscriptionChanges:
    """Tests for change set values."""

    def test_clear_end_date_is_distinct_from_setting_it(self):
        assert SetEndDate(None) != SetEndDate(date(2024, 5, 1))

    def test_changes_compare_by_value(self):
        assert SetPrice(100) == SetPrice(100)
