"""
Unit tests for SQLAlchemy SubscriptionRepository.

Statements are captured from a mocked session and compiled with the
PostgreSQL dialect, so no database is needed.

Usage:
    pytest tests/unit/infrastructure/test_subscription_repository.py
"""

import asyncio
import logging
from datetime import date
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import IntegrityError, OperationalError

from abonnement.domain.entities.subscription import Subscription
from abonnement.domain.exceptions import NoUpdatesError, StorageError, ValidationError
from abonnement.domain.value_objects.subscription_changes import (
    SetEndDate,
    SetPrice,
    SetServiceName,
)
from abonnement.domain.value_objects.subscription_filter import (
    CostQuery,
    SubscriptionFilter,
)
from abonnement.infrastructure.persistence.models import SubscriptionModel
from abonnement.infrastructure.persistence.repositories.subscription_repository import (  # noqa: E501
    SubscriptionRepository,
    escape_like,
)


@pytest.fixture
def session():
    session = AsyncMock()
    session.add = MagicMock()
    result = MagicMock()
    result.rowcount = 1
    session.execute.return_value = result
    return session


@pytest.fixture
def repo(session) -> SubscriptionRepository:
    return SubscriptionRepository(session)


def executed_sql(session):
    """Compile the last executed statement for PostgreSQL."""
    stmt = session.execute.call_args.args[0]
    compiled = stmt.compile(dialect=postgresql.dialect())
    return str(compiled), compiled.params


class TestEscapeLike:
    """Tests for LIKE wildcard escaping."""

    def test_escapes_wildcards(self):
        assert escape_like("50%_off") == "50\\%\\_off"

    def test_escapes_backslash_first(self):
        assert escape_like("a\\b") == "a\\\\b"

    def test_plain_text_unchanged(self):
        assert escape_like("Yandex Plus") == "Yandex Plus"


class TestCreate:
    """Tests for create."""

    async def test_sets_equal_timestamps(self, repo, session):
        subscription = Subscription(
            service_name="Netflix",
            price=999,
            user_id=uuid4(),
            start_date=date(2024, 1, 1),
        )

        result = await repo.create(subscription)

        model = session.add.call_args.args[0]
        assert isinstance(model, SubscriptionModel)
        assert model.id == subscription.id
        assert model.created_at == model.updated_at
        assert model.created_at.tzinfo is not None
        assert result.created_at == result.updated_at
        session.flush.assert_awaited_once()

    async def test_constraint_violation_becomes_storage_error(self, repo, session):
        backend = IntegrityError("INSERT", {}, Exception("check_price_non_negative"))
        session.flush.side_effect = backend

        with pytest.raises(StorageError) as exc_info:
            await repo.create(
                Subscription(
                    service_name="Netflix",
                    price=1,
                    user_id=uuid4(),
                    start_date=date(2024, 1, 1),
                )
            )

        assert exc_info.value.operation == "create"
        assert exc_info.value.__cause__ is backend
        assert "check_price" not in exc_info.value.message


class TestGetById:
    """Tests for get_by_id."""

    async def test_absent_returns_none(self, repo, session):
        session.execute.return_value.scalar_one_or_none.return_value = None
        subscription_id = uuid4()

        assert await repo.get_by_id(subscription_id) is None

        sql, params = executed_sql(session)
        assert "WHERE subscriptions.id = " in sql
        assert subscription_id in params.values()

    async def test_maps_model_to_entity(self, repo, session):
        model = SubscriptionModel(
            id=uuid4(),
            service_name="Spotify",
            price=199,
            user_id=uuid4(),
            start_date=date(2024, 3, 1),
            end_date=None,
        )
        session.execute.return_value.scalar_one_or_none.return_value = model

        result = await repo.get_by_id(model.id)

        assert result.id == model.id
        assert result.service_name == "Spotify"
        assert result.is_ongoing()


class TestApplyChanges:
    """Tests for apply_changes."""

    async def test_single_column_update(self, repo, session):
        subscription_id = uuid4()

        assert await repo.apply_changes(subscription_id, [SetPrice(500)]) is True

        sql, params = executed_sql(session)
        assert sql.startswith("UPDATE subscriptions SET")
        assert "price=" in sql
        assert "updated_at=" in sql
        assert "service_name" not in sql
        assert "end_date" not in sql
        assert params["price"] == 500

    async def test_clear_end_date_sets_null(self, repo, session):
        await repo.apply_changes(uuid4(), [SetEndDate(None)])

        sql, params = executed_sql(session)
        assert "end_date=" in sql
        assert params.get("end_date") is None

    async def test_all_changes_in_one_statement(self, repo, session):
        await repo.apply_changes(
            uuid4(),
            [SetServiceName("Kinopoisk"), SetPrice(299), SetEndDate(date(2025, 1, 1))],
        )

        session.execute.assert_awaited_once()
        _, params = executed_sql(session)
        assert params["service_name"] == "Kinopoisk"
        assert params["price"] == 299
        assert params["end_date"] == date(2025, 1, 1)

    async def test_no_row_matched(self, repo, session):
        session.execute.return_value.rowcount = 0

        assert await repo.apply_changes(uuid4(), [SetPrice(1)]) is False

    async def test_end_date_constraint_becomes_validation_error(self, repo, session):
        backend = IntegrityError(
            "UPDATE",
            {},
            Exception(
                'new row for relation "subscriptions" violates check '
                'constraint "check_end_date_after_start"'
            ),
        )
        session.execute.side_effect = backend

        with pytest.raises(ValidationError) as exc_info:
            await repo.apply_changes(uuid4(), [SetEndDate(date(2020, 1, 1))])

        assert exc_info.value.field == "end_date"
        assert exc_info.value.__cause__ is backend
        assert "relation" not in exc_info.value.message

    async def test_success_logs_duration(self, repo, session, caplog):
        logger_name = SubscriptionRepository.__module__

        with caplog.at_level(logging.DEBUG, logger=logger_name):
            await repo.apply_changes(uuid4(), [SetPrice(1)])

        messages = {r.getMessage(): r for r in caplog.records}
        record = messages["update subscription completed"]
        assert record.operation == "update subscription"
        assert record.duration_ms >= 0

    async def test_empty_changes_rejected(self, repo, session):
        with pytest.raises(NoUpdatesError):
            await repo.apply_changes(uuid4(), [])

        session.execute.assert_not_called()


class TestDelete:
    """Tests for delete."""

    async def test_deleted(self, repo, session):
        assert await repo.delete(uuid4()) is True

        sql, _ = executed_sql(session)
        assert sql.startswith("DELETE FROM subscriptions")

    async def test_nothing_deleted(self, repo, session):
        session.execute.return_value.rowcount = 0

        assert await repo.delete(uuid4()) is False


class TestListFiltered:
    """Tests for list_filtered."""

    async def test_unfiltered_unbounded(self, repo, session):
        session.execute.return_value.scalars.return_value.all.return_value = []

        result = await repo.list_filtered(SubscriptionFilter(limit=0))

        sql, _ = executed_sql(session)
        assert result == []
        assert "WHERE" not in sql
        assert "ORDER BY subscriptions.start_date DESC" in sql
        assert "LIMIT" not in sql
        assert "OFFSET" not in sql

    async def test_all_filters(self, repo, session):
        session.execute.return_value.scalars.return_value.all.return_value = []
        user_id = uuid4()

        await repo.list_filtered(
            SubscriptionFilter(
                user_id=user_id,
                service_name="50%",
                start_date=date(2024, 1, 1),
                end_date=date(2024, 12, 1),
                limit=5,
                offset=10,
            )
        )

        sql, params = executed_sql(session)
        assert "subscriptions.user_id = " in sql
        assert "ILIKE" in sql
        assert "ESCAPE" in sql
        assert "subscriptions.start_date >= " in sql
        assert "subscriptions.end_date IS NULL OR subscriptions.end_date <= " in sql
        assert "LIMIT" in sql
        assert "OFFSET" in sql
        assert user_id in params.values()
        assert "%50\\%%" in params.values()
        assert 5 in params.values()
        assert 10 in params.values()

    async def test_connection_failure_becomes_storage_error(self, repo, session):
        backend = OperationalError("SELECT", {}, Exception("connection refused"))
        session.execute.side_effect = backend

        with pytest.raises(StorageError) as exc_info:
            await repo.list_filtered(SubscriptionFilter())

        assert exc_info.value.operation == "list"
        assert exc_info.value.__cause__ is backend
        assert "connection refused" not in exc_info.value.message


class TestSumPrices:
    """Tests for sum_prices."""

    async def test_overlap_predicate(self, repo, session):
        session.execute.return_value.scalar_one.return_value = 350

        total = await repo.sum_prices(
            CostQuery(period_start=date(2024, 2, 1), period_end=date(2024, 2, 1))
        )

        sql, _ = executed_sql(session)
        assert total == 350
        assert "coalesce(sum(subscriptions.price)" in sql
        assert "subscriptions.start_date <= " in sql
        assert "subscriptions.end_date IS NULL OR subscriptions.end_date >= " in sql
        assert "ILIKE" not in sql

    async def test_service_name_exact_match(self, repo, session):
        session.execute.return_value.scalar_one.return_value = 0

        await repo.sum_prices(
            CostQuery(
                period_start=date(2024, 1, 1),
                period_end=date(2024, 12, 1),
                user_id=uuid4(),
                service_name="Yandex_Plus",
            )
        )

        sql, params = executed_sql(session)
        assert "ILIKE" in sql
        assert "subscriptions.user_id = " in sql
        assert "Yandex\\_Plus" in params.values()

    async def test_timeout_becomes_storage_error(self, repo, session):
        session.execute.side_effect = OSError("timed out")

        with pytest.raises(StorageError) as exc_info:
            await repo.sum_prices(
                CostQuery(period_start=date(2024, 1, 1), period_end=date(2024, 1, 1))
            )

        assert exc_info.value.operation == "aggregate"

    async def test_connect_timeout_becomes_storage_error(self, repo, session):
        session.execute.side_effect = asyncio.TimeoutError()

        with pytest.raises(StorageError) as exc_info:
            await repo.sum_prices(
                CostQuery(period_start=date(2024, 1, 1), period_end=date(2024, 1, 1))
            )

        assert exc_info.value.operation == "aggregate"
        assert isinstance(exc_info.value.__cause__, asyncio.TimeoutError)
