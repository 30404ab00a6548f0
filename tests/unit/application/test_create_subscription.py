"""
Unit tests for CreateSubscription use case.

Usage:
    pytest tests/unit/application/test_create_subscription.py
"""

from datetime import date
from unittest.mock import AsyncMock
from uuid import UUID

import pytest

from abonnement.application.dto.subscription_dto import CreateSubscriptionRequest
from abonnement.application.use_cases.create_subscription import CreateSubscription
from abonnement.domain.exceptions import StorageError, ValidationError


class TestCreateSubscription:
    """Unit tests for CreateSubscription use case."""

    # ============================================================
    # Success tests
    # ============================================================

    async def test_create_persists_and_returns_stored(self, repository, user_id):
        """Test created subscription is stored with timestamps."""
        use_case = CreateSubscription(subscription_repository=repository)

        result = await use_case.execute(
            CreateSubscriptionRequest(
                service_name="Yandex Plus",
                price=400,
                user_id=str(user_id),
                start_date="07-2025",
            )
        )

        assert result.service_name == "Yandex Plus"
        assert result.price == 400
        assert result.user_id == user_id
        assert result.start_date == date(2025, 7, 1)
        assert result.end_date is None
        assert result.created_at is not None
        assert result.created_at == result.updated_at
        assert result.id in repository.rows

    async def test_create_passes_entity_to_repository(self):
        mock_repo = AsyncMock()
        mock_repo.create.side_effect = lambda subscription: subscription

        use_case = CreateSubscription(subscription_repository=mock_repo)
        result = await use_case.execute(
            CreateSubscriptionRequest(
                service_name="Netflix",
                price=0,
                user_id="0f8fad5b-d9cb-469f-a165-70867728950e",
                start_date="01-2024",
                end_date="03-2024",
            )
        )

        mock_repo.create.assert_called_once()
        stored = mock_repo.create.call_args.args[0]
        assert stored is result
        assert stored.user_id == UUID("0f8fad5b-d9cb-469f-a165-70867728950e")
        assert stored.end_date == date(2024, 3, 1)

    # ============================================================
    # Error tests
    # ============================================================

    async def test_invalid_request_never_reaches_repository(self):
        mock_repo = AsyncMock()
        use_case = CreateSubscription(subscription_repository=mock_repo)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                CreateSubscriptionRequest(
                    service_name="Netflix",
                    price=-100,
                    user_id="0f8fad5b-d9cb-469f-a165-70867728950e",
                    start_date="01-2024",
                )
            )

        assert exc_info.value.field == "price"
        mock_repo.create.assert_not_called()

    async def test_storage_error_propagates(self):
        mock_repo = AsyncMock()
        mock_repo.create.side_effect = StorageError("create")
        use_case = CreateSubscription(subscription_repository=mock_repo)

        with pytest.raises(StorageError) as exc_info:
            await use_case.execute(
                CreateSubscriptionRequest(
                    service_name="Netflix",
                    price=100,
                    user_id="0f8fad5b-d9cb-469f-a165-70867728950e",
                    start_date="01-2024",
                )
            )

        assert exc_info.value.operation == "create"
