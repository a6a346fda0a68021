from datetime import date, datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from services.reservation.applications.reserve_property import ReservePropertyService
from services.reservation.domain.entity import ExistingReservation, ReservationRequest
from services.reservation.domain.value_object import AccessToken, ConfirmationNumber
from returns.result import Success


@pytest.fixture
def create_request(today):
    """ReservationRequest を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        email: str = "a@x.com",
        days_out: int = 30,
        property_name: str = "P1",
    ) -> ReservationRequest:
        return ReservationRequest(
            email=email,
            reservation_date=today + timedelta(days=days_out),
            property_name=property_name,
        )

    return _factory


@pytest.fixture
def create_token():
    def _factory(
        value: str = "eydaslkjf",
        expires_at: datetime = datetime(2099, 1, 1, tzinfo=timezone.utc),
    ) -> AccessToken:
        return AccessToken(value=value, expires_at=expires_at)

    return _factory


@pytest.fixture
def existing_reservations(today) -> list[ExistingReservation]:
    """a@x.com が P1 を、b@x.com が P2 を today+7 に予約済み"""
    day = today + timedelta(days=7)
    return [
        ExistingReservation(email="a@x.com", reservation_date=day, property_name="P1"),
        ExistingReservation(email="b@x.com", reservation_date=day, property_name="P2"),
    ]


@pytest.fixture
def mock_repository(existing_reservations):
    """既存予約を日付で絞り込んで返すリポジトリのモック"""
    repository = MagicMock()

    def _find_by_date(reservation_date: date) -> list[ExistingReservation]:
        return [
            r for r in existing_reservations if r.reservation_date == reservation_date
        ]

    repository.find_by_date.side_effect = _find_by_date
    return repository


@pytest.fixture
def mock_token_provider(create_token):
    provider = MagicMock()
    provider.find_token.return_value = create_token()
    return provider


@pytest.fixture
def mock_gateway():
    gateway = MagicMock()
    gateway.reserve.return_value = Success(ConfirmationNumber(value=123))
    return gateway


@pytest.fixture
def service(mock_repository, mock_token_provider, mock_gateway, today):
    return ReservePropertyService(
        repository=mock_repository,
        token_provider=mock_token_provider,
        gateway=mock_gateway,
        clock=lambda: today,
    )
