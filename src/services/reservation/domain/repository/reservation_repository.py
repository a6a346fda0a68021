from abc import ABC, abstractmethod
from datetime import date

from services.reservation.domain.entity.reservation import (
    ExistingReservation,
    Reservation,
)
from services.reservation.domain.value_object.confirmation_number import (
    ConfirmationNumber,
)


class ReservationRepository(ABC):
    """予約レポジトリのインターフェース"""

    @abstractmethod
    def find_by_date(self, reservation_date: date) -> list[ExistingReservation]:
        """指定日の既存予約を取得する"""
        raise NotImplementedError

    @abstractmethod
    def save(
        self, reservation: Reservation, confirmation_number: ConfirmationNumber
    ) -> None:
        """確定した予約を保存する"""
        raise NotImplementedError
