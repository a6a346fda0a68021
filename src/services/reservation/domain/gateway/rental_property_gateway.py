from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from returns.result import Result

from services.reservation.domain.entity.reservation import Reservation
from services.reservation.domain.enum.booking_error_kind import BookingErrorKind
from services.reservation.domain.value_object.access_token import AccessToken
from services.reservation.domain.value_object.confirmation_number import (
    ConfirmationNumber,
)


@dataclass(frozen=True)
class BookingError:
    """レンタル API 予約の失敗"""

    kind: BookingErrorKind
    message: str

    @classmethod
    def unauthorized(cls, message: str) -> BookingError:
        return cls(kind=BookingErrorKind.UNAUTHORIZED, message=message)

    @classmethod
    def other(cls, message: str) -> BookingError:
        return cls(kind=BookingErrorKind.OTHER, message=message)

    @property
    def is_unauthorized(self) -> bool:
        return self.kind == BookingErrorKind.UNAUTHORIZED


class RentalPropertyGateway(ABC):
    """外部レンタル API のインターフェース"""

    @abstractmethod
    def reserve(
        self, token: AccessToken, reservation: Reservation
    ) -> Result[ConfirmationNumber, BookingError]:
        """物件を予約する（取り消し不可の外部操作）

        トークンが拒否された場合は BookingErrorKind.UNAUTHORIZED の Failure を返す。
        """
        raise NotImplementedError
