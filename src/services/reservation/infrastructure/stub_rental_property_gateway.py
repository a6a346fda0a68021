import itertools
from datetime import datetime, timezone
from typing import Callable

from returns.result import Failure, Result, Success

from services.reservation.domain.entity import Reservation
from services.reservation.domain.gateway import BookingError, RentalPropertyGateway
from services.reservation.domain.value_object import AccessToken, ConfirmationNumber

TOKEN_EXPIRED_MESSAGE = (
    "Rental property reservation failed -- token expired -- please login again."
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class StubRentalPropertyGateway(RentalPropertyGateway):
    """外部レンタル API のスタブ実装

    確認番号を first_confirmation_number から順に発行する。
    期限切れトークンは UNAUTHORIZED、rejected_properties の物件は OTHER で失敗する。
    """

    def __init__(
        self,
        first_confirmation_number: int = 123,
        rejected_properties: frozenset[str] = frozenset(),
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._numbers = itertools.count(first_confirmation_number)
        self._rejected_properties = rejected_properties
        self._clock = clock

    def reserve(
        self, token: AccessToken, reservation: Reservation
    ) -> Result[ConfirmationNumber, BookingError]:
        if token.is_expired(self._clock()):
            return Failure(BookingError.unauthorized(TOKEN_EXPIRED_MESSAGE))

        if reservation.property_name in self._rejected_properties:
            return Failure(
                BookingError.other(
                    f"'{reservation.property_name}' could not be reserved "
                    "with the rental API."
                )
            )

        return Success(ConfirmationNumber(value=next(self._numbers)))
