from datetime import date
from typing import Callable

from aws_lambda_powertools import Logger
from returns.maybe import Maybe
from returns.result import Failure, Result, Success

from services.reservation.domain.entity import (
    ExistingReservation,
    Reservation,
    ReservationRequest,
)
from services.reservation.domain.gateway import (
    AccessTokenProvider,
    BookingError,
    RentalPropertyGateway,
)
from services.reservation.domain.outcome import (
    CredentialUnavailable,
    OperationFailed,
    ReservationOutcome,
    ValidationFailed,
)
from services.reservation.domain.outcome import Success as ReservationSucceeded
from services.reservation.domain.repository import ReservationRepository
from services.reservation.domain.service import ReservationValidator
from services.reservation.domain.value_object import AccessToken, ConfirmationNumber
from services.shared.domain import RentalApiUnauthorizedException

logger = Logger(child=True)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


def _validation_failed(errors: list[str]) -> ReservationOutcome:
    return ValidationFailed(errors=tuple(errors))


def _booking_failed(error: BookingError) -> ReservationOutcome:
    if error.is_unauthorized:
        return CredentialUnavailable()
    return OperationFailed(message=error.message)


class ReservePropertyService:
    """物件予約のユースケース

    既存予約の取得 → 検証 → トークン取得 → 外部予約 → 保存 の順に実行し、
    すべての失敗を ReservationOutcome に変換して返す。例外は送出しない。
    """

    def __init__(
        self,
        repository: ReservationRepository,
        token_provider: AccessTokenProvider,
        gateway: RentalPropertyGateway,
        validator: ReservationValidator | None = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._repository = repository
        self._token_provider = token_provider
        self._gateway = gateway
        self._validator = validator or ReservationValidator()
        self._clock = clock

    def reserve(self, request: ReservationRequest) -> ReservationOutcome:
        """物件を予約する（最初の失敗で打ち切る）"""
        try:
            existing = self._repository.find_by_date(request.reservation_date)
            result = (
                self._validate(request, existing)
                .alt(_validation_failed)
                .bind(self._with_token)
                .bind(self._book)
                .map(self._record)
            )
        except Exception as e:
            return self._handle_exception(e)

        match result:
            case Success(succeeded):
                return succeeded
            case Failure(failed):
                return self._failed(failed)
            case _:
                raise TypeError(f"Unexpected result: {type(result)}")

    def reserve_explicitly(self, request: ReservationRequest) -> ReservationOutcome:
        """物件を予約する（各ステージの結果を明示的に分岐する）"""
        try:
            existing = self._repository.find_by_date(request.reservation_date)

            match self._validate(request, existing):
                case Success(reservation):
                    token: AccessToken | None = self._token_provider.find_token()
                    match token:
                        case None:
                            return self._failed(CredentialUnavailable())
                        case _:
                            match self._gateway.reserve(token, reservation):
                                case Success(confirmation_number):
                                    return self._record(
                                        (reservation, confirmation_number)
                                    )
                                case Failure(error):
                                    return self._failed(_booking_failed(error))
                                case other:
                                    raise TypeError(
                                        f"Unexpected booking result: {type(other)}"
                                    )
                case Failure(errors):
                    return self._failed(_validation_failed(errors))
                case other:
                    raise TypeError(f"Unexpected validation result: {type(other)}")
        except Exception as e:
            return self._handle_exception(e)

    def _validate(
        self, request: ReservationRequest, existing: list[ExistingReservation]
    ) -> Result[Reservation, list[str]]:
        return self._validator.validate(request, existing, today=self._clock())

    def _with_token(
        self, reservation: Reservation
    ) -> Result[tuple[Reservation, AccessToken], ReservationOutcome]:
        return (
            Maybe.from_optional(self._token_provider.find_token())
            .map(lambda token: Success((reservation, token)))
            .value_or(Failure(CredentialUnavailable()))
        )

    def _book(
        self, booking: tuple[Reservation, AccessToken]
    ) -> Result[tuple[Reservation, ConfirmationNumber], ReservationOutcome]:
        reservation, token = booking
        return (
            self._gateway.reserve(token, reservation)
            .alt(_booking_failed)
            .map(lambda confirmation_number: (reservation, confirmation_number))
        )

    def _record(
        self, booked: tuple[Reservation, ConfirmationNumber]
    ) -> ReservationOutcome:
        reservation, confirmation_number = booked
        try:
            self._repository.save(reservation, confirmation_number)
        except Exception:
            # 外部予約は確定済み。照合できるよう確認番号を残す
            logger.error(
                "Rental property booked but reservation was not recorded",
                extra={
                    "confirmation_number": int(confirmation_number),
                    "property_name": reservation.property_name,
                    "reservation_date": reservation.reservation_date.isoformat(),
                },
            )
            raise

        logger.info(
            "Reservation confirmed",
            extra={"confirmation_number": int(confirmation_number)},
        )
        return ReservationSucceeded(confirmation_number=confirmation_number)

    def _failed(self, outcome: ReservationOutcome) -> ReservationOutcome:
        logger.info(
            "Reservation request rejected",
            extra={"outcome": type(outcome).__name__},
        )
        return outcome

    def _handle_exception(self, e: Exception) -> ReservationOutcome:
        """想定外の例外をログに記録し ReservationOutcome に変換する"""
        if isinstance(e, RentalApiUnauthorizedException):
            logger.warning("Rental API rejected the access token")
            return CredentialUnavailable()

        logger.exception("Unexpected error while processing reservation request")
        return OperationFailed(message=UNEXPECTED_ERROR_MESSAGE)
