from datetime import date

from returns.pipeline import is_successful
from returns.result import Failure, Result, Success

from services.reservation.domain.entity.reservation import (
    ExistingReservation,
    Reservation,
    ReservationRequest,
)

MIN_DAYS_OUT = 7


class ReservationValidator:
    """予約可否を判定するドメインサービス

    I/O を持たない純粋な判定。すべてのルールを評価し、失敗を
    ルール順（リードタイム → 他者の予約 → 自分の予約）で返す。
    """

    def __init__(self, min_days_out: int = MIN_DAYS_OUT) -> None:
        if min_days_out < 0:
            raise ValueError("Minimum days out cannot be negative")
        self._min_days_out = min_days_out

    def validate(
        self,
        request: ReservationRequest,
        existing_reservations: list[ExistingReservation],
        today: date,
    ) -> Result[Reservation, list[str]]:
        """リクエストを検証し、予約を生成する"""
        conflicts = [
            r
            for r in existing_reservations
            if r.is_for(request.reservation_date, request.property_name)
        ]

        checks = [
            self._check_lead_time(request.reservation_date, today),
            self._check_not_reserved_by_other(request, conflicts),
            self._check_not_reserved_by_requester(request, conflicts),
        ]
        errors = [check.failure() for check in checks if not is_successful(check)]
        if errors:
            return Failure(errors)

        return Success(
            Reservation(
                email=request.email,
                reservation_date=request.reservation_date,
                property_name=request.property_name,
            )
        )

    def _check_lead_time(self, reservation_date: date, today: date) -> Result[None, str]:
        if (reservation_date - today).days >= self._min_days_out:
            return Success(None)
        return Failure(f"Must be at least {self._min_days_out} days out")

    def _check_not_reserved_by_other(
        self, request: ReservationRequest, conflicts: list[ExistingReservation]
    ) -> Result[None, str]:
        if any(r.email != request.email for r in conflicts):
            return Failure(
                f"'{request.property_name}' has already been reserved by someone else."
            )
        return Success(None)

    def _check_not_reserved_by_requester(
        self, request: ReservationRequest, conflicts: list[ExistingReservation]
    ) -> Result[None, str]:
        if any(r.email == request.email for r in conflicts):
            return Failure(
                f"'{request.property_name}' has already been reserved by you."
            )
        return Success(None)
