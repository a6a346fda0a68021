from __future__ import annotations

from pydantic import BaseModel

from services.reservation.domain.outcome import (
    CredentialUnavailable,
    OperationFailed,
    ReservationOutcome,
    Success,
    ValidationFailed,
)
from services.shared.utils import api_response

NOT_LOGGED_IN_MESSAGE = "You are not logged into the reservations portal."
VALIDATION_FAILED_MESSAGE = "One or more validation issues must be resolved."


class ReservationData(BaseModel):
    """予約確定データのレスポンスモデル"""

    confirmation_number: int


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: ReservationData


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    message: str
    errors: list[str] | None = None


def to_response(outcome: ReservationOutcome) -> dict:
    """ReservationOutcome を API Gateway レスポンスに変換する"""
    match outcome:
        case Success(confirmation_number=confirmation_number):
            return api_response(
                201,
                SuccessResponse(
                    data=ReservationData(confirmation_number=int(confirmation_number))
                ),
            )
        case CredentialUnavailable():
            return api_response(401, ErrorResponse(message=NOT_LOGGED_IN_MESSAGE))
        case ValidationFailed(errors=errors):
            return api_response(
                422,
                ErrorResponse(message=VALIDATION_FAILED_MESSAGE, errors=list(errors)),
            )
        case OperationFailed(message=message):
            return api_response(500, ErrorResponse(message=message))
    raise TypeError(f"Unknown reservation outcome: {type(outcome)}")
