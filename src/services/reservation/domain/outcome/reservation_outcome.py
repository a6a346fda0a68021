from dataclasses import dataclass

from services.reservation.domain.value_object.confirmation_number import (
    ConfirmationNumber,
)


@dataclass(frozen=True)
class Success:
    """予約完了"""

    confirmation_number: ConfirmationNumber


@dataclass(frozen=True)
class CredentialUnavailable:
    """レンタル API のトークンが利用できない（再ログインが必要）"""


@dataclass(frozen=True)
class ValidationFailed:
    """予約条件を満たさない（失敗したルールをすべて含む）"""

    errors: tuple[str, ...]


@dataclass(frozen=True)
class OperationFailed:
    """想定外の失敗"""

    message: str


ReservationOutcome = Success | CredentialUnavailable | ValidationFailed | OperationFailed
