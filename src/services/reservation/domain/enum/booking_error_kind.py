from enum import Enum


class BookingErrorKind(str, Enum):
    """レンタル API 予約失敗の種別"""

    UNAUTHORIZED = "UNAUTHORIZED"
    OTHER = "OTHER"
