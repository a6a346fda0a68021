from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ReservationRequest:
    """物件予約リクエスト（未検証）"""

    email: str
    reservation_date: date
    property_name: str


@dataclass(frozen=True)
class ExistingReservation:
    """確定済みの既存予約"""

    email: str
    reservation_date: date
    property_name: str

    def is_for(self, reservation_date: date, property_name: str) -> bool:
        """同じ日付・同じ物件の予約かどうか"""
        return (
            self.reservation_date == reservation_date
            and self.property_name == property_name
        )


@dataclass(frozen=True)
class Reservation:
    """検証済み・未確定の予約

    ReservationValidator による検証を通過した場合にのみ生成する。
    """

    email: str
    reservation_date: date
    property_name: str
