from datetime import date

from pydantic import BaseModel, Field

from services.reservation.domain.entity import ReservationRequest


class ReservePropertyRequest(BaseModel):
    """物件予約リクエストモデル"""

    email: str = Field(
        ...,
        pattern=r"^[^@\s]+@[^@\s]+$",
        description="予約者のメールアドレス",
    )
    reservation_date: date = Field(..., description="予約日（YYYY-MM-DD）")
    property_name: str = Field(..., min_length=1, max_length=100)

    def to_domain(self) -> ReservationRequest:
        return ReservationRequest(
            email=self.email,
            reservation_date=self.reservation_date,
            property_name=self.property_name,
        )
