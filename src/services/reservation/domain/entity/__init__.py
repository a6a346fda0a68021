from .reservation import ExistingReservation, Reservation, ReservationRequest

__all__ = ["ExistingReservation", "Reservation", "ReservationRequest"]
