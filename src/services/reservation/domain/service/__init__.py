from .reservation_validator import MIN_DAYS_OUT, ReservationValidator

__all__ = ["MIN_DAYS_OUT", "ReservationValidator"]
