from .booking_error_kind import BookingErrorKind

__all__ = ["BookingErrorKind"]
