from .reservation_outcome import (
    CredentialUnavailable,
    OperationFailed,
    ReservationOutcome,
    Success,
    ValidationFailed,
)

__all__ = [
    "CredentialUnavailable",
    "OperationFailed",
    "ReservationOutcome",
    "Success",
    "ValidationFailed",
]
