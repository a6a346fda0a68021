from .exceptions import (
    DomainException,
    DuplicateResourceException,
    RentalApiUnauthorizedException,
)

__all__ = [
    "DomainException",
    "DuplicateResourceException",
    "RentalApiUnauthorizedException",
]
