from .access_token_provider import AccessTokenProvider
from .rental_property_gateway import BookingError, RentalPropertyGateway

__all__ = ["AccessTokenProvider", "BookingError", "RentalPropertyGateway"]
