from .entity import ExistingReservation as ExistingReservation
from .entity import Reservation as Reservation
from .entity import ReservationRequest as ReservationRequest
from .enum import BookingErrorKind as BookingErrorKind
from .gateway import AccessTokenProvider as AccessTokenProvider
from .gateway import BookingError as BookingError
from .gateway import RentalPropertyGateway as RentalPropertyGateway
from .outcome import CredentialUnavailable as CredentialUnavailable
from .outcome import OperationFailed as OperationFailed
from .outcome import ReservationOutcome as ReservationOutcome
from .outcome import Success as Success
from .outcome import ValidationFailed as ValidationFailed
from .repository import ReservationRepository as ReservationRepository
from .service import ReservationValidator as ReservationValidator
from .value_object import AccessToken as AccessToken
from .value_object import ConfirmationNumber as ConfirmationNumber
