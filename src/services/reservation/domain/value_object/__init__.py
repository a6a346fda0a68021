from .access_token import AccessToken
from .confirmation_number import ConfirmationNumber

__all__ = ["AccessToken", "ConfirmationNumber"]
