from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    RentalApiUnauthorizedException as RentalApiUnauthorizedException,
)
