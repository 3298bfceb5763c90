from .errors import BadRequestError, NotFoundError, ReservationError
from .models import Reservation, ReservationRequest, ReservationStatus
from .repository import InMemoryReservationRepository
from .service import ReservationService

__all__ = [
    "BadRequestError",
    "InMemoryReservationRepository",
    "NotFoundError",
    "Reservation",
    "ReservationError",
    "ReservationRequest",
    "ReservationService",
    "ReservationStatus",
]
