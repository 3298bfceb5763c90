class ReservationError(Exception):
    """Base class for reservation service errors."""


class BadRequestError(ReservationError):
    """The request is malformed or not allowed in the reservation's state."""


class NotFoundError(ReservationError):
    def __init__(self, reservation_id: int):
        super().__init__(f"Reservation {reservation_id} not found")
        self.reservation_id = reservation_id
