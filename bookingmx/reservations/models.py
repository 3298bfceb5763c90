from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class ReservationStatus(str, Enum):
    ACTIVE = "ACTIVE"
    CANCELED = "CANCELED"


@dataclass(eq=False)
class Reservation:
    """
    A hotel reservation.
    Identity is the id alone: two objects with the same id are the same
    reservation, whatever their other fields say.
    """

    id: Optional[int] = None
    guest_name: str = ""
    hotel_name: str = ""
    check_in: Optional[date] = None
    check_out: Optional[date] = None
    status: ReservationStatus = field(default=ReservationStatus.ACTIVE)

    @property
    def is_active(self) -> bool:
        return self.status is ReservationStatus.ACTIVE

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Reservation):
            return NotImplemented
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass
class ReservationRequest:
    """Data the client sends to create or update a reservation."""

    guest_name: str
    hotel_name: str
    check_in: Optional[date]
    check_out: Optional[date]
