"""
In-memory reservation storage. Nothing survives the process.
"""
from __future__ import annotations

import itertools
from typing import Dict, List, Optional

from .models import Reservation


class InMemoryReservationRepository:

    def __init__(self) -> None:
        self._store: Dict[int, Reservation] = {}
        self._ids = itertools.count(1)

    def save(self, reservation: Reservation) -> Reservation:
        """Assigns the next id to new reservations, overwrites existing ones."""
        if reservation.id is None:
            reservation.id = next(self._ids)
        self._store[reservation.id] = reservation
        return reservation

    def find_by_id(self, reservation_id: int) -> Optional[Reservation]:
        return self._store.get(reservation_id)

    def find_all(self) -> List[Reservation]:
        return [self._store[k] for k in sorted(self._store)]

    def delete(self, reservation_id: int) -> None:
        self._store.pop(reservation_id, None)
