from __future__ import annotations

import logging
from datetime import date
from typing import Callable, List, Optional

from .errors import BadRequestError, NotFoundError
from .models import Reservation, ReservationRequest, ReservationStatus
from .repository import InMemoryReservationRepository

log = logging.getLogger(__name__)


class ReservationService:
    """
    Create / update / list / cancel hotel reservations.

    today is injectable so date rules can be tested without freezing time.
    """

    def __init__(
        self,
        repository: Optional[InMemoryReservationRepository] = None,
        today: Callable[[], date] = date.today,
    ):
        self._repo = repository if repository is not None else InMemoryReservationRepository()
        self._today = today

    def list(self) -> List[Reservation]:
        return self._repo.find_all()

    def create(self, request: ReservationRequest) -> Reservation:
        self._validate(request)
        reservation = self._repo.save(Reservation(
            guest_name=request.guest_name,
            hotel_name=request.hotel_name,
            check_in=request.check_in,
            check_out=request.check_out,
        ))
        log.info(
            "Reservation %d created: %s @ %s %s → %s",
            reservation.id, reservation.guest_name, reservation.hotel_name,
            reservation.check_in, reservation.check_out,
        )
        return reservation

    def update(self, reservation_id: int, request: ReservationRequest) -> Reservation:
        reservation = self._get(reservation_id)
        if not reservation.is_active:
            raise BadRequestError(f"Reservation {reservation_id} is canceled and cannot be updated")

        self._validate(request)
        reservation.guest_name = request.guest_name
        reservation.hotel_name = request.hotel_name
        reservation.check_in = request.check_in
        reservation.check_out = request.check_out
        log.info("Reservation %d updated", reservation_id)
        return self._repo.save(reservation)

    def cancel(self, reservation_id: int) -> Reservation:
        reservation = self._get(reservation_id)
        if reservation.status is not ReservationStatus.CANCELED:
            reservation.status = ReservationStatus.CANCELED
            log.info("Reservation %d canceled", reservation_id)
        return self._repo.save(reservation)

    # ---------- helpers ----------

    def _get(self, reservation_id: int) -> Reservation:
        reservation = self._repo.find_by_id(reservation_id)
        if reservation is None:
            raise NotFoundError(reservation_id)
        return reservation

    def _validate(self, request: ReservationRequest) -> None:
        if not request.guest_name or not request.guest_name.strip():
            raise BadRequestError("Guest name is required")
        if not request.hotel_name or not request.hotel_name.strip():
            raise BadRequestError("Hotel name is required")
        if request.check_in is None or request.check_out is None:
            raise BadRequestError("Check-in and check-out dates are required")

        today = self._today()
        if request.check_in < today:
            raise BadRequestError("Check-in cannot be in the past")
        if request.check_out < today:
            raise BadRequestError("Check-out cannot be in the past")
        if not request.check_in < request.check_out:
            raise BadRequestError("Check-in must be before check-out")
