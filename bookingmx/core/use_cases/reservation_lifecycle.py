from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import date
from typing import Callable

from bookingmx.core.entities.reservation import Reservation, ReservationStatus
from bookingmx.core.repositories.reservation_repository import ReservationRepository
from bookingmx.logger_config import logger


class ReservationError(Exception):
    """Base class for failures the caller can act on."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidRequestError(ReservationError):
    """Raise to map to HTTP 400 (request breaks a business rule)."""


class InvalidStateError(ReservationError):
    """Raise to map to HTTP 400 (operation not allowed in the current status)."""


class NotFoundError(ReservationError):
    """Raise to map to HTTP 404."""


@dataclass(frozen=True, slots=True)
class ReservationRequest:
    """
    Use-case input for create and update.

    Dates may be None here; the use case reports that as an invalid request.
    """
    guest_name: str
    hotel_name: str
    check_in: date | None
    check_out: date | None


def validate_dates(check_in: date | None, check_out: date | None, today: date) -> None:
    """
    Check a stay against `today`. Raises InvalidRequestError for the first rule broken.

    Today itself is accepted for both dates.
    """
    if check_in is None or check_out is None:
        raise InvalidRequestError("Dates cannot be null")
    if check_in < today:
        raise InvalidRequestError("Check-in must be in the future")
    if check_out < today:
        raise InvalidRequestError("Check-out must be in the future")
    if not check_out > check_in:
        raise InvalidRequestError("Check-out must be after check-in")


class ReservationLifecycleUseCase:
    """
    Business rules over the reservation store: date validation and the
    ACTIVE -> CANCELED status machine.
    """

    def __init__(
        self,
        *,
        reservation_repo: ReservationRepository,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._clock = clock
        # serializes read-modify-write so a late update cannot revive a canceled record
        self._write_lock = threading.Lock()

    def list(self) -> list[Reservation]:
        return self._reservation_repo.find_all()

    def get_by_id(self, reservation_id: int) -> Reservation | None:
        return self._reservation_repo.find_by_id(reservation_id)

    def create(self, request: ReservationRequest) -> Reservation:
        self._validate(request)
        reservation = Reservation(
            guest_name=request.guest_name,
            hotel_name=request.hotel_name,
            check_in=request.check_in,
            check_out=request.check_out,
            status=ReservationStatus.ACTIVE,
        )
        saved = self._reservation_repo.save(reservation)
        logger.info(f"Created reservation {saved.id} for {saved.guest_name} at {saved.hotel_name}")
        return saved

    def update(self, reservation_id: int, request: ReservationRequest) -> Reservation:
        with self._write_lock:
            existing = self._require(reservation_id)
            if not existing.is_active:
                logger.warning(f"Rejected update of canceled reservation {reservation_id}")
                raise InvalidStateError("Cannot update a canceled reservation")
            self._validate(request)

            existing.guest_name = request.guest_name
            existing.hotel_name = request.hotel_name
            existing.check_in = request.check_in
            existing.check_out = request.check_out
            saved = self._reservation_repo.save(existing)

        logger.info(f"Updated reservation {saved.id}")
        return saved

    def cancel(self, reservation_id: int) -> Reservation:
        with self._write_lock:
            existing = self._require(reservation_id)
            existing.cancel()
            saved = self._reservation_repo.save(existing)

        logger.info(f"Canceled reservation {saved.id}")
        return saved

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _require(self, reservation_id: int) -> Reservation:
        reservation = self._reservation_repo.find_by_id(reservation_id)
        if reservation is None:
            raise NotFoundError("Reservation not found")
        return reservation

    def _validate(self, request: ReservationRequest) -> None:
        try:
            validate_dates(request.check_in, request.check_out, self._clock())
        except InvalidRequestError as e:
            logger.warning(f"Rejected reservation request: {e.message}")
            raise
