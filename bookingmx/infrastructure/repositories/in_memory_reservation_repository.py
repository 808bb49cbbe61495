from __future__ import annotations

import threading
from dataclasses import replace

from bookingmx.core.entities.reservation import Reservation
from bookingmx.core.repositories.reservation_repository import ReservationRepository


class InMemoryReservationRepository(ReservationRepository):
    """
    Process-lifetime store: a dict keyed by id plus the id sequence, both guarded by one lock.

    Records are copied on the way in and on the way out, so callers never hold the
    canonical instance.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._store: dict[int, Reservation] = {}
        self._next_id = 1

    def find_all(self) -> list[Reservation]:
        with self._lock:
            return [replace(r) for r in self._store.values()]

    def find_by_id(self, reservation_id: int) -> Reservation | None:
        with self._lock:
            row = self._store.get(reservation_id)
            return replace(row) if row is not None else None

    def save(self, reservation: Reservation) -> Reservation:
        with self._lock:
            if reservation.id is None:
                reservation.id = self._next_id
            # ids saved from outside the sequence are never handed out again
            self._next_id = max(self._next_id, reservation.id + 1)
            self._store[reservation.id] = replace(reservation)
            return reservation

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
            self._next_id = 1
