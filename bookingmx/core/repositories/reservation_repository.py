from __future__ import annotations

from abc import ABC, abstractmethod

from bookingmx.core.entities.reservation import Reservation


class ReservationRepository(ABC):
    """
    Owns the canonical reservations and hands out ids.

    Implementations must be safe to call from several threads at once.
    """

    @abstractmethod
    def find_all(self) -> list[Reservation]:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, reservation_id: int) -> Reservation | None:
        raise NotImplementedError

    @abstractmethod
    def save(self, reservation: Reservation) -> Reservation:
        """Assign the next id when the reservation has none, then store it."""
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        """Drop every record and restart the id sequence at 1."""
        raise NotImplementedError
