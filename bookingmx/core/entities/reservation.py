from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class ReservationStatus(str, Enum):
    ACTIVE = "ACTIVE"
    CANCELED = "CANCELED"


@dataclass(slots=True, eq=False)
class Reservation:
    """
    A booked stay. Identity is the store-assigned id, so two reservations with the same
    id are equal whatever their other fields hold. Two unassigned (id is None) reservations
    are equal to each other as well.
    """
    guest_name: str
    hotel_name: str
    check_in: date
    check_out: date
    status: ReservationStatus = ReservationStatus.ACTIVE
    id: int | None = None

    @property
    def is_active(self) -> bool:
        return self.status == ReservationStatus.ACTIVE

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days

    def cancel(self) -> None:
        self.status = ReservationStatus.CANCELED

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Reservation):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
