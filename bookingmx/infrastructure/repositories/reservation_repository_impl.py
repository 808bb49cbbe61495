from __future__ import annotations

import threading

from sqlalchemy import delete, func, select
from sqlalchemy.orm import sessionmaker

from bookingmx.core.entities.reservation import Reservation
from bookingmx.core.repositories.reservation_repository import ReservationRepository
from bookingmx.infrastructure.models.models import ReservationModel


class SqlReservationRepository(ReservationRepository):
    """
    SQLAlchemy implementation for Reservation.

    Ids come from a counter owned by the repository, assigned and written under the
    same lock as every other access so no two new rows can race for an id.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory
        self._lock = threading.Lock()
        with self._session_factory() as db:
            current_max = db.scalar(select(func.max(ReservationModel.id)))
        self._next_id = (current_max or 0) + 1

    def find_all(self) -> list[Reservation]:
        with self._lock, self._session_factory() as db:
            rows = db.scalars(select(ReservationModel).order_by(ReservationModel.id)).all()
            return [self._to_entity(row) for row in rows]

    def find_by_id(self, reservation_id: int) -> Reservation | None:
        with self._lock, self._session_factory() as db:
            row = db.get(ReservationModel, reservation_id)
            if row is None:
                return None
            return self._to_entity(row)

    def save(self, reservation: Reservation) -> Reservation:
        with self._lock, self._session_factory() as db:
            assigned = reservation.id is None
            reservation_id = self._next_id if assigned else reservation.id

            row = db.get(ReservationModel, reservation_id)
            if row is None:
                row = ReservationModel(id=reservation_id)

            row.guest_name = reservation.guest_name
            row.hotel_name = reservation.hotel_name
            row.check_in = reservation.check_in
            row.check_out = reservation.check_out
            row.status = reservation.status

            db.add(row)
            db.commit()

            self._next_id = max(self._next_id, reservation_id + 1)
            if assigned:
                reservation.id = reservation_id
            return reservation

    def clear(self) -> None:
        with self._lock, self._session_factory() as db:
            db.execute(delete(ReservationModel))
            db.commit()
            self._next_id = 1

    @staticmethod
    def _to_entity(row: ReservationModel) -> Reservation:
        return Reservation(
            id=row.id,
            guest_name=row.guest_name,
            hotel_name=row.hotel_name,
            check_in=row.check_in,
            check_out=row.check_out,
            status=row.status,
        )
