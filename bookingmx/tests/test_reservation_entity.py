from __future__ import annotations

from datetime import date

from bookingmx.core.entities.reservation import Reservation, ReservationStatus


def _reservation(reservation_id: int | None, guest: str = "Juan", hotel: str = "Hotel A") -> Reservation:
    return Reservation(
        id=reservation_id,
        guest_name=guest,
        hotel_name=hotel,
        check_in=date(2030, 1, 1),
        check_out=date(2030, 1, 2),
    )


def test_new_reservation_is_active() -> None:
    r = _reservation(None)
    assert r.status is ReservationStatus.ACTIVE
    assert r.is_active


def test_equality_depends_only_on_id() -> None:
    r1 = _reservation(1, guest="Juan", hotel="Hotel A")
    r2 = _reservation(1, guest="Maria", hotel="Hotel B")

    assert r1 == r2
    assert hash(r1) == hash(r2)
    assert len({r1, r2}) == 1


def test_different_ids_are_not_equal() -> None:
    assert _reservation(1) != _reservation(2)


def test_two_unassigned_reservations_are_equal() -> None:
    # Degenerate case: neither has been stored yet
    assert _reservation(None) == _reservation(None)


def test_assigned_and_unassigned_are_not_equal() -> None:
    assert _reservation(1) != _reservation(None)


def test_not_equal_to_other_types() -> None:
    r = _reservation(1)
    assert r != None  # noqa: E711
    assert r != "1"


def test_cancel_is_idempotent() -> None:
    r = _reservation(1)
    r.cancel()
    r.cancel()
    assert r.status is ReservationStatus.CANCELED
    assert not r.is_active


def test_nights() -> None:
    r = Reservation(guest_name="Juan", hotel_name="Paradise Inn",
                    check_in=date(2030, 3, 1), check_out=date(2030, 3, 4))
    assert r.nights == 3
