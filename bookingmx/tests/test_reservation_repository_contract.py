from __future__ import annotations

import threading
from datetime import date

import pytest

from bookingmx.core.entities.reservation import Reservation, ReservationStatus
from bookingmx.core.repositories.reservation_repository import ReservationRepository
from bookingmx.infrastructure.config import Settings
from bookingmx.infrastructure.repositories.in_memory_reservation_repository import InMemoryReservationRepository
from bookingmx.infrastructure.repositories.reservation_repository_impl import SqlReservationRepository
from bookingmx.services.reservation_service import build_reservation_repository


@pytest.fixture(params=["memory", "sql"])
def repo(request: pytest.FixtureRequest) -> ReservationRepository:
    """
    Every test in this module runs against both store implementations.
    """
    return build_reservation_repository(Settings(store_backend=request.param))


def _new(guest: str = "Juan") -> Reservation:
    return Reservation(
        guest_name=guest,
        hotel_name="Paradise Inn",
        check_in=date(2030, 5, 1),
        check_out=date(2030, 5, 3),
    )


def test_factory_builds_the_configured_store() -> None:
    assert isinstance(build_reservation_repository(Settings(store_backend="memory")), InMemoryReservationRepository)
    assert isinstance(build_reservation_repository(Settings(store_backend="sql")), SqlReservationRepository)


def test_save_assigns_sequential_ids_starting_at_one(repo: ReservationRepository) -> None:
    first = repo.save(_new("a"))
    second = repo.save(_new("b"))

    assert first.id == 1
    assert second.id == 2


def test_find_by_id_missing_returns_none(repo: ReservationRepository) -> None:
    assert repo.find_by_id(42) is None


def test_find_by_id_returns_stored_fields(repo: ReservationRepository) -> None:
    saved = repo.save(_new("Maria"))

    found = repo.find_by_id(saved.id)
    assert found is not None
    assert found.id == saved.id
    assert found.guest_name == "Maria"
    assert found.hotel_name == "Paradise Inn"
    assert found.check_in == date(2030, 5, 1)
    assert found.check_out == date(2030, 5, 3)
    assert found.status is ReservationStatus.ACTIVE


def test_save_with_id_overwrites(repo: ReservationRepository) -> None:
    saved = repo.save(_new())
    saved.hotel_name = "Grand Hotel"
    saved.cancel()
    repo.save(saved)

    found = repo.find_by_id(saved.id)
    assert found.hotel_name == "Grand Hotel"
    assert found.status is ReservationStatus.CANCELED
    assert len(repo.find_all()) == 1


def test_find_all_returns_every_record(repo: ReservationRepository) -> None:
    assert repo.find_all() == []
    ids = {repo.save(_new(str(i))).id for i in range(3)}

    assert {r.id for r in repo.find_all()} == ids


def test_returned_records_are_not_the_canonical_copy(repo: ReservationRepository) -> None:
    saved = repo.save(_new())

    found = repo.find_by_id(saved.id)
    found.hotel_name = "Mutated without save"

    assert repo.find_by_id(saved.id).hotel_name == "Paradise Inn"


def test_clear_removes_records_and_resets_sequence(repo: ReservationRepository) -> None:
    repo.save(_new())
    repo.save(_new())

    repo.clear()

    assert repo.find_all() == []
    assert repo.save(_new()).id == 1


def test_concurrent_saves_get_distinct_ids(repo: ReservationRepository) -> None:
    threads_count = 8
    per_thread = 25
    ids: list[int] = []
    ids_lock = threading.Lock()
    barrier = threading.Barrier(threads_count)

    def worker() -> None:
        barrier.wait()
        for _ in range(per_thread):
            saved = repo.save(_new())
            with ids_lock:
                ids.append(saved.id)

    threads = [threading.Thread(target=worker) for _ in range(threads_count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    total = threads_count * per_thread
    assert len(set(ids)) == total
    assert sorted(ids) == list(range(1, total + 1))
    assert len(repo.find_all()) == total


def test_separate_stores_do_not_share_state() -> None:
    s1 = InMemoryReservationRepository()
    s2 = InMemoryReservationRepository()
    s1.save(_new())

    assert s2.find_all() == []
    assert s2.save(_new()).id == 1


def test_new_ids_skip_past_externally_supplied_ids(repo: ReservationRepository) -> None:
    external = _new("a")
    external.id = 1
    repo.save(external)

    fresh = repo.save(_new("b"))

    assert fresh.id == 2
    assert repo.find_by_id(1).guest_name == "a"
    assert repo.find_by_id(2).guest_name == "b"


def test_status_comes_back_as_enum(repo: ReservationRepository) -> None:
    saved = repo.save(_new())
    saved.cancel()
    repo.save(saved)

    assert repo.find_by_id(saved.id).status is ReservationStatus.CANCELED
