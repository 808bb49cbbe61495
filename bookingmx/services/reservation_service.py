from __future__ import annotations

from bookingmx.core.entities.reservation import Reservation
from bookingmx.core.repositories.reservation_repository import ReservationRepository
from bookingmx.core.use_cases.nearby_cities import (
    SAMPLE_CITIES,
    SAMPLE_EDGES,
    GetNearbyCitiesUseCase,
    build_graph,
    validate_graph_data,
)
from bookingmx.core.use_cases.reservation_lifecycle import (
    NotFoundError,
    ReservationLifecycleUseCase,
    ReservationRequest as CoreReservationRequest,
)
from bookingmx.infrastructure.config import Settings
from bookingmx.infrastructure.database import build_engine, build_session_factory
from bookingmx.infrastructure.repositories.in_memory_reservation_repository import InMemoryReservationRepository
from bookingmx.infrastructure.repositories.reservation_repository_impl import SqlReservationRepository
from bookingmx.logger_config import logger
from bookingmx.schemas.models import NearbyCity, ReservationRequest, ReservationResponse, Status


def build_reservation_repository(settings: Settings) -> ReservationRepository:
    """
    Construct the store selected by settings.store_backend. Each call returns a fresh,
    independent store.
    """
    if settings.store_backend == "sql":
        engine = build_engine(settings.database_url)
        return SqlReservationRepository(build_session_factory(engine))
    return InMemoryReservationRepository()


def _to_core_request(body: ReservationRequest) -> CoreReservationRequest:
    """
    Translate API schema ReservationRequest -> core ReservationRequest.
    """
    return CoreReservationRequest(
        guest_name=body.guestName,
        hotel_name=body.hotelName,
        check_in=body.checkIn,
        check_out=body.checkOut,
    )


def _to_response(reservation: Reservation) -> ReservationResponse:
    return ReservationResponse(
        id=reservation.id,
        guestName=reservation.guest_name,
        hotelName=reservation.hotel_name,
        checkIn=reservation.check_in,
        checkOut=reservation.check_out,
        status=Status(reservation.status.value),
    )


def list_reservations_service(use_case: ReservationLifecycleUseCase) -> list[ReservationResponse]:
    return [_to_response(r) for r in use_case.list()]


def get_reservation_service(reservation_id: int, use_case: ReservationLifecycleUseCase) -> ReservationResponse:
    reservation = use_case.get_by_id(reservation_id)
    if reservation is None:
        raise NotFoundError("Reservation not found")
    return _to_response(reservation)


def create_reservation_service(body: ReservationRequest, use_case: ReservationLifecycleUseCase) -> ReservationResponse:
    return _to_response(use_case.create(_to_core_request(body)))


def update_reservation_service(
    reservation_id: int,
    body: ReservationRequest,
    use_case: ReservationLifecycleUseCase,
) -> ReservationResponse:
    return _to_response(use_case.update(reservation_id, _to_core_request(body)))


def cancel_reservation_service(reservation_id: int, use_case: ReservationLifecycleUseCase) -> None:
    use_case.cancel(reservation_id)


def build_nearby_cities_use_case(cities=SAMPLE_CITIES, edges=SAMPLE_EDGES) -> GetNearbyCitiesUseCase:
    """
    Build the city-proximity lookup. Invalid data leaves the lookup without a graph,
    so every query answers with no cities.
    """
    validation = validate_graph_data(cities, edges)
    if not validation.ok:
        logger.error(f"City graph data rejected: {validation.reason}")
        return GetNearbyCitiesUseCase(graph=None)
    return GetNearbyCitiesUseCase(graph=build_graph(cities, edges))


def get_nearby_cities_service(
    destination: str,
    max_distance_km: float,
    use_case: GetNearbyCitiesUseCase,
) -> list[NearbyCity]:
    dtos = use_case.execute(destination=destination, max_distance_km=max_distance_km)
    return [NearbyCity(city=dto.city, distance=dto.distance) for dto in dtos]
