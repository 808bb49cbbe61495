from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request, Response

from bookingmx.core.use_cases.nearby_cities import DEFAULT_MAX_DISTANCE_KM, GetNearbyCitiesUseCase
from bookingmx.core.use_cases.reservation_lifecycle import ReservationLifecycleUseCase
from bookingmx.schemas.models import Health, NearbyCity, ReservationRequest, ReservationResponse
from bookingmx.services.reservation_service import (
    cancel_reservation_service,
    create_reservation_service,
    get_nearby_cities_service,
    get_reservation_service,
    list_reservations_service,
    update_reservation_service,
)

router = APIRouter(prefix="/api/reservations")
health_router = APIRouter(prefix="/actuator")
cities_router = APIRouter(prefix="/api/cities")


def get_lifecycle(request: Request) -> ReservationLifecycleUseCase:
    return request.app.state.lifecycle


def get_nearby_cities(request: Request) -> GetNearbyCitiesUseCase:
    return request.app.state.nearby_cities


@router.get("", response_model=list[ReservationResponse])
def list_reservations(use_case: ReservationLifecycleUseCase = Depends(get_lifecycle)) -> list[ReservationResponse]:
    """
    List all reservations
    """
    return list_reservations_service(use_case)


@router.get("/{reservation_id}", response_model=ReservationResponse)
def get_reservation(
    reservation_id: int,
    use_case: ReservationLifecycleUseCase = Depends(get_lifecycle),
) -> ReservationResponse:
    """
    Get a reservation by id; 404 if it does not exist
    """
    return get_reservation_service(reservation_id, use_case)


@router.post("", response_model=ReservationResponse, status_code=201)
def create_reservation(
    body: ReservationRequest,
    use_case: ReservationLifecycleUseCase = Depends(get_lifecycle),
) -> ReservationResponse:
    return create_reservation_service(body, use_case)


@router.put("/{reservation_id}", response_model=ReservationResponse)
def update_reservation(
    reservation_id: int,
    body: ReservationRequest,
    use_case: ReservationLifecycleUseCase = Depends(get_lifecycle),
) -> ReservationResponse:
    """
    Update guest, hotel and dates of an ACTIVE reservation

    Returns:
      - 200 with the updated reservation
      - 400 if the reservation is canceled or the dates break a rule
      - 404 if the reservation does not exist
    """
    return update_reservation_service(reservation_id, body, use_case)


@router.delete("/{reservation_id}", status_code=204, response_model=None)
def cancel_reservation(
    reservation_id: int,
    use_case: ReservationLifecycleUseCase = Depends(get_lifecycle),
) -> Response:
    """
    Cancel a reservation. Canceling twice is allowed.
    """
    cancel_reservation_service(reservation_id, use_case)
    return Response(status_code=204)


@health_router.get("/health", response_model=Health)
def health() -> Health:
    return Health(status="UP")


@cities_router.get("/nearby", response_model=list[NearbyCity])
def nearby_cities(
    destination: str,
    max_distance_km: float = Query(DEFAULT_MAX_DISTANCE_KM, alias="maxDistanceKm", ge=0),
    use_case: GetNearbyCitiesUseCase = Depends(get_nearby_cities),
) -> list[NearbyCity]:
    """
    Cities near a destination, nearest first. Unknown destinations give an empty list.
    """
    return get_nearby_cities_service(destination, max_distance_km, use_case)
