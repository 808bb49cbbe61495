from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookingmx.core.use_cases.reservation_lifecycle import ReservationLifecycleUseCase
from bookingmx.infrastructure.config import Settings
from bookingmx.logger_config import configure_logging, logger
from bookingmx.presentation.exception_handlers import register_exception_handlers
from bookingmx.presentation.routers import cities_router, health_router, router
from bookingmx.services.reservation_service import build_nearby_cities_use_case, build_reservation_repository


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application with its own store and lifecycle use case.

    Nothing is shared between two apps built by separate calls.
    """
    if settings is None:
        from bookingmx.infrastructure.config import settings

    configure_logging(settings.log_level)

    app = FastAPI(title="BookingMx Reservations")
    app.state.reservation_repo = build_reservation_repository(settings)
    app.state.lifecycle = ReservationLifecycleUseCase(reservation_repo=app.state.reservation_repo)
    app.state.nearby_cities = build_nearby_cities_use_case()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(router)
    app.include_router(cities_router)
    app.include_router(health_router)

    logger.info(f"Reservation store backend: {settings.store_backend}")
    return app


app = create_app()
