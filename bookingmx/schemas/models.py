from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, field_validator


class Status(Enum):
    ACTIVE = 'ACTIVE'
    CANCELED = 'CANCELED'


class ReservationRequest(BaseModel):
    guestName: str
    hotelName: str
    checkIn: date | None = None
    checkOut: date | None = None

    @field_validator('guestName')
    @classmethod
    def _guest_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('Guest name cannot be blank')
        return value

    @field_validator('hotelName')
    @classmethod
    def _hotel_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('Hotel name cannot be blank')
        return value


class ReservationResponse(BaseModel):
    id: int
    guestName: str
    hotelName: str
    checkIn: date
    checkOut: date
    status: Status


class Health(BaseModel):
    status: str


class NearbyCity(BaseModel):
    city: str
    distance: float
