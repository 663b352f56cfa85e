"""API schemas."""
from app.schemas.common import APIResponse, HealthStatus
from app.schemas.court import CourtCreate, CourtInDB
from app.schemas.booking_hour import BookingHourCreate, BookingHourInDB
from app.schemas.clip import ClipInDB

__all__ = [
    "APIResponse",
    "HealthStatus",
    "CourtCreate",
    "CourtInDB",
    "BookingHourCreate",
    "BookingHourInDB",
    "ClipInDB",
]
