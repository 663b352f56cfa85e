"""Database models."""
from app.models.court import Court
from app.models.booking_hour import BookingHour
from app.models.clip import Clip

__all__ = ["Court", "BookingHour", "Clip"]
