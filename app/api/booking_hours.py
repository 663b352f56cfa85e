"""Booking hour endpoints."""
import logging
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.errors import InternalError, ValidationError
from app.models.booking_hour import BookingHour
from app.models.court import Court
from app.schemas.booking_hour import BookingHourCreate, BookingHourInDB
from app.schemas.common import APIResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/booking-hours", tags=["booking-hours"])

DEFAULT_STATUS = "active"


def is_zero_time(value: Optional[datetime]) -> bool:
    """True for a missing timestamp or the zero value 0001-01-01T00:00:00."""
    return value is None or value.replace(tzinfo=None) == datetime.min


def parse_id_filter(raw: Optional[str], message: str) -> Optional[int]:
    """Parse an optional integer query filter, raising ValidationError(message) if malformed."""
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(message)


@router.get("", response_model=APIResponse[List[BookingHourInDB]])
async def list_booking_hours(
    court_id: Optional[str] = Query(default=None, alias="courtId", description="Filter by court ID"),
    db: AsyncSession = Depends(get_db),
):
    """
    List booking hours, newest start first.

    Args:
        court_id: Optional court ID filter
        db: Database session

    Returns:
        Envelope with the list of booking hours (possibly empty)
    """
    court_filter = parse_id_filter(court_id, "Invalid court ID")

    query = select(BookingHour).order_by(BookingHour.date_start.desc())
    if court_filter is not None:
        query = query.where(BookingHour.court_id == court_filter)

    try:
        result = await db.execute(query)
        booking_hours = result.scalars().all()
    except SQLAlchemyError as e:
        logger.error(f"Error querying booking hours: {e}")
        raise InternalError("Failed to fetch booking hours")

    return APIResponse(
        message="Booking hours retrieved successfully",
        data=[BookingHourInDB.model_validate(b) for b in booking_hours],
    )


@router.post("", response_model=APIResponse[BookingHourInDB], status_code=201)
async def create_booking_hour(
    booking: BookingHourCreate,
    db: AsyncSession = Depends(get_db),
):
    """
    Reserve a time window on a court.

    The court must exist and be active. Start/end ordering and overlap with
    other bookings are not checked.

    Args:
        booking: courtId, dateStart, dateEnd and optional status
        db: Database session

    Returns:
        Envelope with the created booking hour
    """
    if not booking.court_id:
        raise ValidationError("Court ID is required")

    if is_zero_time(booking.date_start) or is_zero_time(booking.date_end):
        raise ValidationError("Date start and date end are required")

    try:
        result = await db.execute(
            select(Court.id).where(Court.id == booking.court_id, Court.is_active.is_(True))
        )
        court_exists = result.scalar_one_or_none() is not None
    except SQLAlchemyError as e:
        logger.error(f"Error checking court existence: {e}")
        raise InternalError("Failed to verify court")

    if not court_exists:
        raise ValidationError("Court not found or inactive")

    db_booking = BookingHour(
        court_id=booking.court_id,
        date_start=booking.date_start,
        date_end=booking.date_end,
        status=booking.status or DEFAULT_STATUS,
    )
    db.add(db_booking)
    try:
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Error creating booking hour: {e}")
        raise InternalError("Failed to create booking hour")

    await db.refresh(db_booking)
    logger.info(f"Created booking hour {db_booking.id} on court {db_booking.court_id}")

    return APIResponse(
        message="Booking hour created successfully",
        data=BookingHourInDB.model_validate(db_booking),
    )
