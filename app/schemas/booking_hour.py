"""Booking hour schemas."""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class BookingHourCreate(BaseModel):
    """Schema for creating a booking hour."""

    court_id: Optional[int] = Field(default=None, alias="courtId")
    date_start: Optional[datetime] = Field(default=None, alias="dateStart")
    date_end: Optional[datetime] = Field(default=None, alias="dateEnd")
    status: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class BookingHourInDB(BaseModel):
    """Schema for booking hour from database."""

    id: int
    court_id: int = Field(alias="courtId")
    date_start: datetime = Field(alias="dateStart")
    date_end: datetime = Field(alias="dateEnd")
    status: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
