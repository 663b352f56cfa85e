"""Clip schemas."""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class ClipInDB(BaseModel):
    """Schema for clip from database."""

    id: int
    booking_hour_id: int = Field(alias="bookingHourId")
    filename: str
    file_path: str
    file_size: Optional[int] = None
    mime_type: Optional[str] = None
    duration_seconds: Optional[int] = None
    camera_name: Optional[str] = None
    upload_status: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
