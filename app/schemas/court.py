"""Court schemas."""
from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime


class CourtCreate(BaseModel):
    """Schema for creating a court."""

    # Optional: a missing name is rejected by the handler with a 400
    name: Optional[str] = None
    description: Optional[str] = None


class CourtInDB(BaseModel):
    """Schema for court from database."""

    id: int
    name: str
    description: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
