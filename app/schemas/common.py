"""Response envelope schemas."""
from pydantic import BaseModel
from typing import Generic, Optional, TypeVar
from datetime import datetime

DataT = TypeVar("DataT")


class APIResponse(BaseModel, Generic[DataT]):
    """Uniform envelope wrapping every response body."""

    success: bool = True
    message: str
    data: Optional[DataT] = None


class HealthStatus(BaseModel):
    """Payload of the health check."""

    timestamp: datetime
    version: str
    database: str  # connected, disconnected
