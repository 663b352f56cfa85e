"""Court model."""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, true
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base


class Court(Base):
    """Represents a bookable court, one camera position per row."""

    __tablename__ = "courts"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, nullable=False)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, server_default=true(), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    booking_hours = relationship(
        "BookingHour", back_populates="court", cascade="all, delete-orphan", passive_deletes=True
    )
