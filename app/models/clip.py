"""Clip model."""
from sqlalchemy import Column, Integer, BigInteger, String, Text, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base


class Clip(Base):
    """Represents an uploaded video file stored on disk."""

    __tablename__ = "clips"

    id = Column(Integer, primary_key=True, index=True)
    booking_hour_id = Column(
        Integer, ForeignKey("booking_hours.id", ondelete="CASCADE"), nullable=False, index=True
    )
    filename = Column(String(255), nullable=False)
    file_path = Column(Text, nullable=False)
    file_size = Column(BigInteger, nullable=True)
    mime_type = Column(String(100), nullable=True)
    duration_seconds = Column(Integer, nullable=True)  # Not extracted by the service
    camera_name = Column(String(255), nullable=True)
    upload_status = Column(String(50), default="uploaded", server_default="uploaded", index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    booking_hour = relationship("BookingHour", back_populates="clips")
