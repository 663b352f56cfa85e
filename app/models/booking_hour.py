"""Booking hour model."""
from sqlalchemy import Column, Integer, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base


class BookingHour(Base):
    """Represents a reserved time window on a court."""

    __tablename__ = "booking_hours"

    id = Column(Integer, primary_key=True, index=True)
    court_id = Column(Integer, ForeignKey("courts.id", ondelete="CASCADE"), nullable=False, index=True)
    date_start = Column(DateTime(timezone=True), nullable=False, index=True)
    date_end = Column(DateTime(timezone=True), nullable=False)
    status = Column(String(50), default="active", server_default="active")  # active, completed, cancelled
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    court = relationship("Court", back_populates="booking_hours")
    clips = relationship(
        "Clip", back_populates="booking_hour", cascade="all, delete-orphan", passive_deletes=True
    )
