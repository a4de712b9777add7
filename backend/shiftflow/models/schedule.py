from sqlalchemy import Column, Integer, String, Date, DateTime, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from shiftflow.database import Base


class Schedule(Base):
    """График смен на период [period_from, period_to]"""
    __tablename__ = "schedules"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=True)
    period_from = Column(Date, nullable=False, index=True)
    period_to = Column(Date, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    assignments = relationship(
        "Assignment",
        back_populates="schedule",
        cascade="all, delete-orphan",
        order_by="Assignment.id",
    )

    __table_args__ = (UniqueConstraint("period_from", "period_to", name="uq_schedule_period"),)
