from sqlalchemy import Column, Integer, Date, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship
from shiftflow.database import Base
import enum


class ShiftType(str, enum.Enum):
    """Тип смены"""
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"


class Shift(Base):
    """Одна смена (дата + тип) внутри назначения"""
    __tablename__ = "shifts"

    id = Column(Integer, primary_key=True, index=True)
    assignment_id = Column(Integer, ForeignKey("assignments.id", ondelete="CASCADE"), nullable=False)
    date = Column(Date, nullable=False, index=True)
    shift_type = Column(
        SQLEnum(ShiftType, values_callable=lambda enum_cls: [item.value for item in enum_cls]),
        nullable=False,
    )

    # Relationships
    assignment = relationship("Assignment", back_populates="shifts")
