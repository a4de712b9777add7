from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from shiftflow.database import Base


class Assignment(Base):
    """Назначение работника в график: все его смены за период"""
    __tablename__ = "assignments"

    id = Column(Integer, primary_key=True, index=True)
    schedule_id = Column(Integer, ForeignKey("schedules.id", ondelete="CASCADE"), nullable=False)
    # Ссылка без владения: удаление работника не удаляет назначение само по себе
    worker_id = Column(Integer, nullable=False, index=True)

    # Relationships
    schedule = relationship("Schedule", back_populates="assignments")
    shifts = relationship(
        "Shift",
        back_populates="assignment",
        cascade="all, delete-orphan",
        order_by="Shift.id",
    )

    __table_args__ = (
        UniqueConstraint("schedule_id", "worker_id", name="uq_assignment_worker"),
    )
