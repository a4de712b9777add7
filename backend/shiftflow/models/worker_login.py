from sqlalchemy import Column, Integer, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from shiftflow.database import Base


class WorkerLogin(Base):
    """Учетные данные работника для входа в приложение"""
    __tablename__ = "worker_logins"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, nullable=False, unique=True, index=True)
    password_hash = Column(String, nullable=False)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    # Без ondelete: удаление работника чистит логин отдельным шагом каскада
    worker_id = Column(Integer, ForeignKey("workers.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    worker = relationship("Worker", back_populates="login")
