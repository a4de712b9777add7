from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from shiftflow.database import Base


class Admin(Base):
    """Администратор графиков"""
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, nullable=False, unique=True, index=True)
    password_hash = Column(String, nullable=False)
    email = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
