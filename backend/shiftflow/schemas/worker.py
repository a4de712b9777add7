from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class WorkerBase(BaseModel):
    name: str


class WorkerCreate(WorkerBase):
    pass


class WorkerUpdate(BaseModel):
    name: Optional[str] = None


class Worker(WorkerBase):
    id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class WorkerRegister(BaseModel):
    """Регистрация работника вместе с учетными данными"""
    name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class WorkerLoginInfo(BaseModel):
    """Учетная запись работника для списка в админке (без пароля)"""
    id: int
    name: str
    username: str
    email: str

    class Config:
        from_attributes = True
