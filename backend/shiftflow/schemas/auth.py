from pydantic import BaseModel, Field
from typing import Optional


class LoginRequest(BaseModel):
    """Схема запроса авторизации"""
    username: Optional[str] = None
    password: Optional[str] = None


class AdminRegisterRequest(LoginRequest):
    """Схема регистрации администратора"""
    email: Optional[str] = None


class LoginResponse(BaseModel):
    """Схема ответа авторизации"""
    message: str = "Logged in successfully"
    access_token: str
    token_type: str = "bearer"
    worker_id: Optional[int] = Field(None, alias="workerDataId")

    class Config:
        populate_by_name = True


class MessageResponse(BaseModel):
    message: str
