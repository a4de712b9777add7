from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from datetime import timedelta
from shiftflow.schemas.auth import AdminRegisterRequest, LoginRequest, LoginResponse, MessageResponse
from shiftflow.config import settings
from shiftflow.database import get_db, commit_or_raise
from shiftflow.exceptions import AuthenticationError, DuplicateUsernameError, ValidationError
from shiftflow.models import Admin, WorkerLogin
from shiftflow.auth.security import hash_password, verify_password, create_access_token
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


def _credentials(login_data: LoginRequest):
    # Нормализуем данные (убираем пробелы)
    username = login_data.username.strip() if login_data.username else ""
    password = login_data.password.strip() if login_data.password else ""
    if not username or not password:
        raise ValidationError("Необходимо указать логин и пароль")
    return username, password


def _set_session_cookie(response: Response, token: str, samesite: str):
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=samesite,
        max_age=settings.cookie_max_age_seconds,
    )


@router.post("/admin/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register_admin(data: AdminRegisterRequest, db: Session = Depends(get_db)):
    """Регистрация администратора"""
    username, password = _credentials(data)
    if not data.email:
        raise ValidationError("Необходимо указать логин, пароль и email")

    if db.query(Admin).filter(Admin.username == username).first():
        raise DuplicateUsernameError("Логин уже занят")

    db.add(Admin(username=username, password_hash=hash_password(password), email=data.email))
    commit_or_raise(db, "регистрация администратора", on_conflict=DuplicateUsernameError("Логин уже занят"))

    logger.info(f"Зарегистрирован администратор {username}")
    return MessageResponse(message="Admin registered")


@router.post("/admin/login", response_model=LoginResponse)
def login_admin(login_data: LoginRequest, response: Response, db: Session = Depends(get_db)):
    """Авторизация администратора"""
    username, password = _credentials(login_data)

    admin = db.query(Admin).filter(Admin.username == username).first()
    if not admin or not verify_password(password, admin.password_hash):
        logger.warning(f"Неудачная попытка входа администратора: {username}")
        raise AuthenticationError("Неверный логин или пароль")

    access_token = create_access_token(
        data={"sub": admin.username, "id": admin.id, "role": "admin"},
        expires_delta=timedelta(minutes=settings.admin_token_expire_minutes)
    )
    _set_session_cookie(response, access_token, samesite="lax")

    logger.info(f"Успешная авторизация администратора: {username}")
    return LoginResponse(access_token=access_token)


@router.post("/worker/login", response_model=LoginResponse)
def login_worker(login_data: LoginRequest, response: Response, db: Session = Depends(get_db)):
    """Авторизация работника"""
    username, password = _credentials(login_data)

    worker_login = db.query(WorkerLogin).filter(WorkerLogin.username == username).first()
    if not worker_login or not verify_password(password, worker_login.password_hash):
        logger.warning(f"Неудачная попытка входа работника: {username}")
        raise AuthenticationError("Неверный логин или пароль")

    access_token = create_access_token(
        data={"sub": worker_login.username, "id": worker_login.id, "role": "worker"},
        expires_delta=timedelta(minutes=settings.access_token_expire_minutes)
    )
    _set_session_cookie(response, access_token, samesite="strict")

    logger.info(f"Успешная авторизация работника: {username}")
    return LoginResponse(access_token=access_token, worker_id=worker_login.worker_id)


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response):
    """Выход: удаляем cookie сессии"""
    response.delete_cookie(settings.session_cookie_name)
    return MessageResponse(message="Logged out")
