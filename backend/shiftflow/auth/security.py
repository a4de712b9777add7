from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from shiftflow.config import settings
import bcrypt
import logging

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


def hash_password(password: str) -> str:
    """Хэш пароля (bcrypt, 10 раундов)"""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=10)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Проверить пароль по хэшу"""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        logger.warning("Некорректный формат хэша пароля")
        return False


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Создать подписанный JWT токен сессии"""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=ALGORITHM)


def verify_token(token: str) -> Optional[dict]:
    """Проверить токен; None, если подпись неверна или срок истек"""
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
    except JWTError:
        return None
