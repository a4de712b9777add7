from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Union
import secrets


class Settings(BaseSettings):
    """Конфигурация приложения из переменных окружения"""

    # Приложение
    app_name: str = "ShiftFlow API"
    debug: bool = False
    log_level: str = "INFO"

    # База данных
    database_url: str = "sqlite:///./data/shiftflow.db"

    # CORS (админка и приложение работника)
    cors_origins: Union[str, List[str]] = "http://localhost:5173,http://localhost:5174"

    # Авторизация
    secret_key: str = secrets.token_urlsafe(32)  # Генерируется случайно, если не указан в .env
    access_token_expire_minutes: int = 1440  # 24 часа, токен работника
    admin_token_expire_minutes: int = 60
    session_cookie_name: str = "workerToken"
    cookie_max_age_seconds: int = 24 * 3600
    cookie_secure: bool = False

    @field_validator('cors_origins')
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",")]
        return v

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


settings = Settings()
