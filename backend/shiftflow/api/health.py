from fastapi import APIRouter
from shiftflow.config import settings

router = APIRouter(prefix="/api", tags=["utils"])


@router.get("/health")
def health_check():
    """Проверка здоровья сервиса (публичный endpoint для healthcheck)"""
    return {"status": "ok", "service": settings.app_name}
