from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from shiftflow.config import settings
from shiftflow.database import engine, Base
from shiftflow.exceptions import ShiftFlowError, status_code_for
from shiftflow.api.routes import api_router
import shiftflow.models  # noqa: F401 регистрирует таблицы в Base.metadata
import logging

# Настройка логирования
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)

# Создание таблиц базы данных
Base.metadata.create_all(bind=engine)

# Создание FastAPI приложения
app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    version="1.0.0"
)

# Настройка CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins if isinstance(settings.cors_origins, list) else [settings.cors_origins],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Подключение роутеров
app.include_router(api_router)


@app.exception_handler(ShiftFlowError)
async def shiftflow_error_handler(request: Request, exc: ShiftFlowError):
    """Перевод ошибок предметной области в HTTP-ответ"""
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {status_code}: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Некорректное тело или параметры запроса - та же 400, что и у ValidationError"""
    logger.info(f"{request.method} {request.url.path} -> 400: {exc.errors()}")
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.on_event("startup")
async def startup_event():
    """Событие запуска приложения"""
    logger.info(f"Запуск приложения {settings.app_name}")
    logger.info(f"Режим отладки: {settings.debug}")
    logger.info(f"База данных: {settings.database_url}")
    cors_origins_list = settings.cors_origins if isinstance(settings.cors_origins, list) else [settings.cors_origins]
    logger.info(f"Разрешенные CORS origins: {cors_origins_list}")


@app.on_event("shutdown")
async def shutdown_event():
    """Событие остановки приложения"""
    logger.info("Остановка приложения")


@app.get("/")
def root():
    """Корневой endpoint"""
    return {
        "message": "ShiftFlow API is Running",
        "version": "1.0.0",
        "docs": "/docs"
    }
