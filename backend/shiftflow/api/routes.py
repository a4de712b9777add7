from fastapi import APIRouter
from shiftflow.api import auth, health, schedule, workers

api_router = APIRouter()

# Роутеры без защиты
api_router.include_router(auth.router)
api_router.include_router(health.router)

# Защищенные роутеры
api_router.include_router(workers.router)
api_router.include_router(schedule.router)
api_router.include_router(schedule.worker_router)
