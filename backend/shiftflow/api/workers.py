from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from shiftflow.database import get_db
from shiftflow.schemas.auth import MessageResponse
from shiftflow.schemas.worker import (
    Worker as WorkerSchema,
    WorkerCreate,
    WorkerLoginInfo,
    WorkerRegister,
    WorkerUpdate,
)
from shiftflow.services.schedule_service import ScheduleService
from shiftflow.services.worker_service import WorkerService
from shiftflow.auth.dependencies import get_current_user

router = APIRouter(prefix="/api/workers", tags=["workers"])


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register_worker(
    data: WorkerRegister,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Создать работника вместе с учетной записью"""
    WorkerService(db).register_worker(data)
    return MessageResponse(message="Worker successfully created")


@router.post("", response_model=WorkerSchema, status_code=status.HTTP_201_CREATED)
def create_worker(
    data: WorkerCreate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Создать работника без учетной записи"""
    return WorkerService(db).create_worker(data.name)


@router.get("", response_model=List[WorkerSchema])
def get_workers(
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Получить список всех работников"""
    return WorkerService(db).list_workers()


@router.get("/logins", response_model=List[WorkerLoginInfo])
def get_worker_logins(
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Учетные записи работников (имя, логин, email)"""
    return WorkerService(db).list_logins()


@router.get("/{worker_id}", response_model=WorkerSchema)
def get_worker(
    worker_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Получить работника по ID"""
    return WorkerService(db).get_worker(worker_id)


@router.put("/{worker_id}", response_model=WorkerSchema)
def update_worker(
    worker_id: int,
    data: WorkerUpdate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Обновить работника"""
    return WorkerService(db).update_worker(worker_id, data.name)


@router.delete("/{worker_id}", response_model=MessageResponse)
def delete_worker(
    worker_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Удалить работника, его учетную запись и назначения во всех графиках"""
    ScheduleService(db).delete_worker_cascade(worker_id)
    return MessageResponse(message="Worker deleted successfully")
