from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List
from shiftflow.database import get_db
from shiftflow.exceptions import ValidationError
from shiftflow.schemas.auth import MessageResponse
from shiftflow.schemas.schedule import (
    AddWorkerRequest,
    AssignmentEditRequest,
    AssignmentInfo,
    DeleteRangeResult,
    ScheduleCreate,
    ScheduleWithWorkers,
    WorkerShift,
)
from shiftflow.services.calendar import to_day
from shiftflow.services.schedule_service import ScheduleService
from shiftflow.auth.dependencies import get_current_user

router = APIRouter(prefix="/api/schedules", tags=["schedules"])

# Расписание конкретного работника (приложение работника)
worker_router = APIRouter(prefix="/api/worker", tags=["schedules"])


@router.post("/create-auto", response_model=ScheduleWithWorkers, status_code=status.HTTP_201_CREATED)
def create_auto_schedule(
    data: ScheduleCreate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Автоматически построить график на период для всех работников"""
    service = ScheduleService(db)
    schedule = service.create_auto_schedule(data.date_from, data.date_to, data.title)
    return service.to_view(schedule)


@router.get("", response_model=List[ScheduleWithWorkers])
def get_schedules(
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Получить все графики с именами работников"""
    return ScheduleService(db).list_schedules_with_worker_names()


@router.delete("/delete-range", response_model=DeleteRangeResult)
def delete_schedules_in_range(
    date_from: str = Query(..., alias="from", description="Начальная дата (включительно)"),
    date_to: str = Query(..., alias="to", description="Конечная дата (включительно)"),
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Удалить графики, целиком попадающие в диапазон дат"""
    try:
        start, end = to_day(date_from), to_day(date_to)
    except ValueError as e:
        raise ValidationError(str(e))

    deleted = ScheduleService(db).delete_schedules_in_range(start, end)
    return DeleteRangeResult(message=f"Удалено графиков: {deleted}", deleted=deleted)


@router.get("/{schedule_id}", response_model=ScheduleWithWorkers)
def get_schedule(
    schedule_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Получить график по ID"""
    return ScheduleService(db).get_schedule(schedule_id)


@router.post("/{schedule_id}/add-worker", response_model=ScheduleWithWorkers)
def add_worker_to_schedule(
    schedule_id: int,
    data: AddWorkerRequest,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Добавить работника в график (дневные смены на весь период)"""
    service = ScheduleService(db)
    schedule = service.add_worker(schedule_id, data.worker_id)
    return service.to_view(schedule)


@router.put("/{schedule_id}/assignment/{assignment_id}", response_model=AssignmentInfo)
def update_assignment(
    schedule_id: int,
    assignment_id: int,
    data: AssignmentEditRequest,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Изменить смену назначения на дату и/или очистить дату"""
    service = ScheduleService(db)
    assignment = service.edit_assignment(
        schedule_id,
        assignment_id,
        edit_date=data.edit_shift_date,
        new_shift_type=data.new_shift_type,
        remove_date=data.remove_all_shifts_on_date
    )
    return service.assignment_view(assignment)


@router.delete("/{schedule_id}/assignment/{assignment_id}", response_model=MessageResponse)
def delete_assignment(
    schedule_id: int,
    assignment_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Удалить назначение из графика"""
    ScheduleService(db).remove_assignment(schedule_id, assignment_id)
    return MessageResponse(message="Assignment deleted")


@worker_router.get("/{worker_id}/schedule", response_model=List[WorkerShift])
def get_worker_schedule(
    worker_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Все смены работника по всем графикам"""
    return ScheduleService(db).get_worker_schedule(worker_id)
