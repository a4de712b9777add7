from pydantic import BaseModel, Field, field_validator
from datetime import date, datetime
from typing import Optional, List
from shiftflow.services.calendar import to_day


def _parse_day(value):
    """Пустая строка - нет даты; время суток отбрасывается"""
    if value is None or value == "":
        return None
    if isinstance(value, (str, datetime)):
        return to_day(value)
    return value


class ScheduleCreate(BaseModel):
    date_from: date = Field(alias="from")
    date_to: date = Field(alias="to")
    title: Optional[str] = None

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def normalize_dates(cls, v):
        return _parse_day(v)

    class Config:
        populate_by_name = True


class AddWorkerRequest(BaseModel):
    worker_id: int = Field(alias="workerId")

    class Config:
        populate_by_name = True


class AssignmentEditRequest(BaseModel):
    """Изменение назначения: замена смены на дату и/или очистка даты"""
    edit_shift_date: Optional[date] = Field(None, alias="editShiftDate")
    new_shift_type: Optional[str] = Field(None, alias="newShiftType")
    remove_all_shifts_on_date: Optional[date] = Field(None, alias="removeAllShiftsOnDate")

    @field_validator("edit_shift_date", "remove_all_shifts_on_date", mode="before")
    @classmethod
    def normalize_dates(cls, v):
        return _parse_day(v)

    class Config:
        populate_by_name = True


class Period(BaseModel):
    date_from: date = Field(alias="from")
    date_to: date = Field(alias="to")

    class Config:
        populate_by_name = True


class ShiftInfo(BaseModel):
    id: int
    date: date
    shift_type: str = Field(alias="shiftType")

    class Config:
        populate_by_name = True


class AssignmentInfo(BaseModel):
    id: int
    worker_id: int = Field(alias="workerId")
    worker_name: Optional[str] = Field(None, alias="workerName")
    shifts: List[ShiftInfo]

    class Config:
        populate_by_name = True


class ScheduleWithWorkers(BaseModel):
    id: int
    title: Optional[str] = None
    period: Period
    assignments: List[AssignmentInfo]


class WorkerShift(BaseModel):
    """Смена работника в плоском списке по всем графикам"""
    date: date
    shift_type: str = Field(alias="shiftType")

    class Config:
        populate_by_name = True


class DeleteRangeResult(BaseModel):
    message: str
    deleted: int
