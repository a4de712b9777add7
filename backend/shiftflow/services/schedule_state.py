"""Неизменяемые снимки графика, над которыми работают чистые операции.

Идентификаторы назначений и смен выдает база данных; у только что
созданных элементов id равен None до сохранения.
"""
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Optional, Tuple


@dataclass(frozen=True)
class ShiftState:
    date: date
    shift_type: str
    id: Optional[int] = None


@dataclass(frozen=True)
class AssignmentState:
    worker_id: int
    shifts: Tuple[ShiftState, ...] = ()
    id: Optional[int] = None

    def with_shifts(self, shifts) -> "AssignmentState":
        return replace(self, shifts=tuple(shifts))


@dataclass(frozen=True)
class ScheduleState:
    period_from: date
    period_to: date
    title: Optional[str] = None
    assignments: Tuple[AssignmentState, ...] = field(default_factory=tuple)
    id: Optional[int] = None

    def find_assignment(self, assignment_id: int) -> Optional[AssignmentState]:
        for assignment in self.assignments:
            if assignment.id == assignment_id:
                return assignment
        return None

    def with_assignments(self, assignments) -> "ScheduleState":
        return replace(self, assignments=tuple(assignments))

    @classmethod
    def from_model(cls, schedule) -> "ScheduleState":
        """Снимок из ORM-модели Schedule"""
        return cls(
            id=schedule.id,
            title=schedule.title,
            period_from=schedule.period_from,
            period_to=schedule.period_to,
            assignments=tuple(
                AssignmentState(
                    id=assignment.id,
                    worker_id=assignment.worker_id,
                    shifts=tuple(
                        ShiftState(
                            id=shift.id,
                            date=shift.date,
                            shift_type=getattr(shift.shift_type, "value", shift.shift_type),
                        )
                        for shift in assignment.shifts
                    ),
                )
                for assignment in schedule.assignments
            ),
        )
