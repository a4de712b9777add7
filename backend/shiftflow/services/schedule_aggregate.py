"""Операции изменения графика.

Каждая операция - чистая функция: принимает текущий снимок ScheduleState
и параметры команды, возвращает новый снимок и результат. Исходный снимок
не меняется, поэтому ошибка посреди операции ничего не портит. Сохранение
разницы в базе выполняет ScheduleService.

Допустимые наборы смен на один день назначения: утро + вечер, день,
пусто (выходной). Дневная смена никогда не соседствует с утренней или
вечерней.
"""
from datetime import date
from typing import Optional, Tuple
from shiftflow.exceptions import DuplicateWorkerError, NotFoundError
from shiftflow.models.shift import ShiftType
from shiftflow.services.calendar import expand_days
from shiftflow.services.schedule_state import AssignmentState, ScheduleState, ShiftState

HOLIDAY = "Holiday"
SHIFT_TYPES = frozenset(item.value for item in ShiftType)
PAIRED_SHIFT_TYPES = frozenset({ShiftType.MORNING.value, ShiftType.EVENING.value})


def _require_assignment(state: ScheduleState, assignment_id: int) -> AssignmentState:
    assignment = state.find_assignment(assignment_id)
    if assignment is None:
        raise NotFoundError(f"Назначение {assignment_id} не найдено в графике {state.id}")
    return assignment


def _replace_assignment(state: ScheduleState, updated: AssignmentState) -> ScheduleState:
    return state.with_assignments(
        updated if assignment.id == updated.id else assignment
        for assignment in state.assignments
    )


def add_worker(state: ScheduleState, worker_id: int) -> Tuple[ScheduleState, AssignmentState]:
    """
    Добавить работника в график

    Новый работник получает дневную смену на каждый день периода графика.
    Существующие назначения не перебалансируются.
    """
    if any(assignment.worker_id == worker_id for assignment in state.assignments):
        raise DuplicateWorkerError(f"Работник {worker_id} уже есть в графике {state.id}")

    shifts = tuple(
        ShiftState(date=day, shift_type=ShiftType.AFTERNOON.value)
        for day in expand_days(state.period_from, state.period_to)
    )
    assignment = AssignmentState(worker_id=worker_id, shifts=shifts)
    return state.with_assignments(state.assignments + (assignment,)), assignment


def edit_assignment_day(
    state: ScheduleState,
    assignment_id: int,
    day: Optional[date],
    new_shift_type: Optional[str],
) -> Tuple[ScheduleState, AssignmentState]:
    """
    Изменить смену назначения на конкретный день

    - "Holiday": все смены дня удаляются, день становится выходным
    - "afternoon": смены дня заменяются одной дневной
    - "morning" / "evening": удаляются дневная и смена того же типа,
      парная утренняя/вечерняя сохраняется, добавляется новая

    Если тип смены неизвестен, дата не передана или лежит вне периода
    графика, изменений нет: возвращается назначение как есть.
    """
    assignment = _require_assignment(state, assignment_id)

    if day is None or not state.period_from <= day <= state.period_to:
        return state, assignment
    if new_shift_type != HOLIDAY and new_shift_type not in SHIFT_TYPES:
        return state, assignment

    if new_shift_type in PAIRED_SHIFT_TYPES:
        shifts = [
            shift for shift in assignment.shifts
            if shift.date != day
            or (shift.shift_type in PAIRED_SHIFT_TYPES and shift.shift_type != new_shift_type)
        ]
    else:
        shifts = [shift for shift in assignment.shifts if shift.date != day]

    if new_shift_type != HOLIDAY:
        shifts.append(ShiftState(date=day, shift_type=new_shift_type))

    updated = assignment.with_shifts(shifts)
    return _replace_assignment(state, updated), updated


def remove_assignment_day(
    state: ScheduleState,
    assignment_id: int,
    day: Optional[date],
) -> Tuple[ScheduleState, AssignmentState]:
    """Удалить все смены назначения на день (сделать день выходным)"""
    assignment = _require_assignment(state, assignment_id)
    if day is None:
        return state, assignment

    updated = assignment.with_shifts(shift for shift in assignment.shifts if shift.date != day)
    return _replace_assignment(state, updated), updated


def remove_assignment(state: ScheduleState, assignment_id: int) -> Tuple[ScheduleState, AssignmentState]:
    """Удалить назначение из графика целиком"""
    removed = _require_assignment(state, assignment_id)
    remaining = [assignment for assignment in state.assignments if assignment.id != assignment_id]
    return state.with_assignments(remaining), removed
