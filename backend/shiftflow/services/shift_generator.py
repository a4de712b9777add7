from datetime import date
from typing import List, Sequence
from shiftflow.exceptions import EmptyRosterError
from shiftflow.models.shift import ShiftType
from shiftflow.services.calendar import expand_days
from shiftflow.services.roster import partition
from shiftflow.services.schedule_state import AssignmentState, ShiftState


def generate(worker_ids: Sequence[int], date_from: date, date_to: date) -> List[AssignmentState]:
    """
    Сгенерировать назначения на период для всего состава

    Первая половина состава (с округлением вверх) работает утро и вечер
    каждый день, остальные работают дневную смену. Порядок назначений:
    сначала первая группа, затем вторая.

    Args:
        worker_ids: ID работников в порядке состава
        date_from: Начальная дата (включительно)
        date_to: Конечная дата (включительно)

    Returns:
        По одному назначению на каждого работника
    """
    if not worker_ids:
        raise EmptyRosterError("Нет работников для построения графика")

    days = expand_days(date_from, date_to)
    double_duty, single_duty = partition(worker_ids)

    assignments = []
    for worker_id in double_duty:
        shifts = []
        for day in days:
            shifts.append(ShiftState(date=day, shift_type=ShiftType.MORNING.value))
            shifts.append(ShiftState(date=day, shift_type=ShiftType.EVENING.value))
        assignments.append(AssignmentState(worker_id=worker_id, shifts=tuple(shifts)))

    for worker_id in single_duty:
        shifts = [ShiftState(date=day, shift_type=ShiftType.AFTERNOON.value) for day in days]
        assignments.append(AssignmentState(worker_id=worker_id, shifts=tuple(shifts)))

    return assignments
