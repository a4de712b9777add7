from sqlalchemy.orm import Session
from datetime import date
from typing import Dict, Iterable, List, Optional
from shiftflow.exceptions import (
    DuplicateScheduleError,
    DuplicateWorkerError,
    NotFoundError,
    ShiftFlowError,
    ValidationError,
)
from shiftflow.database import commit_or_raise
from shiftflow.models import Assignment, Schedule, Shift, ShiftType, Worker, WorkerLogin
from shiftflow.schemas.schedule import (
    AssignmentInfo,
    Period,
    ScheduleWithWorkers,
    ShiftInfo,
    WorkerShift,
)
from shiftflow.services import schedule_aggregate
from shiftflow.services.schedule_state import AssignmentState, ScheduleState
from shiftflow.services.shift_generator import generate
import logging

logger = logging.getLogger(__name__)


class ScheduleService:
    """Сервис для работы с графиками смен"""

    def __init__(self, db: Session):
        self.db = db

    # ------------------------------------------------------------------
    # Работа с хранилищем
    # ------------------------------------------------------------------

    def _commit(self, action: str, on_conflict: Optional[ShiftFlowError] = None):
        commit_or_raise(self.db, action, on_conflict)

    def _get_schedule_model(self, schedule_id: int) -> Schedule:
        schedule = self.db.query(Schedule).filter(Schedule.id == schedule_id).first()
        if not schedule:
            raise NotFoundError(f"График {schedule_id} не найден")
        return schedule

    def _find_schedule(self, date_from: date, date_to: date) -> Optional[Schedule]:
        return self.db.query(Schedule).filter(
            Schedule.period_from == date_from,
            Schedule.period_to == date_to
        ).first()

    def _get_worker_model(self, worker_id: int) -> Worker:
        worker = self.db.query(Worker).filter(Worker.id == worker_id).first()
        if not worker:
            raise NotFoundError(f"Работник {worker_id} не найден")
        return worker

    @staticmethod
    def _new_assignment(state: AssignmentState) -> Assignment:
        return Assignment(
            worker_id=state.worker_id,
            shifts=[
                Shift(date=shift.date, shift_type=ShiftType(shift.shift_type))
                for shift in state.shifts
            ],
        )

    def _apply_state(self, schedule: Schedule, state: ScheduleState):
        """
        Перенести в ORM-модель разницу между сохраненным графиком и новым снимком

        Назначения и смены, которых нет в снимке, удаляются; элементы снимка
        без id добавляются. Остальные строки не трогаются.
        """
        schedule.title = state.title
        targets = {assignment.id: assignment for assignment in state.assignments if assignment.id is not None}

        for assignment in list(schedule.assignments):
            target = targets.get(assignment.id)
            if target is None:
                schedule.assignments.remove(assignment)
                continue

            kept_ids = {shift.id for shift in target.shifts if shift.id is not None}
            for shift in list(assignment.shifts):
                if shift.id not in kept_ids:
                    assignment.shifts.remove(shift)
            for shift in target.shifts:
                if shift.id is None:
                    assignment.shifts.append(
                        Shift(date=shift.date, shift_type=ShiftType(shift.shift_type))
                    )

        for assignment in state.assignments:
            if assignment.id is None:
                schedule.assignments.append(self._new_assignment(assignment))

    def _worker_names(self, worker_ids: Iterable[int]) -> Dict[int, str]:
        ids = set(worker_ids)
        if not ids:
            return {}
        workers = self.db.query(Worker).filter(Worker.id.in_(ids)).all()
        return {worker.id: worker.name for worker in workers}

    def to_view(self, schedule: Schedule, names: Optional[Dict[int, str]] = None) -> ScheduleWithWorkers:
        """График с подставленными именами работников"""
        if names is None:
            names = self._worker_names(a.worker_id for a in schedule.assignments)
        return ScheduleWithWorkers(
            id=schedule.id,
            title=schedule.title,
            period=Period(date_from=schedule.period_from, date_to=schedule.period_to),
            assignments=[self.assignment_view(assignment, names) for assignment in schedule.assignments],
        )

    def assignment_view(self, assignment: Assignment, names: Optional[Dict[int, str]] = None) -> AssignmentInfo:
        """Назначение с именем работника"""
        if names is None:
            names = self._worker_names([assignment.worker_id])
        return AssignmentInfo(
            id=assignment.id,
            worker_id=assignment.worker_id,
            worker_name=names.get(assignment.worker_id),
            shifts=[
                ShiftInfo(id=shift.id, date=shift.date, shift_type=ShiftType(shift.shift_type).value)
                for shift in assignment.shifts
            ],
        )

    # ------------------------------------------------------------------
    # Операции
    # ------------------------------------------------------------------

    def create_auto_schedule(
        self,
        date_from: date,
        date_to: date,
        title: Optional[str] = None
    ) -> Schedule:
        """
        Автоматически построить график на период для всего состава

        Args:
            date_from: Начальная дата (включительно)
            date_to: Конечная дата (включительно)
            title: Название; по умолчанию "Schedule for {from} to {to}"

        Returns:
            Созданный график
        """
        if date_from > date_to:
            raise ValidationError("Дата начала периода позже даты окончания")

        if self._find_schedule(date_from, date_to):
            raise DuplicateScheduleError(f"График на период {date_from} - {date_to} уже существует")

        workers = self.db.query(Worker).order_by(Worker.id).all()
        assignments = generate([worker.id for worker in workers], date_from, date_to)

        state = ScheduleState(
            period_from=date_from,
            period_to=date_to,
            title=title or f"Schedule for {date_from.isoformat()} to {date_to.isoformat()}",
            assignments=tuple(assignments),
        )
        schedule = Schedule(period_from=date_from, period_to=date_to)
        self._apply_state(schedule, state)
        self.db.add(schedule)

        # Параллельный запрос мог успеть создать график на тот же период
        self._commit(
            "создание графика",
            on_conflict=DuplicateScheduleError(f"График на период {date_from} - {date_to} уже существует")
        )

        self.db.refresh(schedule)
        logger.info(
            f"Создан график {schedule.id} на период {date_from} - {date_to} "
            f"для {len(assignments)} работников"
        )
        return schedule

    def add_worker(self, schedule_id: int, worker_id: int) -> Schedule:
        """Добавить работника в существующий график (дневные смены на весь период)"""
        schedule = self._get_schedule_model(schedule_id)
        self._get_worker_model(worker_id)

        state, _ = schedule_aggregate.add_worker(ScheduleState.from_model(schedule), worker_id)
        self._apply_state(schedule, state)

        self._commit(
            "добавление работника в график",
            on_conflict=DuplicateWorkerError(f"Работник {worker_id} уже есть в графике {schedule_id}")
        )

        self.db.refresh(schedule)
        logger.info(f"Работник {worker_id} добавлен в график {schedule_id}")
        return schedule

    def edit_assignment(
        self,
        schedule_id: int,
        assignment_id: int,
        edit_date: Optional[date] = None,
        new_shift_type: Optional[str] = None,
        remove_date: Optional[date] = None
    ) -> Assignment:
        """
        Изменить назначение: очистить дату и/или заменить смену на дату

        Если переданы обе даты, сначала очищается remove_date, затем
        применяется замена смены на edit_date.
        """
        schedule = self._get_schedule_model(schedule_id)
        state = ScheduleState.from_model(schedule)

        if remove_date is not None:
            state, _ = schedule_aggregate.remove_assignment_day(state, assignment_id, remove_date)
        state, _ = schedule_aggregate.edit_assignment_day(state, assignment_id, edit_date, new_shift_type)

        self._apply_state(schedule, state)
        self._commit("изменение назначения")

        assignment = self.db.query(Assignment).filter(Assignment.id == assignment_id).first()
        logger.info(
            f"Изменено назначение {assignment_id} графика {schedule_id}: "
            f"дата {edit_date}, смена {new_shift_type}, очистка {remove_date}"
        )
        return assignment

    def remove_assignment(self, schedule_id: int, assignment_id: int) -> None:
        """Удалить назначение из графика"""
        schedule = self._get_schedule_model(schedule_id)
        state, removed = schedule_aggregate.remove_assignment(ScheduleState.from_model(schedule), assignment_id)
        self._apply_state(schedule, state)
        self._commit("удаление назначения")
        logger.info(f"Из графика {schedule_id} удалено назначение {assignment_id} (работник {removed.worker_id})")

    def get_schedule(self, schedule_id: int) -> ScheduleWithWorkers:
        """Получить график по ID с именами работников"""
        return self.to_view(self._get_schedule_model(schedule_id))

    def list_schedules_with_worker_names(self) -> List[ScheduleWithWorkers]:
        """Все графики с именами работников в назначениях"""
        schedules = self.db.query(Schedule).order_by(Schedule.id).all()
        names = self._worker_names(
            assignment.worker_id
            for schedule in schedules
            for assignment in schedule.assignments
        )
        return [self.to_view(schedule, names) for schedule in schedules]

    def get_worker_schedule(self, worker_id: int) -> List[WorkerShift]:
        """
        Все смены работника по всем графикам

        Графики идут в порядке создания, смены внутри назначения в порядке
        хранения; общий список заново не сортируется.
        """
        self._get_worker_model(worker_id)

        assignments = self.db.query(Assignment).filter(
            Assignment.worker_id == worker_id
        ).order_by(Assignment.schedule_id, Assignment.id).all()

        return [
            WorkerShift(date=shift.date, shift_type=ShiftType(shift.shift_type).value)
            for assignment in assignments
            for shift in assignment.shifts
        ]

    def delete_schedules_in_range(self, date_from: date, date_to: date) -> int:
        """
        Удалить графики, период которых целиком лежит внутри [date_from, date_to]

        Графики, лишь пересекающиеся с диапазоном, не удаляются.

        Returns:
            Количество удаленных графиков
        """
        schedules = self.db.query(Schedule).filter(
            Schedule.period_from >= date_from,
            Schedule.period_to <= date_to
        ).all()

        for schedule in schedules:
            self.db.delete(schedule)
        self._commit("удаление графиков за период")

        logger.info(f"Удалено графиков в диапазоне {date_from} - {date_to}: {len(schedules)}")
        return len(schedules)

    def delete_worker_cascade(self, worker_id: int) -> None:
        """
        Удалить работника, его учетную запись и все его назначения

        Каждый шаг фиксируется отдельно; при сбое посередине предыдущие
        шаги не откатываются.
        """
        worker = self._get_worker_model(worker_id)

        self.db.query(WorkerLogin).filter(WorkerLogin.worker_id == worker_id).delete()
        self._commit("удаление учетной записи работника")

        self.db.delete(worker)
        self._commit("удаление работника")

        assignments = self.db.query(Assignment).filter(Assignment.worker_id == worker_id).all()
        for assignment in assignments:
            self.db.delete(assignment)
        self._commit("удаление работника из графиков")

        logger.info(f"Удален работник {worker_id}, убран из графиков: {len(assignments)}")
