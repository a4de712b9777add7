from sqlalchemy.orm import Session
from typing import List, Optional
from shiftflow.auth.security import hash_password
from shiftflow.database import commit_or_raise, flush_or_raise
from shiftflow.exceptions import (
    DuplicateUsernameError,
    DuplicateWorkerNameError,
    NotFoundError,
    ValidationError,
)
from shiftflow.models import Worker, WorkerLogin
from shiftflow.schemas.worker import WorkerRegister
import logging

logger = logging.getLogger(__name__)


class WorkerService:
    """Сервис для работы с работниками и их учетными записями"""

    def __init__(self, db: Session):
        self.db = db

    def _ensure_name_free(self, name: str, exclude_id: Optional[int] = None):
        query = self.db.query(Worker).filter(Worker.name == name)
        if exclude_id is not None:
            query = query.filter(Worker.id != exclude_id)
        if query.first():
            raise DuplicateWorkerNameError(f"Работник с именем {name!r} уже существует")

    def register_worker(self, data: WorkerRegister) -> Worker:
        """
        Зарегистрировать работника вместе с учетной записью для входа

        Returns:
            Созданный работник
        """
        name = (data.name or "").strip()
        username = (data.username or "").strip()
        if not name or not username or not data.email or not data.password:
            raise ValidationError("Необходимо заполнить все поля")

        if self.db.query(WorkerLogin).filter(WorkerLogin.username == username).first():
            raise DuplicateUsernameError(f"Логин {username!r} уже занят")
        self._ensure_name_free(name)

        worker = Worker(name=name)
        self.db.add(worker)
        # Получаем ID для worker; имя могли занять после проверки выше
        flush_or_raise(
            self.db,
            "регистрация работника",
            on_conflict=DuplicateWorkerNameError(f"Работник с именем {name!r} уже существует")
        )

        login = WorkerLogin(
            username=username,
            password_hash=hash_password(data.password),
            name=name,
            email=data.email,
            worker_id=worker.id,
        )
        self.db.add(login)
        commit_or_raise(
            self.db,
            "регистрация работника",
            on_conflict=DuplicateUsernameError(f"Логин {username!r} уже занят")
        )
        self.db.refresh(worker)

        logger.info(f"Зарегистрирован работник {worker.id} ({username})")
        return worker

    def create_worker(self, name: str) -> Worker:
        """Создать работника без учетной записи"""
        name = (name or "").strip()
        if not name:
            raise ValidationError("Имя работника обязательно")
        self._ensure_name_free(name)

        worker = Worker(name=name)
        self.db.add(worker)
        commit_or_raise(
            self.db,
            "создание работника",
            on_conflict=DuplicateWorkerNameError(f"Работник с именем {name!r} уже существует")
        )
        self.db.refresh(worker)
        logger.info(f"Создан работник {worker.id} ({name})")
        return worker

    def list_workers(self) -> List[Worker]:
        return self.db.query(Worker).order_by(Worker.id).all()

    def get_worker(self, worker_id: int) -> Worker:
        worker = self.db.query(Worker).filter(Worker.id == worker_id).first()
        if not worker:
            raise NotFoundError(f"Работник {worker_id} не найден")
        return worker

    def update_worker(self, worker_id: int, name: Optional[str]) -> Worker:
        """Переименовать работника"""
        worker = self.get_worker(worker_id)
        if name is not None:
            name = name.strip()
            if not name:
                raise ValidationError("Имя работника обязательно")
            self._ensure_name_free(name, exclude_id=worker_id)
            worker.name = name

        commit_or_raise(
            self.db,
            "обновление работника",
            on_conflict=DuplicateWorkerNameError(f"Работник с именем {name!r} уже существует")
        )
        self.db.refresh(worker)
        logger.info(f"Обновлен работник {worker_id}")
        return worker

    def list_logins(self) -> List[WorkerLogin]:
        """Учетные записи работников для обзора в админке"""
        return self.db.query(WorkerLogin).order_by(WorkerLogin.id).all()
