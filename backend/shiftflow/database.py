from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from shiftflow.config import settings
from shiftflow.exceptions import StoreError
import logging
import os

logger = logging.getLogger(__name__)

IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")

# Создаем директорию для файла SQLite, если её нет
if settings.database_url.startswith("sqlite:///") and settings.database_url not in IN_MEMORY_URLS:
    db_dir = os.path.dirname(settings.database_url.replace("sqlite:///", ""))
    if db_dir and not os.path.exists(db_dir):
        os.makedirs(db_dir, exist_ok=True)

engine_kwargs = {}
if "sqlite" in settings.database_url:
    engine_kwargs["connect_args"] = {"check_same_thread": False}
if settings.database_url in IN_MEMORY_URLS:
    # Одно соединение на весь процесс, иначе каждая сессия видит свою пустую базу
    engine_kwargs["poolclass"] = StaticPool

engine = create_engine(settings.database_url, **engine_kwargs)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dependency для получения сессии базы данных"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _write_or_raise(db, write, action: str, on_conflict=None):
    try:
        write()
    except IntegrityError as e:
        db.rollback()
        if on_conflict is not None:
            raise on_conflict from e
        logger.error(f"Нарушение ограничения ({action}): {e}")
        raise StoreError(f"Ошибка хранилища: {action}") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Ошибка хранилища ({action}): {e}")
        raise StoreError(f"Ошибка хранилища: {action}") from e


def commit_or_raise(db, action: str, on_conflict=None):
    """
    Зафиксировать транзакцию сессии

    Нарушение уникальности превращается в on_conflict (если передан),
    любой другой сбой базы в StoreError. Транзакция откатывается.
    """
    _write_or_raise(db, db.commit, action, on_conflict)


def flush_or_raise(db, action: str, on_conflict=None):
    """Отправить изменения в базу без фиксации; ошибки как в commit_or_raise"""
    _write_or_raise(db, db.flush, action, on_conflict)
