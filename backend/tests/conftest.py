import os

# База в памяти и фиксированный ключ до импорта приложения
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest
from fastapi.testclient import TestClient

from shiftflow.auth.security import create_access_token
from shiftflow.database import Base, SessionLocal, engine
from shiftflow.main import app
from shiftflow.models import Worker


@pytest.fixture
def db():
    """Чистая схема и сессия на каждый тест"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_workers(db):
    """Создать работников в заданном порядке и вернуть их ID"""
    def _make(*names):
        workers = [Worker(name=name) for name in names]
        db.add_all(workers)
        db.commit()
        return [worker.id for worker in workers]
    return _make


@pytest.fixture
def client(db):
    """Клиент без сессии"""
    return TestClient(app)


@pytest.fixture
def admin_client(client):
    """Клиент с cookie сессии администратора"""
    token = create_access_token({"sub": "admin", "id": 1, "role": "admin"})
    client.cookies.set("workerToken", token)
    return client
