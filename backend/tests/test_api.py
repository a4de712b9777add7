"""Сквозные тесты REST API."""

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from shiftflow.auth.security import create_access_token


def _register(client, name, username=None):
    response = client.post("/api/workers/register", json={
        "name": name,
        "username": username or name.lower(),
        "email": f"{(username or name).lower()}@example.com",
        "password": "secret",
    })
    assert response.status_code == 201, response.text


def _worker_ids(client):
    return [worker["id"] for worker in client.get("/api/workers").json()]


class TestAuth:

    def test_schedules_require_session(self, client):
        response = client.get("/api/schedules")
        assert response.status_code == 401

    def test_invalid_token(self, client):
        client.cookies.set("workerToken", "garbage")
        response = client.get("/api/schedules")
        assert response.status_code == 403

    def test_bearer_header_is_accepted(self, client):
        token = create_access_token({"sub": "admin", "role": "admin"})
        response = client.get("/api/schedules", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200

    def test_admin_register_and_login(self, client):
        response = client.post("/api/admin/register", json={
            "username": "boss", "password": "pw", "email": "boss@example.com",
        })
        assert response.status_code == 201

        response = client.post("/api/admin/register", json={
            "username": "boss", "password": "pw", "email": "boss@example.com",
        })
        assert response.status_code == 409

        response = client.post("/api/admin/login", json={"username": "boss", "password": "pw"})
        assert response.status_code == 200
        assert "workerToken" in response.cookies

        client.cookies.set("workerToken", response.cookies["workerToken"])
        assert client.get("/api/schedules").status_code == 200

    def test_admin_register_requires_fields(self, client):
        response = client.post("/api/admin/register", json={"username": "boss"})
        assert response.status_code == 400

    def test_wrong_password(self, client):
        client.post("/api/admin/register", json={
            "username": "boss", "password": "pw", "email": "boss@example.com",
        })
        response = client.post("/api/admin/login", json={"username": "boss", "password": "nope"})
        assert response.status_code == 401

    def test_worker_login_returns_worker_id(self, admin_client):
        _register(admin_client, "Anna")
        (worker_id,) = _worker_ids(admin_client)

        response = admin_client.post("/api/worker/login", json={"username": "anna", "password": "secret"})

        assert response.status_code == 200
        assert response.json()["workerDataId"] == worker_id

    def test_logout(self, client):
        response = client.post("/api/logout")
        assert response.status_code == 200
        assert response.json() == {"message": "Logged out"}


class TestWorkers:

    def test_duplicate_username(self, admin_client):
        _register(admin_client, "Anna")
        response = admin_client.post("/api/workers/register", json={
            "name": "Other", "username": "anna", "email": "x@example.com", "password": "pw",
        })
        assert response.status_code == 409

    def test_register_requires_all_fields(self, admin_client):
        response = admin_client.post("/api/workers/register", json={"name": "Anna"})
        assert response.status_code == 400

    def test_logins_overview_hides_password(self, admin_client):
        _register(admin_client, "Anna")
        (login,) = admin_client.get("/api/workers/logins").json()
        assert login["username"] == "anna"
        assert "password_hash" not in login

    def test_crud(self, admin_client):
        response = admin_client.post("/api/workers", json={"name": "Boris"})
        assert response.status_code == 201
        worker_id = response.json()["id"]

        response = admin_client.put(f"/api/workers/{worker_id}", json={"name": "Boris K"})
        assert response.json()["name"] == "Boris K"
        assert admin_client.get(f"/api/workers/{worker_id}").json()["name"] == "Boris K"
        assert admin_client.get("/api/workers/999").status_code == 404


class TestSchedules:

    @pytest.fixture
    def roster(self, admin_client):
        for name in ("Anna", "Boris", "Clara"):
            _register(admin_client, name)
        return _worker_ids(admin_client)

    def _create(self, client, date_from="2024-01-01", date_to="2024-01-02", **extra):
        return client.post("/api/schedules/create-auto", json={"from": date_from, "to": date_to, **extra})

    def test_create_auto(self, admin_client, roster):
        response = self._create(admin_client)

        assert response.status_code == 201
        body = response.json()
        assert body["title"] == "Schedule for 2024-01-01 to 2024-01-02"
        assert body["period"] == {"from": "2024-01-01", "to": "2024-01-02"}
        assert [a["workerName"] for a in body["assignments"]] == ["Anna", "Boris", "Clara"]
        assert [s["shiftType"] for s in body["assignments"][2]["shifts"]] == ["afternoon", "afternoon"]

    def test_create_accepts_datetime_strings(self, admin_client, roster):
        response = self._create(admin_client, "2024-01-01T00:00:00.000Z", "2024-01-03T00:00:00.000Z")
        assert response.status_code == 201
        assert response.json()["period"] == {"from": "2024-01-01", "to": "2024-01-03"}

    def test_create_duplicate(self, admin_client, roster):
        self._create(admin_client)
        response = self._create(admin_client)

        assert response.status_code == 409
        assert len(admin_client.get("/api/schedules").json()) == 1

    def test_create_without_workers(self, admin_client):
        response = self._create(admin_client)
        assert response.status_code == 400

    def test_create_reversed_period(self, admin_client, roster):
        response = self._create(admin_client, "2024-01-05", "2024-01-01")
        assert response.status_code == 400

    def test_create_with_malformed_date(self, admin_client, roster):
        response = self._create(admin_client, "soon")
        assert response.status_code == 400

    def test_create_without_period(self, admin_client, roster):
        response = admin_client.post("/api/schedules/create-auto", json={"title": "Январь"})
        assert response.status_code == 400

    def test_store_failure(self, admin_client, roster, monkeypatch):
        def failing_commit(self):
            raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

        monkeypatch.setattr(Session, "commit", failing_commit)
        response = self._create(admin_client)

        assert response.status_code == 500
        assert response.json()["detail"] == "Ошибка хранилища: создание графика"

    def test_edit_assignment(self, admin_client, roster):
        schedule = self._create(admin_client).json()
        assignment_id = schedule["assignments"][0]["id"]

        response = admin_client.put(
            f"/api/schedules/{schedule['id']}/assignment/{assignment_id}",
            json={"editShiftDate": "2024-01-01", "newShiftType": "afternoon"},
        )

        assert response.status_code == 200
        shifts = response.json()["shifts"]
        on_first_day = [s["shiftType"] for s in shifts if s["date"] == "2024-01-01"]
        assert on_first_day == ["afternoon"]

    def test_remove_day_and_unknown_type(self, admin_client, roster):
        schedule = self._create(admin_client).json()
        assignment_id = schedule["assignments"][2]["id"]

        response = admin_client.put(
            f"/api/schedules/{schedule['id']}/assignment/{assignment_id}",
            json={"editShiftDate": "2024-01-01", "newShiftType": "night", "removeAllShiftsOnDate": "2024-01-02"},
        )

        assert response.status_code == 200
        assert [(s["date"], s["shiftType"]) for s in response.json()["shifts"]] == [("2024-01-01", "afternoon")]

    def test_edit_with_malformed_date(self, admin_client, roster):
        schedule = self._create(admin_client).json()
        assignment_id = schedule["assignments"][0]["id"]

        response = admin_client.put(
            f"/api/schedules/{schedule['id']}/assignment/{assignment_id}",
            json={"editShiftDate": "31.01.2024", "newShiftType": "afternoon"},
        )
        assert response.status_code == 400

    def test_edit_outside_period(self, admin_client, roster):
        schedule = self._create(admin_client).json()
        assignment = schedule["assignments"][2]

        response = admin_client.put(
            f"/api/schedules/{schedule['id']}/assignment/{assignment['id']}",
            json={"editShiftDate": "2024-03-01", "newShiftType": "morning"},
        )

        assert response.status_code == 200
        assert response.json()["shifts"] == assignment["shifts"]

    def test_edit_unknown_assignment(self, admin_client, roster):
        schedule = self._create(admin_client).json()
        response = admin_client.put(
            f"/api/schedules/{schedule['id']}/assignment/999",
            json={"editShiftDate": "2024-01-01", "newShiftType": "Holiday"},
        )
        assert response.status_code == 404

    def test_add_worker(self, admin_client, roster):
        schedule = self._create(admin_client).json()
        new_worker = admin_client.post("/api/workers", json={"name": "Dmitri"}).json()

        response = admin_client.post(
            f"/api/schedules/{schedule['id']}/add-worker", json={"workerId": new_worker["id"]}
        )
        assert response.status_code == 200
        assert response.json()["assignments"][-1]["workerName"] == "Dmitri"

        response = admin_client.post(
            f"/api/schedules/{schedule['id']}/add-worker", json={"workerId": new_worker["id"]}
        )
        assert response.status_code == 409

    def test_delete_assignment_and_worker_schedule(self, admin_client, roster):
        schedule = self._create(admin_client).json()
        first = schedule["assignments"][0]

        shifts = admin_client.get(f"/api/worker/{first['workerId']}/schedule").json()
        assert shifts[0] == {"date": "2024-01-01", "shiftType": "morning"}
        assert len(shifts) == 4

        response = admin_client.delete(f"/api/schedules/{schedule['id']}/assignment/{first['id']}")
        assert response.status_code == 200
        assert admin_client.get(f"/api/worker/{first['workerId']}/schedule").json() == []

    def test_delete_range(self, admin_client, roster):
        self._create(admin_client, "2024-01-01", "2024-01-07")
        self._create(admin_client, "2024-01-28", "2024-02-03")

        response = admin_client.delete("/api/schedules/delete-range", params={"from": "2024-01-01", "to": "2024-01-31"})

        assert response.status_code == 200
        assert response.json()["deleted"] == 1
        remaining = admin_client.get("/api/schedules").json()
        assert [s["period"]["from"] for s in remaining] == ["2024-01-28"]

    def test_delete_range_invalid_date(self, admin_client):
        response = admin_client.delete("/api/schedules/delete-range", params={"from": "soon", "to": "2024-01-31"})
        assert response.status_code == 400

    def test_delete_worker_cascade(self, admin_client, roster):
        schedule = self._create(admin_client).json()
        anna_id = roster[0]

        response = admin_client.delete(f"/api/workers/{anna_id}")

        assert response.status_code == 200
        assert admin_client.get(f"/api/workers/{anna_id}").status_code == 404
        assert admin_client.post("/api/worker/login", json={"username": "anna", "password": "secret"}).status_code == 401
        remaining = admin_client.get(f"/api/schedules/{schedule['id']}").json()["assignments"]
        assert anna_id not in [a["workerId"] for a in remaining]


def test_health(client):
    assert client.get("/api/health").json()["status"] == "ok"
