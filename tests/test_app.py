import random

import pytest

from attendance_tracker.container import build_services
from attendance_tracker.main import create_app


@pytest.fixture
def client(monkeypatch, employees_repo, attendance_repo, admins_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_services(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        admins_repo=admins_repo,
        rng=random.Random(0),
    )
    return create_app(container).test_client()


def _login_employee(client, employee_id="K14050"):
    return client.post("/login", json={"employee_id": employee_id})


def _login_admin(client):
    return client.post("/admin/login", json={"admin_id": "admin", "password": "admin123"})


def test_employee_routes_require_login(client):
    for path in ("/api/me", "/api/dashboard", "/api/attendance/history", "/api/leaves"):
        resp = client.get(path)
        assert resp.status_code == 401
        assert resp.get_json()["success"] is False


def test_employee_login_and_logout(client):
    resp = _login_employee(client)
    assert resp.status_code == 200
    assert resp.get_json()["message"] == "Welcome back, John Doe!"

    assert client.get("/api/me").get_json()["user"] == {"id": "K14050", "name": "John Doe", "role": "employee"}

    client.post("/logout")
    assert client.get("/api/me").status_code == 401


def test_employee_login_errors(client):
    resp = _login_employee(client, "bad")
    assert resp.status_code == 400

    resp = _login_employee(client, "K00000")
    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Employee ID not found."


def test_employee_views(client):
    _login_employee(client)

    history = client.get("/api/attendance/history").get_json()
    assert history["success"] is True
    assert 0 <= history["summary"]["attendance_rate"] <= 100
    assert len(history["records"]) >= 1

    leaves = client.get("/api/leaves").get_json()
    for group in leaves["groups"]:
        for leave in group["leaves"]:
            assert leave["badge"] in ("Approved", "Pending")

    dashboard = client.get("/api/dashboard").get_json()
    assert dashboard["name"] == "John Doe"
    assert set(dashboard["stats"]) == {"days_worked", "sick_holidays", "personal_leaves", "absent_days", "total_days"}


def test_dashboard_stats_range(client):
    _login_employee(client)

    resp = client.get("/api/dashboard/stats?from=2026-09-01&to=2026-09-30")
    assert resp.get_json()["stats"]["days_worked"] == 21

    assert client.get("/api/dashboard/stats?from=2026-09-30&to=2026-09-01").status_code == 400
    assert client.get("/api/dashboard/stats?from=yesterday").status_code == 400


def test_checkin_then_checkout(client):
    _login_employee(client)

    resp = client.post("/api/attendance/checkin")
    assert resp.status_code == 201
    assert resp.get_json()["record"]["employee_id"] == "K14050"

    assert client.post("/api/attendance/checkin").status_code == 400

    resp = client.post("/api/attendance/checkout")
    assert resp.status_code == 200
    assert resp.get_json()["record"]["check_out"] is not None

    records = client.get("/api/attendance/records").get_json()["records"]
    assert len(records) == 1


def test_admin_routes_reject_employees(client):
    _login_employee(client)

    assert client.get("/admin/api/employees").status_code == 403


def test_admin_login_errors(client):
    resp = client.post("/admin/login", json={"admin_id": "admin", "password": "nope"})

    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Invalid admin ID or password"


def test_admin_manages_employees(client):
    _login_admin(client)

    resp = client.post(
        "/admin/api/employees",
        json={"id": "K14052", "name": "Alex Brown", "department": "Finance", "position": "Analyst"},
    )
    assert resp.status_code == 201

    resp = client.post("/admin/api/employees", json={"id": "K14052", "name": "A", "department": "B", "position": "C"})
    assert resp.status_code == 400

    ids = [e["id"] for e in client.get("/admin/api/employees?q=finance").get_json()["employees"]]
    assert ids == ["K14052"]

    resp = client.put(
        "/admin/api/employees/K14052",
        json={"name": "Alex Brown", "department": "Finance", "position": "Lead Analyst", "status": "inactive"},
    )
    assert resp.get_json()["employee"]["status"] == "inactive"

    assert client.get("/admin/api/dashboard").get_json()["stats"]["total_employees"] == 3

    assert client.delete("/admin/api/employees/K14052").status_code == 200
    assert client.delete("/admin/api/employees/K14052").status_code == 404


def test_admin_manages_attendance(client):
    _login_admin(client)

    resp = client.post(
        "/admin/api/attendance",
        json={"employee_id": "K14051", "date": "2026-10-02", "status": "late", "check_in": "09:30", "check_out": "17:30"},
    )
    assert resp.status_code == 201
    record_id = resp.get_json()["record"]["id"]

    rows = client.get("/admin/api/attendance?mode=daily&date=2026-10-02").get_json()["records"]
    assert [r["employee_name"] for r in rows] == ["Jane Smith"]

    assert client.get("/admin/api/attendance?mode=daily&date=2026-10-03").get_json()["records"] == []

    resp = client.post("/admin/api/attendance", json={"employee_id": "K14051", "date": "2026-10-02"})
    assert resp.status_code == 400

    assert client.delete(f"/admin/api/attendance/{record_id}").status_code == 200
    assert client.delete(f"/admin/api/attendance/{record_id}").status_code == 404


def test_dashboard_stats_unexpected_failure_is_a_500(monkeypatch, employees_repo, attendance_repo, admins_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_services(employees_repo=employees_repo, attendance_repo=attendance_repo, admins_repo=admins_repo)

    def broken(date_from, date_to):
        raise RuntimeError("boom")

    monkeypatch.setattr(container.dashboard_service, "quick_stats", broken)
    client = create_app(container).test_client()
    _login_employee(client)

    resp = client.get("/api/dashboard/stats")

    assert resp.status_code == 500
    assert resp.get_json() == {"success": False, "message": "Failed to load dashboard data"}
