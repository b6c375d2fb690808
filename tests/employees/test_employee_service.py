from datetime import date

import pytest

from attendance_tracker.core.enums import EmployeeStatus
from attendance_tracker.core.exceptions import NotFoundError, ValidationError
from attendance_tracker.employees.service import EmployeeService, employee_to_dict


@pytest.fixture
def service(employees_repo):
    return EmployeeService(employees_repo)


def test_create_employee_defaults(service, employees_repo):
    employee = service.create_employee(
        employee_id=" K14052 ",
        name="Alex Brown",
        department="Finance",
        position="Analyst",
        email="  ",
        join_date=date(2026, 10, 1),
    )

    assert employee.id == "K14052"
    assert employee.email is None
    assert employee.profile_image == "/placeholder.svg"
    assert employee.status == EmployeeStatus.ACTIVE
    assert employees_repo.get_by_id("K14052") == employee


@pytest.mark.parametrize(
    "employee_id, name, message",
    [
        ("", "Alex", "required fields"),
        ("K14052", "  ", "required fields"),
        ("14052", "Alex", "format K followed by 5 digits"),
        ("K1405", "Alex", "format K followed by 5 digits"),
        ("K14050", "Alex", "already exists"),
    ],
)
def test_create_employee_rejects_bad_input(service, employee_id, name, message):
    with pytest.raises(ValidationError, match=message):
        service.create_employee(employee_id=employee_id, name=name, department="Finance", position="Analyst")


def test_update_employee(service):
    updated = service.update_employee(
        "K14050",
        name="John A. Doe",
        department="Engineering",
        position="Lead",
        phone="+1 555 0100",
        status="on_leave",
    )

    assert updated.position == "Lead"
    assert updated.status == EmployeeStatus.ON_LEAVE
    assert updated.email is None
    assert updated.join_date == date(2023, 1, 15)
    assert service.get_employee("K14050") == updated


def test_update_employee_errors(service):
    with pytest.raises(NotFoundError):
        service.update_employee("K99999", name="X", department="Y", position="Z")
    with pytest.raises(ValidationError, match="Unknown employee status"):
        service.update_employee("K14050", name="X", department="Y", position="Z", status="retired")
    with pytest.raises(ValidationError, match="Department is required"):
        service.update_employee("K14050", name="X", department="", position="Z")


def test_delete_employee(service):
    service.delete_employee("K14051")

    assert service.get_employee("K14051") is None
    with pytest.raises(NotFoundError):
        service.delete_employee("K14051")


def test_search_matches_name_id_department_and_position(service):
    assert [e.id for e in service.search("")] == ["K14051", "K14050"]
    assert [e.id for e in service.search("jane")] == ["K14051"]
    assert [e.id for e in service.search("k14050")] == ["K14050"]
    assert [e.id for e in service.search("MARKETING")] == ["K14051"]
    assert [e.id for e in service.search("developer")] == ["K14050"]


def test_employee_to_dict(service):
    data = employee_to_dict(service.get_employee("K14050"))

    assert data["join_date"] == "2023-01-15"
    assert data["status"] == "active"
