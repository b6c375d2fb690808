from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from .admins.mysql_admin_repository import MySQLAdminRepository
from .admins.repository import AdminRepository
from .admins.supabase_admin_repository import SupabaseAdminRepository
from .attendance.generator import AttendanceRecordGenerator
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .attendance.supabase_attendance_repository import SupabaseAttendanceRepository
from .auth.service import AuthService
from .dashboard.service import DashboardService
from .database.connection import DatabaseConnection, DBConfig
from .database.supabase_client import SupabaseConfig, get_supabase_client
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .employees.supabase_employee_repository import SupabaseEmployeeRepository
from .leaves.generator import LeaveRecordGenerator
from .leaves.service import LeaveService

STORE_BACKENDS = ("mysql", "supabase")


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    admins_repo: AdminRepository

    auth_service: AuthService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    leave_service: LeaveService
    dashboard_service: DashboardService


def build_services(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    admins_repo: AdminRepository,
    rng: Optional[random.Random] = None,
) -> Container:
    rng = rng or random.Random()
    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        admins_repo=admins_repo,
        auth_service=AuthService(employees_repo, admins_repo),
        employee_service=EmployeeService(employees_repo),
        attendance_service=AttendanceService(
            attendance_repo,
            employees_repo,
            generator=AttendanceRecordGenerator(rng),
        ),
        leave_service=LeaveService(LeaveRecordGenerator(rng)),
        dashboard_service=DashboardService(employees_repo),
    )


def build_container(
    *,
    store_backend: str = "mysql",
    db_config: Optional[dict] = None,
    supabase_url: str = "",
    supabase_key: str = "",
) -> Container:
    if store_backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {}))
        return build_services(
            employees_repo=MySQLEmployeeRepository(conn),
            attendance_repo=MySQLAttendanceRepository(conn),
            admins_repo=MySQLAdminRepository(conn),
        )

    if store_backend == "supabase":
        client = get_supabase_client(SupabaseConfig(url=supabase_url, key=supabase_key))
        return build_services(
            employees_repo=SupabaseEmployeeRepository(client),
            attendance_repo=SupabaseAttendanceRepository(client),
            admins_repo=SupabaseAdminRepository(client),
        )

    raise ValueError(f"Unknown STORE_BACKEND {store_backend!r}; expected one of {STORE_BACKENDS}")
