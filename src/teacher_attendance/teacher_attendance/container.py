from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import ConnectionPool
from .database.mysql_base import QueryExecutor
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.repository import HolidayRepository
from .holidays.service import HolidayService
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.repository import ScheduleRepository
from .schedules.service import ScheduleService
from .teachers.mysql_teacher_repository import MySQLTeacherRepository
from .teachers.repository import TeacherRepository
from .teachers.service import TeacherService


@dataclass(frozen=True)
class Container:
    pool: ConnectionPool

    teachers_repo: TeacherRepository
    attendance_repo: AttendanceRepository
    schedules_repo: ScheduleRepository
    holidays_repo: HolidayRepository

    teacher_service: TeacherService
    attendance_service: AttendanceService
    schedule_service: ScheduleService
    holiday_service: HolidayService


def build_services(
    *,
    pool: ConnectionPool,
    teachers_repo: TeacherRepository,
    attendance_repo: AttendanceRepository,
    schedules_repo: ScheduleRepository,
    holidays_repo: HolidayRepository,
) -> Container:
    return Container(
        pool=pool,
        teachers_repo=teachers_repo,
        attendance_repo=attendance_repo,
        schedules_repo=schedules_repo,
        holidays_repo=holidays_repo,
        teacher_service=TeacherService(teachers_repo),
        attendance_service=AttendanceService(attendance_repo),
        schedule_service=ScheduleService(schedules_repo),
        holiday_service=HolidayService(holidays_repo),
    )


def build_container(*, pool: ConnectionPool) -> Container:
    """Wire the MySQL repositories around an explicitly constructed pool."""
    db = QueryExecutor(pool)
    return build_services(
        pool=pool,
        teachers_repo=MySQLTeacherRepository(db),
        attendance_repo=MySQLAttendanceRepository(db),
        schedules_repo=MySQLScheduleRepository(db),
        holidays_repo=MySQLHolidayRepository(db),
    )
