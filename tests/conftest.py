from __future__ import annotations

import os
from dataclasses import replace
from datetime import date
from typing import Optional

import pytest

os.environ.setdefault("APP_ENV", "testing")

from src.teacher_attendance.teacher_attendance.attendance import service as attendance_service_module
from src.teacher_attendance.teacher_attendance.attendance.model import AttendanceRecord
from src.teacher_attendance.teacher_attendance.container import build_services
from src.teacher_attendance.teacher_attendance.core.exceptions import ConflictError, ReferentialError
from src.teacher_attendance.teacher_attendance.holidays import service as holiday_service_module
from src.teacher_attendance.teacher_attendance.holidays.model import Holiday
from src.teacher_attendance.teacher_attendance.main import create_app
from src.teacher_attendance.teacher_attendance.schedules import service as schedule_service_module
from src.teacher_attendance.teacher_attendance.schedules.model import Schedule
from src.teacher_attendance.teacher_attendance.teachers import service as teacher_service_module
from src.teacher_attendance.teacher_attendance.teachers.model import Teacher

FIXED_TODAY = date(2026, 3, 2)


class ReadyPool:
    def __init__(self, ready: bool = True):
        self.ready = ready


class InMemoryTeachers:
    def __init__(self):
        self.rows: dict[str, Teacher] = {}

    def list_all(self):
        return list(self.rows.values())

    def search(self, term: str):
        return [t for t in self.rows.values() if t.teacher_id == term or term in t.name]

    def get_by_id(self, teacher_id: str) -> Optional[Teacher]:
        return self.rows.get(teacher_id)

    def create(self, teacher: Teacher) -> int:
        if teacher.teacher_id in self.rows:
            raise ConflictError("Error: el ID de profesor ya existe.", detail="Duplicate entry")
        self.rows[teacher.teacher_id] = teacher
        return 1

    def update(self, teacher_id: str, *, changes, modified_on: date) -> int:
        current = self.rows.get(teacher_id)
        if not current:
            return 0
        self.rows[teacher_id] = replace(current, modified_on=modified_on, **changes)
        return 1

    def delete_by_id(self, teacher_id: str) -> int:
        return 1 if self.rows.pop(teacher_id, None) else 0


class InMemoryAttendance:
    def __init__(self, teachers: InMemoryTeachers):
        self._teachers = teachers
        self.rows: dict[str, AttendanceRecord] = {}

    def _joined(self, r: AttendanceRecord) -> AttendanceRecord:
        return replace(r, teacher_name=self._teachers.rows[r.teacher_id].name)

    def list_all(self):
        items = sorted(self.rows.values(), key=lambda r: str(r.work_date), reverse=True)
        return [self._joined(r) for r in items]

    def get_by_id(self, attendance_id: str):
        r = self.rows.get(attendance_id)
        return self._joined(r) if r else None

    def create(self, record: AttendanceRecord) -> int:
        if record.teacher_id not in self._teachers.rows:
            raise ReferentialError("Error: el ID del profesor no existe.")
        if record.attendance_id in self.rows:
            raise ConflictError("Error: el ID de asistencia ya existe.")
        self.rows[record.attendance_id] = record
        return 1


class InMemorySchedules:
    def __init__(self, teachers: InMemoryTeachers):
        self._teachers = teachers
        self.rows: dict[str, Schedule] = {}

    def list_all(self):
        return sorted(self.rows.values(), key=lambda s: str(s.entry_time))

    def list_for_teacher(self, teacher_id: str):
        return [s for s in self.list_all() if s.teacher_id == teacher_id]

    def get_by_id(self, schedule_id: str):
        return self.rows.get(schedule_id)

    def create(self, schedule: Schedule) -> int:
        if schedule.teacher_id not in self._teachers.rows:
            raise ReferentialError("Error: el ID del profesor no existe.")
        if schedule.schedule_id in self.rows:
            raise ConflictError("Error: el ID de horario ya existe.")
        self.rows[schedule.schedule_id] = schedule
        return 1


class InMemoryHolidays:
    def __init__(self):
        self.rows: dict[str, Holiday] = {}

    def list_all(self):
        return sorted(self.rows.values(), key=lambda h: str(h.holiday_date))

    def get_by_id(self, holiday_id: str):
        return self.rows.get(holiday_id)

    def create(self, holiday: Holiday) -> int:
        if holiday.holiday_id in self.rows:
            raise ConflictError("Error: el ID de feriado ya existe.")
        self.rows[holiday.holiday_id] = holiday
        return 1


@pytest.fixture
def fixed_today(monkeypatch):
    for module in (
        teacher_service_module,
        attendance_service_module,
        schedule_service_module,
        holiday_service_module,
    ):
        monkeypatch.setattr(module, "today_utc", lambda: FIXED_TODAY)
    return FIXED_TODAY


@pytest.fixture
def teachers_repo():
    return InMemoryTeachers()


@pytest.fixture
def container(teachers_repo, fixed_today):
    return build_services(
        pool=ReadyPool(),
        teachers_repo=teachers_repo,
        attendance_repo=InMemoryAttendance(teachers_repo),
        schedules_repo=InMemorySchedules(teachers_repo),
        holidays_repo=InMemoryHolidays(),
    )


@pytest.fixture
def app(container):
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


class RecordingExecutor:
    """QueryExecutor stand-in: records (normalized sql, params, label) and returns canned rows."""

    def __init__(self, *, rows=None, rowcount=1):
        self.rows = rows or []
        self.rowcount = rowcount
        self.calls = []

    def _record(self, sql, params, label):
        self.calls.append((" ".join(sql.split()), tuple(params), label))

    def fetch_all(self, sql, params=(), *, label):
        self._record(sql, params, label)
        return self.rows

    def fetch_one(self, sql, params=(), *, label):
        self._record(sql, params, label)
        return self.rows[0] if self.rows else None

    def execute(self, sql, params=(), *, label):
        self._record(sql, params, label)
        return self.rowcount
