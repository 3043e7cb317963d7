from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        """All records joined with the teacher name, newest date first."""

        raise NotImplementedError

    def get_by_id(self, attendance_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create(self, record: AttendanceRecord) -> int:
        """Insert a record.

        Raises ReferentialError when teacher_id does not exist.
        """

        raise NotImplementedError
