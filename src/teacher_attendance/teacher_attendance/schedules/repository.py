from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Schedule


class ScheduleRepository(Protocol):
    def list_all(self) -> Sequence[Schedule]:
        raise NotImplementedError

    def list_for_teacher(self, teacher_id: str) -> Sequence[Schedule]:
        """Schedules of one teacher, earliest entry time first."""

        raise NotImplementedError

    def get_by_id(self, schedule_id: str) -> Optional[Schedule]:
        raise NotImplementedError

    def create(self, schedule: Schedule) -> int:
        raise NotImplementedError
