from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.datetime_utils import today_utc
from ..common.validators import require_fields
from ..core.exceptions import NotFoundError
from .model import Schedule
from .repository import ScheduleRepository

REQUIRED_ON_CREATE = ("id", "id_profesor", "hora_entrada", "hora_salida")


class ScheduleService:
    def __init__(self, schedules: ScheduleRepository):
        self._schedules = schedules

    def list_all(self) -> Sequence[Schedule]:
        return self._schedules.list_all()

    def list_for_teacher(self, teacher_id: str) -> Sequence[Schedule]:
        return self._schedules.list_for_teacher(teacher_id)

    def get(self, schedule_id: str) -> Schedule:
        schedule = self._schedules.get_by_id(schedule_id)
        if not schedule:
            raise NotFoundError("Horario no encontrado.")
        return schedule

    def create(self, payload: Mapping[str, Any]) -> int:
        require_fields(
            payload,
            REQUIRED_ON_CREATE,
            message="ID, ID Profesor, Hora de Entrada y Hora de Salida son obligatorios.",
        )

        today = today_utc()
        schedule = Schedule(
            schedule_id=payload["id"],
            teacher_id=payload["id_profesor"],
            entry_time=payload["hora_entrada"],
            exit_time=payload["hora_salida"],
            status=payload.get("estado"),
            created_on=today,
            modified_on=today,
        )
        return self._schedules.create(schedule)
