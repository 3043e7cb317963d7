from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.datetime_utils import today_utc
from ..common.validators import require_fields
from ..core.exceptions import NotFoundError
from .model import AttendanceRecord
from .repository import AttendanceRepository

REQUIRED_ON_CREATE = ("id", "id_profesor", "fecha", "horas")


def _as_lateness(value: Any) -> Any:
    """tardanza is stored as INT: a boolean flag becomes 0/1, minutes pass through."""
    if isinstance(value, bool):
        return int(value)
    return value


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._attendance.list_all()

    def get(self, attendance_id: str) -> AttendanceRecord:
        record = self._attendance.get_by_id(attendance_id)
        if not record:
            raise NotFoundError("Asistencia no encontrada.")
        return record

    def create(self, payload: Mapping[str, Any]) -> int:
        require_fields(
            payload,
            REQUIRED_ON_CREATE,
            message="ID, ID Profesor, Fecha y Horas de asistencia son obligatorios.",
        )

        today = today_utc()
        record = AttendanceRecord(
            attendance_id=payload["id"],
            teacher_id=payload["id_profesor"],
            work_date=payload["fecha"],
            hours=payload["horas"],
            lateness=_as_lateness(payload.get("tardanza")),
            justification=payload.get("justificacion"),
            status=payload.get("estado"),
            created_on=today,
            modified_on=today,
        )
        return self._attendance.create(record)
