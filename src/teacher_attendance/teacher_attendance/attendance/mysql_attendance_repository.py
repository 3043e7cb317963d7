from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..common.datetime_utils import as_number
from ..database.mysql_base import QueryExecutor
from .model import AttendanceRecord
from .repository import AttendanceRepository

LABEL = "asistencia"

_SELECT = """
    SELECT
        a.id,
        a.fecha,
        a.horas,
        a.tardanza,
        a.justificacion,
        a.estado,
        p.nombre AS nombre_profesor,
        p.id AS id_profesor
    FROM asistencia a
    JOIN profesor p ON a.id_profesor = p.id
"""


def _row_to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=r["id"],
        teacher_id=r["id_profesor"],
        work_date=r["fecha"],
        hours=as_number(r["horas"]),
        lateness=r.get("tardanza"),
        justification=r.get("justificacion"),
        status=r.get("estado"),
        teacher_name=r.get("nombre_profesor"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, db: QueryExecutor):
        self._db = db

    def list_all(self) -> Sequence[AttendanceRecord]:
        rows = self._db.fetch_all(_SELECT + " ORDER BY a.fecha DESC", label=LABEL)
        return [_row_to_record(r) for r in rows]

    def get_by_id(self, attendance_id: str) -> Optional[AttendanceRecord]:
        r = self._db.fetch_one(_SELECT + " WHERE a.id = %s", (attendance_id,), label=LABEL)
        return _row_to_record(r) if r else None

    def create(self, record: AttendanceRecord) -> int:
        return self._db.execute(
            """
            INSERT INTO asistencia
                (id, id_profesor, fecha, horas, tardanza, justificacion, estado, fecha_registro, fecha_modificacion)
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
            """,
            (
                record.attendance_id,
                record.teacher_id,
                record.work_date,
                record.hours,
                record.lateness,
                record.justification,
                record.status,
                record.created_on,
                record.modified_on,
            ),
            label=LABEL,
        )
