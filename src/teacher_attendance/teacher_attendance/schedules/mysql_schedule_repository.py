from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.mysql_base import QueryExecutor
from .model import Schedule
from .repository import ScheduleRepository

LABEL = "horario"

_SELECT = """
    SELECT id, id_profesor, hora_entrada, hora_salida, estado, fecha_registro, fecha_modificacion
    FROM horario
"""


def _row_to_schedule(r: Dict[str, Any]) -> Schedule:
    return Schedule(
        schedule_id=r["id"],
        teacher_id=r["id_profesor"],
        entry_time=r["hora_entrada"],
        exit_time=r["hora_salida"],
        status=r.get("estado"),
        created_on=r.get("fecha_registro"),
        modified_on=r.get("fecha_modificacion"),
    )


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, db: QueryExecutor):
        self._db = db

    def list_all(self) -> Sequence[Schedule]:
        rows = self._db.fetch_all(_SELECT + " ORDER BY hora_entrada ASC", label=LABEL)
        return [_row_to_schedule(r) for r in rows]

    def list_for_teacher(self, teacher_id: str) -> Sequence[Schedule]:
        rows = self._db.fetch_all(
            _SELECT + " WHERE id_profesor = %s ORDER BY hora_entrada ASC",
            (teacher_id,),
            label=LABEL,
        )
        return [_row_to_schedule(r) for r in rows]

    def get_by_id(self, schedule_id: str) -> Optional[Schedule]:
        r = self._db.fetch_one(_SELECT + " WHERE id = %s", (schedule_id,), label=LABEL)
        return _row_to_schedule(r) if r else None

    def create(self, schedule: Schedule) -> int:
        return self._db.execute(
            """
            INSERT INTO horario (id, id_profesor, hora_entrada, hora_salida, estado, fecha_registro, fecha_modificacion)
            VALUES (%s, %s, %s, %s, %s, %s, %s)
            """,
            (
                schedule.schedule_id,
                schedule.teacher_id,
                schedule.entry_time,
                schedule.exit_time,
                schedule.status,
                schedule.created_on,
                schedule.modified_on,
            ),
            label=LABEL,
        )
