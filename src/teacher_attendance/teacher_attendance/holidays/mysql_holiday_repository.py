from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.mysql_base import QueryExecutor
from .model import Holiday
from .repository import HolidayRepository

LABEL = "feriado"

_SELECT = """
    SELECT id, fecha, descripcion, estado, fecha_registro, fecha_modificacion
    FROM feriados
"""


def _row_to_holiday(r: Dict[str, Any]) -> Holiday:
    return Holiday(
        holiday_id=r["id"],
        holiday_date=r["fecha"],
        description=r["descripcion"],
        status=r.get("estado"),
        created_on=r.get("fecha_registro"),
        modified_on=r.get("fecha_modificacion"),
    )


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, db: QueryExecutor):
        self._db = db

    def list_all(self) -> Sequence[Holiday]:
        rows = self._db.fetch_all(_SELECT + " ORDER BY fecha ASC", label=LABEL)
        return [_row_to_holiday(r) for r in rows]

    def get_by_id(self, holiday_id: str) -> Optional[Holiday]:
        r = self._db.fetch_one(_SELECT + " WHERE id = %s", (holiday_id,), label=LABEL)
        return _row_to_holiday(r) if r else None

    def create(self, holiday: Holiday) -> int:
        return self._db.execute(
            """
            INSERT INTO feriados (id, fecha, descripcion, estado, fecha_registro, fecha_modificacion)
            VALUES (%s, %s, %s, %s, %s, %s)
            """,
            (
                holiday.holiday_id,
                holiday.holiday_date,
                holiday.description,
                holiday.status,
                holiday.created_on,
                holiday.modified_on,
            ),
            label=LABEL,
        )
