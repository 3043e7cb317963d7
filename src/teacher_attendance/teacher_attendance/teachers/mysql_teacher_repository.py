from __future__ import annotations

from datetime import date
from typing import Any, Dict, Mapping, Optional, Sequence

from ..common.datetime_utils import as_number
from ..database.mysql_base import QueryExecutor
from .model import Teacher
from .repository import TeacherRepository

LABEL = "profesor"

# Attribute -> column. Only these names are ever written into SQL text.
UPDATABLE_COLUMNS = {
    "name": "nombre",
    "contract_hours": "horas_segun_contrato",
    "status": "estado",
}


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _row_to_teacher(r: Dict[str, Any]) -> Teacher:
    return Teacher(
        teacher_id=r["id"],
        name=r["nombre"],
        contract_hours=as_number(r.get("horas_segun_contrato")),
        status=r.get("estado"),
    )


class MySQLTeacherRepository(TeacherRepository):
    def __init__(self, db: QueryExecutor):
        self._db = db

    def list_all(self) -> Sequence[Teacher]:
        rows = self._db.fetch_all(
            "SELECT id, nombre, horas_segun_contrato, estado FROM profesor",
            label=LABEL,
        )
        return [_row_to_teacher(r) for r in rows]

    def search(self, term: str) -> Sequence[Teacher]:
        rows = self._db.fetch_all(
            """
            SELECT id, nombre, horas_segun_contrato, estado
            FROM profesor
            WHERE id = %s OR nombre LIKE %s
            """,
            (term, f"%{_escape_like(term)}%"),
            label=LABEL,
        )
        return [_row_to_teacher(r) for r in rows]

    def get_by_id(self, teacher_id: str) -> Optional[Teacher]:
        r = self._db.fetch_one(
            "SELECT id, nombre, horas_segun_contrato, estado FROM profesor WHERE id = %s",
            (teacher_id,),
            label=LABEL,
        )
        return _row_to_teacher(r) if r else None

    def create(self, teacher: Teacher) -> int:
        return self._db.execute(
            """
            INSERT INTO profesor (id, nombre, horas_segun_contrato, estado, fecha_registro, fecha_modificacion)
            VALUES (%s, %s, %s, %s, %s, %s)
            """,
            (
                teacher.teacher_id,
                teacher.name,
                teacher.contract_hours,
                teacher.status,
                teacher.created_on,
                teacher.modified_on,
            ),
            label=LABEL,
        )

    def update(self, teacher_id: str, *, changes: Mapping[str, Any], modified_on: date) -> int:
        assignments = []
        params: list[object] = []
        for attr, column in UPDATABLE_COLUMNS.items():
            if attr in changes:
                assignments.append(f"{column} = %s")
                params.append(changes[attr])
        if not assignments:
            raise ValueError("update() needs at least one known attribute")

        assignments.append("fecha_modificacion = %s")
        params.extend([modified_on, teacher_id])
        return self._db.execute(
            f"UPDATE profesor SET {', '.join(assignments)} WHERE id = %s",
            tuple(params),
            label=LABEL,
        )

    def delete_by_id(self, teacher_id: str) -> int:
        return self._db.execute("DELETE FROM profesor WHERE id = %s", (teacher_id,), label=LABEL)
