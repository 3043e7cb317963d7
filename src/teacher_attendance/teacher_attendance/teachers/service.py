from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.datetime_utils import today_utc
from ..common.validators import is_present, require_any, require_fields, require_non_empty
from ..core.exceptions import NotFoundError
from .model import Teacher
from .repository import TeacherRepository

REQUIRED_ON_CREATE = ("id", "nombre")

# JSON key -> Teacher attribute
UPDATABLE_FIELDS = {
    "nombre": "name",
    "horas_segun_contrato": "contract_hours",
    "estado": "status",
}


class TeacherService:
    """Use cases for /profesores."""

    def __init__(self, teachers: TeacherRepository):
        self._teachers = teachers

    def list_all(self) -> Sequence[Teacher]:
        return self._teachers.list_all()

    def search(self, term: Any) -> Sequence[Teacher]:
        term = require_non_empty(term, "q", message="El término de búsqueda (q) es requerido.")
        found = self._teachers.search(term)
        if not found:
            raise NotFoundError("No se encontraron profesores con ese término de búsqueda.")
        return found

    def get(self, teacher_id: str) -> Teacher:
        teacher = self._teachers.get_by_id(teacher_id)
        if not teacher:
            raise NotFoundError("Profesor no encontrado.")
        return teacher

    def create(self, payload: Mapping[str, Any]) -> int:
        require_fields(payload, REQUIRED_ON_CREATE, message="El ID y el nombre del profesor son obligatorios.")

        today = today_utc()
        teacher = Teacher(
            teacher_id=payload["id"],
            name=payload["nombre"],
            contract_hours=payload.get("horas_segun_contrato"),
            status=payload.get("estado"),
            created_on=today,
            modified_on=today,
        )
        return self._teachers.create(teacher)

    def update(self, teacher_id: str, payload: Mapping[str, Any]) -> int:
        require_any(
            payload,
            tuple(UPDATABLE_FIELDS),
            message="Se requiere al menos un campo (nombre, horas_segun_contrato o estado) para actualizar.",
        )

        changes = {attr: payload[key] for key, attr in UPDATABLE_FIELDS.items() if is_present(payload.get(key))}
        affected = self._teachers.update(teacher_id, changes=changes, modified_on=today_utc())
        if affected == 0:
            raise NotFoundError("Profesor no encontrado para actualizar.")
        return affected

    def delete(self, teacher_id: str) -> int:
        affected = self._teachers.delete_by_id(teacher_id)
        if affected == 0:
            raise NotFoundError("Profesor no encontrado para eliminar.")
        return affected
