from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.datetime_utils import today_utc
from ..common.validators import require_fields
from ..core.exceptions import NotFoundError
from .model import Holiday
from .repository import HolidayRepository

REQUIRED_ON_CREATE = ("id", "fecha", "descripcion")


class HolidayService:
    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def list_all(self) -> Sequence[Holiday]:
        return self._holidays.list_all()

    def get(self, holiday_id: str) -> Holiday:
        holiday = self._holidays.get_by_id(holiday_id)
        if not holiday:
            raise NotFoundError("Feriado no encontrado.")
        return holiday

    def create(self, payload: Mapping[str, Any]) -> int:
        require_fields(payload, REQUIRED_ON_CREATE, message="ID, Fecha y Descripción del feriado son obligatorios.")

        today = today_utc()
        holiday = Holiday(
            holiday_id=payload["id"],
            holiday_date=payload["fecha"],
            description=payload["descripcion"],
            status=payload.get("estado"),
            created_on=today,
            modified_on=today,
        )
        return self._holidays.create(holiday)
