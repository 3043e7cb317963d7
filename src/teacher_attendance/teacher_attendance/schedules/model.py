from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time, timedelta
from typing import Any, Dict, Optional, Union

from ..common.datetime_utils import format_date, format_time

TimeValue = Union[time, timedelta, str]


@dataclass(frozen=True)
class Schedule:
    schedule_id: str
    teacher_id: str
    entry_time: TimeValue
    exit_time: TimeValue
    status: Optional[str] = None
    created_on: Optional[date] = None
    modified_on: Optional[date] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.schedule_id,
            "id_profesor": self.teacher_id,
            "hora_entrada": format_time(self.entry_time),
            "hora_salida": format_time(self.exit_time),
            "estado": self.status,
            "fecha_registro": format_date(self.created_on),
            "fecha_modificacion": format_date(self.modified_on),
        }
