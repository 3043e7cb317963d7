from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional, Union

from ..common.datetime_utils import format_date

Number = Union[int, float]


@dataclass(frozen=True)
class AttendanceRecord:
    """Row of the `asistencia` table.

    `teacher_name` is only filled by reads that join `profesor`.
    """

    attendance_id: str
    teacher_id: str
    work_date: Union[date, str]
    hours: Number
    lateness: Optional[int] = None
    justification: Optional[str] = None
    status: Optional[str] = None
    teacher_name: Optional[str] = None
    created_on: Optional[date] = None
    modified_on: Optional[date] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "id": self.attendance_id,
            "fecha": format_date(self.work_date),
            "horas": self.hours,
            "tardanza": self.lateness,
            "justificacion": self.justification,
            "estado": self.status,
            "id_profesor": self.teacher_id,
        }
        if self.teacher_name is not None:
            out["nombre_profesor"] = self.teacher_name
        return out
