from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Teacher:
    """Row of the `profesor` table.

    JSON keys keep the column names used by the frontend.
    """

    teacher_id: str
    name: str
    contract_hours: Optional[Number] = None
    status: Optional[str] = None
    created_on: Optional[date] = None
    modified_on: Optional[date] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.teacher_id,
            "nombre": self.name,
            "horas_segun_contrato": self.contract_hours,
            "estado": self.status,
        }
