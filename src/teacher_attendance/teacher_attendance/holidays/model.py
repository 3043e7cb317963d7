from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional, Union

from ..common.datetime_utils import format_date


@dataclass(frozen=True)
class Holiday:
    holiday_id: str
    holiday_date: Union[date, str]
    description: str
    status: Optional[str] = None
    created_on: Optional[date] = None
    modified_on: Optional[date] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.holiday_id,
            "fecha": format_date(self.holiday_date),
            "descripcion": self.description,
            "estado": self.status,
            "fecha_registro": format_date(self.created_on),
            "fecha_modificacion": format_date(self.modified_on),
        }
