from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Holiday


class HolidayRepository(Protocol):
    def list_all(self) -> Sequence[Holiday]:
        """All holidays, earliest date first."""

        raise NotImplementedError

    def get_by_id(self, holiday_id: str) -> Optional[Holiday]:
        raise NotImplementedError

    def create(self, holiday: Holiday) -> int:
        raise NotImplementedError
