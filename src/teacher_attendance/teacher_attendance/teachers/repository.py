from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Teacher


class TeacherRepository(Protocol):
    """Repository interface for Teacher.

    Services depend on this interface, not on a concrete database. Write
    methods return the affected row count.
    """

    def list_all(self) -> Sequence[Teacher]:
        raise NotImplementedError

    def search(self, term: str) -> Sequence[Teacher]:
        """Exact id match or name substring."""

        raise NotImplementedError

    def get_by_id(self, teacher_id: str) -> Optional[Teacher]:
        raise NotImplementedError

    def create(self, teacher: Teacher) -> int:
        raise NotImplementedError

    def update(self, teacher_id: str, *, changes: Mapping[str, Any], modified_on: date) -> int:
        """Apply a partial update.

        `changes` keys are Teacher attribute names (name, contract_hours, status).
        """

        raise NotImplementedError

    def delete_by_id(self, teacher_id: str) -> int:
        raise NotImplementedError
