from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Department:
    """Domain entity: Department.

    `dept_id` stays None until the repository persists the record.
    """

    name: str
    dept_id: Optional[int] = None

    @property
    def is_persisted(self) -> bool:
        return self.dept_id is not None
