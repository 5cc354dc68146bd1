from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Department


class DepartmentRepository(Protocol):
    """Repository interface for Department.

    The service depends on this interface, never on a concrete store.
    """

    def find_all(self) -> Sequence[Department]:
        raise NotImplementedError

    def find_by_id(self, dept_id: int) -> Optional[Department]:
        raise NotImplementedError

    def save(self, department: Department) -> Department:
        """Insert or update a department.

        Returns the persisted department, carrying its dept_id.
        """

        raise NotImplementedError

    def delete_by_id(self, dept_id: int) -> None:
        """Remove a department. Unknown ids are a no-op."""

        raise NotImplementedError
