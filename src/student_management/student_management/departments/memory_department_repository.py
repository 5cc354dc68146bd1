from __future__ import annotations

import threading
from dataclasses import replace
from typing import Dict, Iterable, Optional, Sequence

from .model import Department
from .repository import DepartmentRepository


class InMemoryDepartmentRepository(DepartmentRepository):
    """Dict-backed repository keeping insertion order.

    Ids are assigned from a sequence that always stays above the highest id
    seen, so explicit ids passed to save() never collide with generated ones.
    """

    def __init__(self, departments: Iterable[Department] = ()):
        self._lock = threading.Lock()
        self._by_id: Dict[int, Department] = {}
        self._last_id = 0
        for d in departments:
            self.save(d)

    def find_all(self) -> Sequence[Department]:
        with self._lock:
            return list(self._by_id.values())

    def find_by_id(self, dept_id: int) -> Optional[Department]:
        with self._lock:
            return self._by_id.get(int(dept_id))

    def save(self, department: Department) -> Department:
        with self._lock:
            if department.dept_id is None:
                self._last_id += 1
                department = replace(department, dept_id=self._last_id)
            else:
                self._last_id = max(self._last_id, int(department.dept_id))
            self._by_id[int(department.dept_id)] = department
            return department

    def delete_by_id(self, dept_id: int) -> None:
        with self._lock:
            self._by_id.pop(int(dept_id), None)
