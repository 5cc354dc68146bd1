from __future__ import annotations

import logging
from typing import List

from ..core.exceptions import NotFoundError
from .model import Department
from .repository import DepartmentRepository

logger = logging.getLogger(__name__)


class DepartmentService:
    """Use case: manage departments."""

    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def get_all_departments(self) -> List[Department]:
        return list(self._departments.find_all())

    def get_department_by_id(self, dept_id: int) -> Department:
        department = self._departments.find_by_id(dept_id)
        if department is None:
            logger.info("Department %r not found", dept_id)
            raise NotFoundError("Department", dept_id)
        return department

    def save_department(self, department: Department) -> Department:
        saved = self._departments.save(department)
        logger.debug("Saved department %r", saved)
        return saved

    def delete_department(self, dept_id: int) -> None:
        self._departments.delete_by_id(dept_id)
        logger.debug("Deleted department id=%r", dept_id)
