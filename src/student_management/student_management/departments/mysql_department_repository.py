from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Department
from .repository import DepartmentRepository

logger = logging.getLogger(__name__)


def _to_department(r: Dict[str, Any]) -> Department:
    return Department(dept_id=int(r["dept_id"]), name=r["name"])


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_all(self) -> Sequence[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT dept_id, name FROM departments ORDER BY dept_id")
            rows = fetchall(cur)
            return [_to_department(r) for r in rows]

    def find_by_id(self, dept_id: int) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT dept_id, name FROM departments WHERE dept_id=%s", (int(dept_id),))
            r = fetchone(cur)
            if not r:
                return None
            return _to_department(r)

    def save(self, department: Department) -> Department:
        with db_cursor(self._conn_factory) as (_, cur):
            if department.dept_id is None:
                cur.execute("INSERT INTO departments(name) VALUES(%s)", (department.name,))
                return replace(department, dept_id=int(cur.lastrowid))

            cur.execute(
                """
                INSERT INTO departments(dept_id, name)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE name=VALUES(name)
                """,
                (int(department.dept_id), department.name),
            )
            return department

    def delete_by_id(self, dept_id: int) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM departments WHERE dept_id=%s", (int(dept_id),))
            if cur.rowcount == 0:
                logger.debug("delete_by_id: no department with id=%r", dept_id)
