from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import BACKEND_MEMORY, BACKEND_MYSQL, REPOSITORY_BACKENDS
from .core.exceptions import ValidationError
from .database.connection import DBConfig, DatabaseConnection
from .departments.memory_department_repository import InMemoryDepartmentRepository
from .departments.mysql_department_repository import MySQLDepartmentRepository
from .departments.repository import DepartmentRepository
from .departments.service import DepartmentService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    departments_repo: DepartmentRepository

    department_service: DepartmentService


def build_container(*, db_config: Optional[dict] = None, backend: str = BACKEND_MYSQL) -> Container:
    backend = (backend or "").strip().lower()
    if backend not in REPOSITORY_BACKENDS:
        raise ValidationError(f"Unknown repository backend: {backend!r}")

    conn: Optional[DatabaseConnection] = None
    if backend == BACKEND_MEMORY:
        departments_repo: DepartmentRepository = InMemoryDepartmentRepository()
    else:
        if not db_config:
            raise ValidationError("DB_CONFIG is required for the mysql backend")
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        departments_repo = MySQLDepartmentRepository(conn)

    department_service = DepartmentService(departments_repo)

    return Container(
        conn=conn,
        departments_repo=departments_repo,
        department_service=department_service,
    )
