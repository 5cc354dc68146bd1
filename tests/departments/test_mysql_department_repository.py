from __future__ import annotations

import pytest

from src.student_management.student_management.departments.model import Department
from src.student_management.student_management.departments.mysql_department_repository import (
    MySQLDepartmentRepository,
)


class FakeCursor:
    def __init__(self, *, rows=(), lastrowid=None, rowcount=0, fail=False):
        self._rows = list(rows)
        self.lastrowid = lastrowid
        self.rowcount = rowcount
        self._fail = fail
        self.executed: list[tuple] = []
        self.closed = False

    def execute(self, sql, params=None):
        if self._fail:
            raise RuntimeError("boom")
        self.executed.append((" ".join(sql.split()), params))

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return self._rows

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, cursor: FakeCursor):
        self.cursor = cursor
        self.connection = FakeConnection(cursor)

    def connect(self):
        return self.connection


def test_find_all_maps_rows_in_id_order():
    factory = FakeConnFactory(FakeCursor(rows=[{"dept_id": 1, "name": "IT"}, {"dept_id": 2, "name": "HR"}]))

    result = MySQLDepartmentRepository(factory).find_all()

    assert result == [Department(dept_id=1, name="IT"), Department(dept_id=2, name="HR")]
    assert factory.cursor.executed[0][0].endswith("ORDER BY dept_id")
    assert factory.connection.committed and factory.connection.closed


def test_find_by_id_missing_returns_none():
    factory = FakeConnFactory(FakeCursor(rows=[]))

    assert MySQLDepartmentRepository(factory).find_by_id(999) is None
    assert factory.cursor.executed[0][1] == (999,)


def test_save_new_department_uses_lastrowid():
    factory = FakeConnFactory(FakeCursor(lastrowid=5))

    saved = MySQLDepartmentRepository(factory).save(Department(name="R&D"))

    assert saved == Department(dept_id=5, name="R&D")
    sql, params = factory.cursor.executed[0]
    assert sql.startswith("INSERT INTO departments(name)")
    assert params == ("R&D",)


def test_save_existing_department_upserts():
    factory = FakeConnFactory(FakeCursor())
    dept = Department(dept_id=2, name="Human Resources")

    saved = MySQLDepartmentRepository(factory).save(dept)

    assert saved is dept
    sql, params = factory.cursor.executed[0]
    assert "ON DUPLICATE KEY UPDATE" in sql
    assert params == (2, "Human Resources")


def test_delete_unknown_id_does_not_raise():
    factory = FakeConnFactory(FakeCursor(rowcount=0))

    assert MySQLDepartmentRepository(factory).delete_by_id(3) is None
    assert factory.cursor.executed == [("DELETE FROM departments WHERE dept_id=%s", (3,))]


def test_driver_error_rolls_back_and_propagates():
    factory = FakeConnFactory(FakeCursor(fail=True))

    with pytest.raises(RuntimeError):
        MySQLDepartmentRepository(factory).find_all()

    assert factory.connection.rolled_back
    assert not factory.connection.committed
    assert factory.connection.closed
    assert factory.cursor.closed
