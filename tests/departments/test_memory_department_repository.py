from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from src.student_management.student_management.core.exceptions import NotFoundError
from src.student_management.student_management.departments.memory_department_repository import (
    InMemoryDepartmentRepository,
)
from src.student_management.student_management.departments.model import Department
from src.student_management.student_management.departments.service import DepartmentService


def test_save_assigns_sequential_ids():
    repo = InMemoryDepartmentRepository()

    it = repo.save(Department(name="IT"))
    hr = repo.save(Department(name="HR"))

    assert (it.dept_id, hr.dept_id) == (1, 2)
    assert it.is_persisted
    assert [d.name for d in repo.find_all()] == ["IT", "HR"]


def test_save_with_id_updates_in_place_and_keeps_order():
    repo = InMemoryDepartmentRepository([Department(name="IT"), Department(name="HR")])

    repo.save(Department(dept_id=1, name="Information Technology"))

    assert [(d.dept_id, d.name) for d in repo.find_all()] == [(1, "Information Technology"), (2, "HR")]


def test_explicit_id_moves_sequence_forward():
    repo = InMemoryDepartmentRepository([Department(dept_id=10, name="Finance")])

    created = repo.save(Department(name="R&D"))

    assert created.dept_id == 11


def test_find_by_id_missing_returns_none():
    repo = InMemoryDepartmentRepository()
    assert repo.find_by_id(42) is None


def test_delete_unknown_id_is_noop():
    repo = InMemoryDepartmentRepository([Department(name="IT")])

    repo.delete_by_id(99)

    assert len(repo.find_all()) == 1


def test_service_roundtrip_over_memory_repository():
    svc = DepartmentService(InMemoryDepartmentRepository())

    created = svc.save_department(Department(name="R&D"))
    assert svc.get_department_by_id(created.dept_id) == created

    svc.delete_department(created.dept_id)

    assert svc.get_all_departments() == []
    with pytest.raises(NotFoundError):
        svc.get_department_by_id(created.dept_id)


def test_concurrent_saves_get_unique_contiguous_ids():
    repo = InMemoryDepartmentRepository()
    total = 200

    with ThreadPoolExecutor(max_workers=8) as pool:
        saved = list(pool.map(lambda n: repo.save(Department(name=f"Dept {n}")), range(total)))

    ids = sorted(d.dept_id for d in saved)
    assert ids == list(range(1, total + 1))
    assert len(repo.find_all()) == total
