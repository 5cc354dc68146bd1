"""Example: drive the department service layer directly.

Uses whatever backend the active settings module selects
(APP_ENV=testing gives the in-memory repository).
"""

from src.student_management.student_management.core.exceptions import NotFoundError
from src.student_management.student_management.departments.model import Department
from src.student_management.student_management.main import create_app


def main():
    container = create_app()
    svc = container.department_service

    rnd = svc.save_department(Department(name="R&D"))
    print("saved:", rnd)
    print("all:", svc.get_all_departments())

    svc.delete_department(rnd.dept_id)
    try:
        svc.get_department_by_id(rnd.dept_id)
    except NotFoundError as e:
        print("gone:", e)


if __name__ == "__main__":
    main()
