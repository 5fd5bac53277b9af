"""
directory/store.py -- In-memory employee collection.

Pattern: Repository. EmployeeStore is the only owner of the employee list;
route handlers call its methods and never touch the list directly.

Identifier policy:
  New records get max(existing ids) + 1, or 1 when the collection is empty.
  Deleting the highest-numbered record frees its id for the next create, so
  ids are unique among current records but may be reused over the process
  lifetime.

Concurrency: none. There are no locks; callers run on the event loop thread.
"""

import logging
from collections.abc import Iterable
from typing import Optional

from directory.models import Employee

logger = logging.getLogger("staffdesk.directory")


class EmployeeStore:
    def __init__(self) -> None:
        self._employees: list[Employee] = []

    def _next_id(self) -> int:
        if not self._employees:
            return 1
        return max(e.id for e in self._employees) + 1

    def _index_of(self, employee_id: int) -> Optional[int]:
        for idx, employee in enumerate(self._employees):
            if employee.id == employee_id:
                return idx
        return None

    def seed(self, employees: Iterable[Employee]) -> int:
        """Load records with their own ids (startup demo data). Returns the count added.

        Records without an id are assigned one with the normal max + 1 policy.
        """
        added = 0
        for employee in employees:
            if employee.id is None:
                employee.id = self._next_id()
            self._employees.append(employee)
            added += 1
        return added

    def create_employee(self, name: str, position: str, email: str) -> Employee:
        """Append a new employee and return it with its assigned id."""
        employee = Employee(id=self._next_id(), name=name, position=position, email=email)
        self._employees.append(employee)
        logger.info("Employee created: id=%d", employee.id)
        return employee

    def list_employees(self) -> list[Employee]:
        """Return all employees in insertion order."""
        return list(self._employees)

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        idx = self._index_of(employee_id)
        return None if idx is None else self._employees[idx]

    def update_employee(self, employee_id: int, name: str, position: str, email: str) -> Optional[Employee]:
        """Replace the record in place, keeping its id and list position.

        Returns the new record, or None if no employee has that id.
        """
        idx = self._index_of(employee_id)
        if idx is None:
            return None
        updated = Employee(id=employee_id, name=name, position=position, email=email)
        self._employees[idx] = updated
        logger.info("Employee updated: id=%d", employee_id)
        return updated

    def delete_employee(self, employee_id: int) -> bool:
        """Remove the record. Returns False if no employee has that id."""
        idx = self._index_of(employee_id)
        if idx is None:
            return False
        del self._employees[idx]
        logger.info("Employee deleted: id=%d", employee_id)
        return True

    def count(self) -> int:
        return len(self._employees)
