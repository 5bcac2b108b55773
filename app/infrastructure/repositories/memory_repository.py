"""In-memory employee record store.

Keeps records in a dict keyed by id. Records are copied on the way in
and out so callers never share state with the store.
"""
import threading
from dataclasses import replace
from typing import Iterable, Optional

from ...models import Employee


class InMemoryEmployeeRepository:
    """Employee store backed by a dict.

    Ids start at 1 and are never reused, matching SQLite AUTOINCREMENT.
    """

    def __init__(self):
        self._records: dict[int, Employee] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def save(self, employee: Employee) -> Employee:
        with self._lock:
            return self._write(employee)

    def save_all(self, employees: Iterable[Employee]) -> list[Employee]:
        with self._lock:
            return [self._write(employee) for employee in employees]

    def find_all(self) -> list[Employee]:
        with self._lock:
            return [replace(self._records[key]) for key in sorted(self._records)]

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        with self._lock:
            record = self._records.get(employee_id)
            return replace(record) if record is not None else None

    def delete(self, employee: Employee) -> None:
        with self._lock:
            self._records.pop(employee.id, None)

    def _write(self, employee: Employee) -> Employee:
        if employee.id is None:
            self._last_id += 1
            employee = replace(employee, id=self._last_id)
        else:
            self._last_id = max(self._last_id, employee.id)
        self._records[employee.id] = replace(employee)
        return replace(employee)
