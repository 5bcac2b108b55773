"""Employee repository - SQLite-backed record store.

Both classes implement the same five operations; the async one runs on
an aiosqlite connection.
"""
from dataclasses import replace
from typing import Iterable, Optional

from ...models import Employee
from .base import AsyncRepository, Repository

# SQLite INTEGER is a signed 64-bit value; no stored id lies outside this range.
SQLITE_MIN_INTEGER = -(2 ** 63)
SQLITE_MAX_INTEGER = 2 ** 63 - 1


def _storable_id(employee_id: int) -> bool:
    return SQLITE_MIN_INTEGER <= employee_id <= SQLITE_MAX_INTEGER


class EmployeeRepository(Repository):
    """Repository for employee records.

    Examples:
        >>> repo = EmployeeRepository(db)
        >>> saved = repo.save(Employee(name="ravi", email="ravi@gmail.com", role="developer"))
        >>> repo.find_by_id(saved.id)
        >>> repo.delete(saved)
    """

    def save(self, employee: Employee) -> Employee:
        """Insert a new employee or overwrite an existing one.

        Args:
            employee: Record to persist. A record without an id is
                inserted and gets one assigned.

        Returns:
            The persisted record, with its id
        """
        saved = self._write(employee)
        self._commit()
        return saved

    def save_all(self, employees: Iterable[Employee]) -> list[Employee]:
        """Persist several employees in one transaction.

        Returns:
            Saved records, in input order
        """
        saved = [self._write(employee) for employee in employees]
        self._commit()
        return saved

    def find_all(self) -> list[Employee]:
        """Get all employees ordered by id."""
        cursor = self._execute("SELECT * FROM employees ORDER BY id")
        return [Employee.from_dict(row) for row in cursor.fetchall()]

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        """Get employee by ID.

        Args:
            employee_id: Employee ID

        Returns:
            Employee or None if not found
        """
        if not _storable_id(employee_id):
            return None
        cursor = self._execute(
            "SELECT * FROM employees WHERE id = ?",
            (employee_id,)
        )
        row = self._row_to_dict(cursor.fetchone())
        return Employee.from_dict(row) if row else None

    def delete(self, employee: Employee) -> None:
        """Delete employee. Unsaved or already deleted records are ignored."""
        if employee.id is None:
            return
        self._execute("DELETE FROM employees WHERE id = ?", (employee.id,))
        self._commit()

    def _write(self, employee: Employee) -> Employee:
        if employee.id is None:
            cursor = self._execute(
                "INSERT INTO employees (name, email, role) VALUES (?, ?, ?)",
                (employee.name, employee.email, employee.role)
            )
            return replace(employee, id=cursor.lastrowid)

        cursor = self._execute(
            "UPDATE employees SET name = ?, email = ?, role = ? WHERE id = ?",
            (employee.name, employee.email, employee.role, employee.id)
        )
        if cursor.rowcount == 0:
            self._execute(
                "INSERT INTO employees (id, name, email, role) VALUES (?, ?, ?, ?)",
                (employee.id, employee.name, employee.email, employee.role)
            )
        return replace(employee)


# =============================================================================
# ASYNC VERSION
# =============================================================================

class AsyncEmployeeRepository(AsyncRepository):
    """Async repository for employee records."""

    async def save(self, employee: Employee) -> Employee:
        """Insert a new employee or overwrite an existing one."""
        saved = await self._write(employee)
        await self._commit()
        return saved

    async def save_all(self, employees: Iterable[Employee]) -> list[Employee]:
        saved = [await self._write(employee) for employee in employees]
        await self._commit()
        return saved

    async def find_all(self) -> list[Employee]:
        rows = await self._fetchall("SELECT * FROM employees ORDER BY id")
        return [Employee.from_dict(row) for row in rows]

    async def find_by_id(self, employee_id: int) -> Optional[Employee]:
        """Get employee by ID.

        Args:
            employee_id: Employee ID

        Returns:
            Employee or None
        """
        if not _storable_id(employee_id):
            return None
        row = await self._fetchone(
            "SELECT * FROM employees WHERE id = ?",
            (employee_id,)
        )
        return Employee.from_dict(row) if row else None

    async def delete(self, employee: Employee) -> None:
        if employee.id is None:
            return
        await self._execute("DELETE FROM employees WHERE id = ?", (employee.id,))
        await self._commit()

    async def _write(self, employee: Employee) -> Employee:
        if employee.id is None:
            cursor = await self._execute(
                "INSERT INTO employees (name, email, role) VALUES (?, ?, ?)",
                (employee.name, employee.email, employee.role)
            )
            return replace(employee, id=cursor.lastrowid)

        cursor = await self._execute(
            "UPDATE employees SET name = ?, email = ?, role = ? WHERE id = ?",
            (employee.name, employee.email, employee.role, employee.id)
        )
        if cursor.rowcount == 0:
            await self._execute(
                "INSERT INTO employees (id, name, email, role) VALUES (?, ?, ?, ?)",
                (employee.id, employee.name, employee.email, employee.role)
            )
        return replace(employee)
