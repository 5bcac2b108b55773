"""Record store interface and SQL repository base classes."""
from typing import Iterable, Optional, Protocol
import sqlite3

import aiosqlite

from ...models import Employee


class ConnectionProtocol(Protocol):
    def execute(self, sql: str, parameters: tuple = ...) -> sqlite3.Cursor: ...
    def commit(self) -> None: ...


class EmployeeStore(Protocol):
    """Record store for employees.

    Identifiers are assigned by the store on first save.
    """

    def save(self, employee: Employee) -> Employee: ...
    def save_all(self, employees: Iterable[Employee]) -> list[Employee]: ...
    def find_all(self) -> list[Employee]: ...
    def find_by_id(self, employee_id: int) -> Optional[Employee]: ...
    def delete(self, employee: Employee) -> None: ...


class Repository:
    """Shared plumbing for sqlite3-backed repositories.

    Subclasses build queries with ``?`` placeholders and call
    ``_commit`` after writes.
    """

    def __init__(self, connection: ConnectionProtocol):
        self._conn = connection

    def _execute(self, sql: str, parameters: tuple = ()) -> sqlite3.Cursor:
        return self._conn.execute(sql, parameters)

    def _commit(self) -> None:
        self._conn.commit()

    def _row_to_dict(self, row: sqlite3.Row | None) -> dict | None:
        return dict(row) if row else None


# =============================================================================
# ASYNC SUPPORT
# =============================================================================

class AsyncConnectionProtocol(Protocol):
    async def execute(self, sql: str, parameters: tuple = ...) -> aiosqlite.Cursor: ...
    async def commit(self) -> None: ...


class AsyncRepository:
    """Awaitable counterpart of Repository, on an aiosqlite connection."""

    def __init__(self, connection: AsyncConnectionProtocol):
        self._conn = connection

    async def _execute(self, sql: str, parameters: tuple = ()) -> aiosqlite.Cursor:
        return await self._conn.execute(sql, parameters)

    async def _commit(self) -> None:
        await self._conn.commit()

    async def _fetchone(self, sql: str, parameters: tuple = ()) -> dict | None:
        """Run a query and return its first row as a dict, or None."""
        cursor = await self._execute(sql, parameters)
        row = await cursor.fetchone()
        return dict(row) if row else None

    async def _fetchall(self, sql: str, parameters: tuple = ()) -> list[dict]:
        cursor = await self._execute(sql, parameters)
        return [dict(row) for row in await cursor.fetchall()]
