# Repository Pattern Implementation
"""
Repositories abstract record storage.

Every employee store exposes the same five operations
(save, save_all, find_all, find_by_id, delete):

    repo = EmployeeRepository(db)           # SQLite
    repo = AsyncEmployeeRepository(conn)    # aiosqlite, awaitable methods
    repo = InMemoryEmployeeRepository()     # dict, for tests
"""
from .base import Repository, AsyncRepository, ConnectionProtocol, EmployeeStore
from .employee_repository import EmployeeRepository, AsyncEmployeeRepository
from .memory_repository import InMemoryEmployeeRepository

__all__ = [
    "Repository",
    "AsyncRepository",
    "ConnectionProtocol",
    "EmployeeStore",
    "EmployeeRepository",
    "AsyncEmployeeRepository",
    "InMemoryEmployeeRepository",
]
