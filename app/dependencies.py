"""Shared FastAPI dependencies."""
from fastapi import Depends, Request

from . import config
from .application.services import EmployeeService
from .database import get_db
from .infrastructure.repositories import (
    EmployeeRepository, EmployeeStore, InMemoryEmployeeRepository
)


def create_store(backend: str | None = None) -> EmployeeStore | None:
    """Create the long-lived store for a backend.

    SQLite stores are built per request on the calling thread's
    connection, so only the memory backend returns a shared instance.
    """
    backend = backend or config.STORE_BACKEND
    if backend not in config.STORE_BACKENDS:
        raise ValueError(
            f"Unknown store backend {backend!r}; expected one of {sorted(config.STORE_BACKENDS)}"
        )
    if backend == "memory":
        return InMemoryEmployeeRepository()
    return None


def get_employee_store(request: Request) -> EmployeeStore:
    """Get the record store for the current request."""
    store = getattr(request.app.state, "employee_store", None)
    if store is not None:
        return store
    return EmployeeRepository(get_db())


def get_employee_service(
    store: EmployeeStore = Depends(get_employee_store),
) -> EmployeeService:
    """Create EmployeeService with the request's store."""
    return EmployeeService(employee_store=store)
