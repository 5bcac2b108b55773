"""Application services - business logic layer."""

from .employee_service import EmployeeService, EmployeeNotFoundError

__all__ = [
    "EmployeeService",
    "EmployeeNotFoundError",
]
