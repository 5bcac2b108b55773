"""Application layer - business logic services.

This layer contains application services that orchestrate record store
operations. Services are independent of routing and can be tested in
isolation.
"""

from .services.employee_service import EmployeeService, EmployeeNotFoundError

__all__ = [
    "EmployeeService",
    "EmployeeNotFoundError",
]
