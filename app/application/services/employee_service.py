"""Employee service - handles employee record operations.

This service sits between the HTTP routes and the record store. It owns
the not-found rule shared by get, update and delete.
"""
import logging

from fastapi import HTTPException

from ...infrastructure.repositories import EmployeeStore
from ...models import Employee

logger = logging.getLogger(__name__)


class EmployeeNotFoundError(HTTPException):
    """Raised when an id does not resolve to a stored employee."""

    def __init__(self, employee_id: int):
        super().__init__(
            status_code=404,
            detail=f"Employee not found with id {employee_id}"
        )
        self.employee_id = employee_id


class EmployeeService:
    """Service for employee CRUD operations.

    Responsibilities:
    - Create, list, fetch, update and delete employees
    - Translate missing records into EmployeeNotFoundError
    """

    def __init__(self, employee_store: EmployeeStore):
        self.store = employee_store

    def create_employee(self, name: str, email: str, role: str) -> Employee:
        """Create a new employee.

        Returns:
            Created employee, with the id assigned by the store
        """
        employee = self.store.save(Employee(name=name, email=email, role=role))
        logger.info("Created employee %s", employee.id)
        return employee

    def list_employees(self) -> list[Employee]:
        return self.store.find_all()

    def get_employee(self, employee_id: int) -> Employee:
        """Get employee by ID.

        Raises:
            EmployeeNotFoundError: If no employee has this id
        """
        employee = self.store.find_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    def update_employee(self, employee_id: int, name: str, email: str, role: str) -> Employee:
        """Replace name, email and role of an existing employee.

        The id is kept. Nothing is written when the employee does not exist.

        Raises:
            EmployeeNotFoundError: If no employee has this id
        """
        employee = self.get_employee(employee_id)
        employee.name = name
        employee.email = email
        employee.role = role

        updated = self.store.save(employee)
        logger.info("Updated employee %s", employee_id)
        return updated

    def delete_employee(self, employee_id: int) -> None:
        """Delete employee.

        Raises:
            EmployeeNotFoundError: If no employee has this id
        """
        employee = self.get_employee(employee_id)
        self.store.delete(employee)
        logger.info("Deleted employee %s", employee_id)
