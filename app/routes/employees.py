"""Employee record routes."""
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ..application.services import EmployeeService
from ..config import API_PREFIX
from ..dependencies import get_employee_service

router = APIRouter(prefix=API_PREFIX, tags=["employees"])


# Pydantic models for request validation
class EmployeePayload(BaseModel):
    name: str
    email: str
    role: str


class EmployeeOut(BaseModel):
    id: int
    name: str
    email: str
    role: str


class Message(BaseModel):
    message: str


# === Employee CRUD ===

@router.post("/create", response_model=EmployeeOut, status_code=201)
def create_employee(
    data: EmployeePayload,
    service: EmployeeService = Depends(get_employee_service),
):
    """Create a new employee. Any id in the body is ignored."""
    employee = service.create_employee(data.name, data.email, data.role)
    return employee.to_dict()


@router.get("", response_model=list[EmployeeOut])
def list_employees(service: EmployeeService = Depends(get_employee_service)):
    """List all employees."""
    return [employee.to_dict() for employee in service.list_employees()]


@router.get("/{employee_id}", response_model=EmployeeOut)
def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
):
    """Get a single employee, 404 if the id is unknown."""
    return service.get_employee(employee_id).to_dict()


@router.put("/{employee_id}", response_model=EmployeeOut)
def update_employee(
    employee_id: int,
    data: EmployeePayload,
    service: EmployeeService = Depends(get_employee_service),
):
    """Replace name, email and role of an employee."""
    employee = service.update_employee(employee_id, data.name, data.email, data.role)
    return employee.to_dict()


@router.delete("/{employee_id}", response_model=Message)
def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
):
    """Delete an employee, 404 if the id is unknown."""
    service.delete_employee(employee_id)
    return {"message": "Employee deleted successfully!"}
