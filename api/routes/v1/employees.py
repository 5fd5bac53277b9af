"""
api/routes/v1/employees.py -- Employee CRUD routes (admin only).

Routes:
  POST   /employees                -- create employee
  GET    /employees                -- list all employees
  PUT    /employees/{employee_id}  -- replace an employee's fields
  DELETE /employees/{employee_id}  -- remove an employee

Every route requires a bearer token whose role is exactly "admin".

Validation order on PUT: the id is looked up first (404), then the body is
checked for missing fields (400). A path id that is not an integer matches no
employee, so it is a 404 as well.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from api.models import EmployeeIn, EmployeeMutationResponse, EmployeeResponse, MessageResponse
from auth.dependencies import require_admin
from directory.store import EmployeeStore

# Router-level dependency applies to every route registered on this router,
# so individual handlers don't each need to repeat Depends(require_admin).
router = APIRouter(dependencies=[Depends(require_admin)])


def _missing_fields() -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={"code": "missing_fields", "message": "Name, position, and email are required."},
    )


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=404,
        detail={"code": "not_found", "message": "Employee not found."},
    )


def _parse_id(employee_id: str) -> int:
    try:
        return int(employee_id)
    except ValueError:
        raise _not_found() from None


@router.post("/employees", response_model=EmployeeMutationResponse, status_code=201)
async def create_employee(request: Request, body: Optional[EmployeeIn] = None) -> EmployeeMutationResponse:
    """Add an employee; the id is max(existing) + 1, or 1 for an empty directory."""
    if body is None or not body.is_complete():
        raise _missing_fields()

    store: EmployeeStore = request.app.state.employee_store
    employee = store.create_employee(body.name, body.position, body.email)
    return EmployeeMutationResponse(
        message="Employee added successfully!",
        employee=EmployeeResponse.from_employee(employee),
    )


@router.get("/employees", response_model=list[EmployeeResponse])
async def list_employees(request: Request) -> list[EmployeeResponse]:
    """Return every employee. No pagination or filtering."""
    store: EmployeeStore = request.app.state.employee_store
    return [EmployeeResponse.from_employee(e) for e in store.list_employees()]


@router.put("/employees/{employee_id}", response_model=EmployeeMutationResponse)
async def update_employee(
    request: Request,
    employee_id: str,
    body: Optional[EmployeeIn] = None,
) -> EmployeeMutationResponse:
    """Replace name, position and email of an existing employee, keeping its id."""
    store: EmployeeStore = request.app.state.employee_store
    emp_id = _parse_id(employee_id)
    if store.get_employee(emp_id) is None:
        raise _not_found()
    if body is None or not body.is_complete():
        raise _missing_fields()

    employee = store.update_employee(emp_id, body.name, body.position, body.email)
    return EmployeeMutationResponse(
        message="Employee updated successfully!",
        employee=EmployeeResponse.from_employee(employee),
    )


@router.delete("/employees/{employee_id}", response_model=MessageResponse)
async def delete_employee(request: Request, employee_id: str) -> MessageResponse:
    """Remove an employee."""
    store: EmployeeStore = request.app.state.employee_store
    if not store.delete_employee(_parse_id(employee_id)):
        raise _not_found()
    return MessageResponse(message="Employee deleted successfully!")
