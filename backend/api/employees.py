from fastapi import APIRouter, Depends, Path, Query
from dependencies import get_employee_service
from dtos.request.employee_request import EmployeeRequest
from dtos.response.employee_response import EmployeeDTO, EmployeeCollection
from services.interfaces import IEmployeeService
from utils.error_handlers import handle_api_errors
from constants import HTTPStatus, MIN_EMPLOYEE_ID, MAX_EMPLOYEE_ID

router = APIRouter()


@router.get("/employees", response_model=EmployeeCollection)
@handle_api_errors("List employees")
def list_employees(service: IEmployeeService = Depends(get_employee_service)):
    """All employees, each with its self link."""
    return service.find_all()


# Declared before /employees/{employee_id} so "search" is not parsed as an id
@router.get("/employees/search", response_model=EmployeeDTO)
@handle_api_errors("Find employee by email")
def find_employee_by_email(
    email: str = Query(..., description="Exact email address to look up"),
    service: IEmployeeService = Depends(get_employee_service)
):
    """
    Look up one employee by email.

    Raises:
        HTTPException: 404 if no employee has this email
    """
    return service.find_by_email(email)


@router.get("/employees/{employee_id}", response_model=EmployeeDTO)
@handle_api_errors("Get employee")
def get_employee(
    employee_id: int = Path(..., ge=MIN_EMPLOYEE_ID, le=MAX_EMPLOYEE_ID),
    service: IEmployeeService = Depends(get_employee_service)
):
    """
    Get a specific employee.

    Raises:
        HTTPException: 404 if the employee does not exist
    """
    return service.find_by_id(employee_id)


@router.post("/employees", status_code=HTTPStatus.CREATED, response_model=EmployeeDTO)
@handle_api_errors("Create employee")
def create_employee(
    employee: EmployeeRequest,
    service: IEmployeeService = Depends(get_employee_service)
):
    """Create an employee. The Location header points at the new resource."""
    return service.new_employee(employee)


@router.put("/employees/{employee_id}", status_code=HTTPStatus.CREATED, response_model=EmployeeDTO)
@handle_api_errors("Replace employee")
def replace_employee(
    employee: EmployeeRequest,
    employee_id: int = Path(..., ge=MIN_EMPLOYEE_ID, le=MAX_EMPLOYEE_ID),
    service: IEmployeeService = Depends(get_employee_service)
):
    """
    Replace every field of an employee, or create one if the id is unknown.

    A newly created employee gets a database-assigned id, which can differ
    from employee_id. Follow the Location header rather than the request path.
    """
    return service.save(employee, employee_id=employee_id)


@router.delete("/employees/{employee_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Delete employee")
def delete_employee(
    employee_id: int = Path(..., ge=MIN_EMPLOYEE_ID, le=MAX_EMPLOYEE_ID),
    service: IEmployeeService = Depends(get_employee_service)
):
    """Delete an employee. Succeeds whether or not it existed."""
    return service.delete_by_id(employee_id=employee_id)
