"""
Employee Service

Handles business logic for employee operations: lookups, creation, upsert
and deletion, with results wrapped in hypermedia-linked representations.
"""

from fastapi import Response
from fastapi.responses import JSONResponse

from constants import HTTPStatus
from exceptions import ResourceNotFoundError
from dtos.request.employee_request import EmployeeRequest
from dtos.response.employee_response import EmployeeDTO, EmployeeCollection
from mappers.employee_mapper import EmployeeMapper
from repositories.interfaces import IEmployeeRepository
from services.employee_assembler import EmployeeModelAssembler
from services.interfaces import IEmployeeService
from utils.logging_utils import StructuredLogger, log_operation

logger = StructuredLogger(__name__)


class EmployeeService(IEmployeeService):
    """Service for employee-related business logic."""

    def __init__(self, repository: IEmployeeRepository, assembler: EmployeeModelAssembler):
        """
        Initialize EmployeeService.

        Args:
            repository: Employee persistence access
            assembler: Hypermedia link builder
        """
        self.repository = repository
        self.assembler = assembler

    def find_all(self) -> EmployeeCollection:
        employees = [
            self.assembler.to_model(EmployeeMapper.to_dto(employee), employee.id)
            for employee in self.repository.find_all()
        ]
        return self.assembler.to_collection_model(employees)

    def find_by_id(self, employee_id: int) -> EmployeeDTO:
        employee = self.repository.find_by_id(employee_id)
        if employee is None:
            raise ResourceNotFoundError("employee", "id", employee_id)
        return self.assembler.to_model(EmployeeMapper.to_dto(employee), employee.id)

    def find_by_email(self, email: str) -> EmployeeDTO:
        employee = self.repository.find_by_email(email)
        if employee is None:
            raise ResourceNotFoundError("employee", "email", email)
        return self.assembler.to_model(EmployeeMapper.to_dto(employee), employee.id)

    @log_operation("create_employee")
    def new_employee(self, dto: EmployeeRequest) -> Response:
        saved = self.repository.save(EmployeeMapper.to_entity(dto))
        logger.info("Employee created", extra={"employee_id": saved.id})
        return self._created(saved)

    @log_operation("save_employee")
    def save(self, dto: EmployeeRequest, employee_id: int) -> Response:
        """
        Upsert an employee.

        An existing employee keeps its id and has every field replaced.
        For an unknown id a new employee is created and the database picks
        its id; the requested id is not applied, so the Location header may
        point somewhere other than the request path.
        """
        employee = self.repository.find_by_id(employee_id)
        if employee is not None:
            employee.name = dto.name
            employee.role = dto.role
            employee.email = dto.email
        else:
            employee = EmployeeMapper.to_entity(dto)

        saved = self.repository.save(employee)
        if saved.id != employee_id:
            logger.info(
                "Upsert created a new employee under a different id",
                extra={"employee_id": employee_id, "assigned_id": saved.id}
            )
        return self._created(saved)

    @log_operation("delete_employee")
    def delete_by_id(self, employee_id: int) -> Response:
        deleted = self.repository.delete_by_id(employee_id)
        if not deleted:
            logger.debug("Delete requested for missing employee", extra={"employee_id": employee_id})
        return Response(status_code=HTTPStatus.NO_CONTENT)

    def _created(self, employee) -> JSONResponse:
        model = self.assembler.to_model(EmployeeMapper.to_dto(employee), employee.id)
        return JSONResponse(
            status_code=HTTPStatus.CREATED,
            content=model.model_dump(mode="json"),
            headers={"Location": self.assembler.self_href(employee.id)}
        )
