"""
Employee Mapper

Pure conversion between the Employee entity and its transfer object.
"""

from typing import Union

from models import Employee
from dtos.request.employee_request import EmployeeRequest
from dtos.response.employee_response import EmployeeDTO


class EmployeeMapper:
    """Copies name, role and email in both directions. Never touches ids or links."""

    @staticmethod
    def to_dto(entity: Employee) -> EmployeeDTO:
        return EmployeeDTO(
            name=entity.name,
            role=entity.role,
            email=entity.email
        )

    @staticmethod
    def to_entity(dto: Union[EmployeeDTO, EmployeeRequest]) -> Employee:
        """
        Build a new, unsaved entity from a DTO.

        Args:
            dto: Request or response DTO

        Returns:
            Employee with no id assigned
        """
        return Employee(
            name=dto.name,
            role=dto.role,
            email=dto.email
        )
