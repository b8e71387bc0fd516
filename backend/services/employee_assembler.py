"""
Employee Representation Assembler

Decorates employee DTOs with hypermedia links.
"""

from typing import List

from constants import EMPLOYEES_PATH, LinkRelation
from dtos.response.employee_response import Link, EmployeeDTO, EmployeeCollection


class EmployeeModelAssembler:
    """
    Builds linked representations.

    The employee id comes from the caller's repository round-trip; it is
    only used to build URIs and is never stored on the DTO.
    """

    def __init__(self, base_url: str = ""):
        """
        Args:
            base_url: Scheme and host prefix for links, e.g. 'http://localhost:8000'.
                      Empty string yields root-relative links.
        """
        self.base_url = base_url.rstrip('/')

    def collection_href(self) -> str:
        return f"{self.base_url}{EMPLOYEES_PATH}"

    def self_href(self, employee_id: int) -> str:
        return f"{self.collection_href()}/{employee_id}"

    def to_model(self, dto: EmployeeDTO, employee_id: int) -> EmployeeDTO:
        """
        Return a copy of the DTO carrying 'self' and 'employees' links.

        Args:
            dto: Unlinked employee DTO
            employee_id: Identifier of the entity the DTO was mapped from

        Returns:
            Linked EmployeeDTO
        """
        return dto.model_copy(update={
            "links": [
                Link(rel=LinkRelation.SELF, href=self.self_href(employee_id)),
                Link(rel=LinkRelation.EMPLOYEES, href=self.collection_href()),
            ]
        })

    def to_collection_model(self, employees: List[EmployeeDTO]) -> EmployeeCollection:
        return EmployeeCollection(
            employees=employees,
            links=[Link(rel=LinkRelation.SELF, href=self.collection_href())]
        )
