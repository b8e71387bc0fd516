"""Tests for conversion between Employee entities and DTOs."""

from models import Employee
from dtos.request.employee_request import EmployeeRequest
from dtos.response.employee_response import EmployeeDTO, Link
from mappers.employee_mapper import EmployeeMapper


class TestEmployeeMapper:

    def test_to_dto_copies_business_fields(self):
        entity = Employee("Alice", "Developer", "alice@example.com", id=1)

        dto = EmployeeMapper.to_dto(entity)

        assert dto.name == "Alice"
        assert dto.role == "Developer"
        assert dto.email == "alice@example.com"
        assert dto.links == []
        assert "id" not in dto.model_dump()

    def test_to_entity_has_no_id(self):
        dto = EmployeeRequest(name="Bob", role="Manager", email="bob@example.com")

        entity = EmployeeMapper.to_entity(dto)

        assert entity.id is None
        assert (entity.name, entity.role, entity.email) == ("Bob", "Manager", "bob@example.com")

    def test_to_entity_ignores_links(self):
        dto = EmployeeDTO(
            name="Lina", role="Engineer", email="lina@example.com",
            links=[Link(rel="self", href="http://localhost/employees/20")]
        )

        entity = EmployeeMapper.to_entity(dto)

        assert entity.id is None
        assert entity.name == "Lina"

    def test_round_trip_preserves_fields(self):
        request = EmployeeRequest(name="Sara", role="Analyst", email="sara@example.com")

        entity = EmployeeMapper.to_entity(EmployeeMapper.to_dto(EmployeeMapper.to_entity(request)))

        assert (entity.name, entity.role, entity.email) == (request.name, request.role, request.email)
        assert entity.id is None
