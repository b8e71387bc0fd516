"""Tests for EmployeeRepository against an in-memory SQLite database."""

import pytest
from sqlalchemy.exc import SQLAlchemyError
from unittest.mock import Mock

from exceptions import DatabaseError
from models import Employee
from repositories.employee_repository import EmployeeRepository
from repositories.interfaces import IEmployeeRepository


class TestEmployeeRepository:

    def test_implements_interface(self, db_session):
        assert isinstance(EmployeeRepository(db_session), IEmployeeRepository)

    def test_save_assigns_id(self, db_session):
        repo = EmployeeRepository(db_session)
        employee = Employee("Alice", "Developer", "alice@example.com")
        assert employee.id is None

        saved = repo.save(employee)

        assert saved.id is not None
        assert repo.find_by_id(saved.id).name == "Alice"

    def test_save_existing_keeps_id(self, db_session):
        repo = EmployeeRepository(db_session)
        saved = repo.save(Employee("Old", "Intern", "old@example.com"))
        original_id = saved.id

        saved.name = "New"
        saved.role = "Lead"
        updated = repo.save(saved)

        assert updated.id == original_id
        assert db_session.query(Employee).count() == 1
        assert repo.find_by_id(original_id).role == "Lead"

    def test_find_by_id_missing_returns_none(self, db_session):
        assert EmployeeRepository(db_session).find_by_id(100) is None

    def test_find_all_ordered_by_id(self, db_session):
        repo = EmployeeRepository(db_session)
        assert repo.find_all() == []

        repo.save(Employee("A", "r", "a@example.com"))
        repo.save(Employee("B", "r", "b@example.com"))

        assert [e.name for e in repo.find_all()] == ["A", "B"]

    def test_find_by_email(self, db_session):
        repo = EmployeeRepository(db_session)
        repo.save(Employee("Lina", "Engineer", "lina@example.com"))

        assert repo.find_by_email("lina@example.com").name == "Lina"
        assert repo.find_by_email("x@example.com") is None

    def test_find_by_email_duplicate_returns_lowest_id(self, db_session):
        repo = EmployeeRepository(db_session)
        first = repo.save(Employee("First", "r", "dup@example.com"))
        repo.save(Employee("Second", "r", "dup@example.com"))

        assert repo.find_by_email("dup@example.com").id == first.id

    def test_delete_by_id(self, db_session):
        repo = EmployeeRepository(db_session)
        saved = repo.save(Employee("Gone", "Temp", "gone@example.com"))

        assert repo.delete_by_id(saved.id) is True
        assert repo.find_by_id(saved.id) is None

    def test_delete_missing_id_is_tolerated(self, db_session):
        assert EmployeeRepository(db_session).delete_by_id(12345) is False

    def test_failed_save_raises_database_error_and_rolls_back(self, db_session, monkeypatch):
        repo = EmployeeRepository(db_session)
        monkeypatch.setattr(db_session, "commit", Mock(side_effect=SQLAlchemyError("disk I/O error")))
        rollback = Mock(wraps=db_session.rollback)
        monkeypatch.setattr(db_session, "rollback", rollback)

        with pytest.raises(DatabaseError) as exc_info:
            repo.save(Employee("Bob", "Manager", "bob@example.com"))

        assert exc_info.value.details == {"operation": "save"}
        assert isinstance(exc_info.value.__cause__, SQLAlchemyError)
        rollback.assert_called_once()

    def test_failed_delete_raises_database_error(self, db_session, monkeypatch):
        repo = EmployeeRepository(db_session)
        saved = repo.save(Employee("Gone", "Temp", "gone@example.com"))
        monkeypatch.setattr(db_session, "commit", Mock(side_effect=SQLAlchemyError("database is locked")))

        with pytest.raises(DatabaseError) as exc_info:
            repo.delete_by_id(saved.id)

        assert exc_info.value.message == "Could not delete employee"
