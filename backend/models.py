from sqlalchemy import Column, String, Integer, Index
from database import Base


class Employee(Base):
    """
    Persisted employee record.

    `id` is assigned by the database on first save and never changes.
    `email` is a secondary lookup key but is not constrained unique.
    """
    __tablename__ = 'employees'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String)
    role = Column(String)
    email = Column(String)

    __table_args__ = (
        Index('idx_employees_email', 'email'),
    )

    def __init__(self, name: str | None = None, role: str | None = None, email: str | None = None, id: int | None = None):
        if id is not None:
            self.id = id
        self.name = name
        self.role = role
        self.email = email

    def __repr__(self):
        return f"<Employee id={self.id} name={self.name!r} role={self.role!r} email={self.email!r}>"
