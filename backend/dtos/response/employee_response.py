"""
Employee Response DTOs

DTOs for employee API responses.
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class Link(BaseModel):
    """A named relation plus URI embedded in a representation."""

    rel: str = Field(description="Link relation, e.g. 'self'")
    href: str = Field(description="Target URI")


class EmployeeDTO(BaseModel):
    """
    Response DTO for a single employee.

    Carries the business fields only. The record's identity is exposed
    through the 'self' link, never as a raw id.
    """

    name: Optional[str] = Field(None, description="Employee name")
    role: Optional[str] = Field(None, description="Job title or function")
    email: Optional[str] = Field(None, description="Contact email")
    links: List[Link] = Field(default_factory=list, description="Hypermedia links")

    class Config:
        """Pydantic configuration."""
        from_attributes = True  # Allow creation from ORM models

    def get_link(self, rel: str) -> Optional[Link]:
        """Return the first link with the given relation, if any."""
        for link in self.links:
            if link.rel == rel:
                return link
        return None


class EmployeeCollection(BaseModel):
    """Response DTO for the list of all employees."""

    employees: List[EmployeeDTO] = Field(default_factory=list, description="Linked employees")
    links: List[Link] = Field(default_factory=list, description="Collection links")
