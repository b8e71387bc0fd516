"""
Employee Request DTOs

DTOs for employee create and replace requests.
"""

from pydantic import BaseModel, Field


class EmployeeRequest(BaseModel):
    """
    Request DTO carrying the full set of employee fields.

    Used by both POST and PUT: updates replace every field, there is no
    partial patch.
    """

    name: str = Field(description="Employee name")
    role: str = Field(description="Job title or function")
    email: str = Field(description="Contact email, also used for lookup")

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "name": "Bob",
                "role": "Manager",
                "email": "bob@example.com"
            }
        }
