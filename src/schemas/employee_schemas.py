"""Employee request and response schemas.

Pydantic schemas for employee API endpoints:
- Request schemas (client → API) with to_entity()
- Response schemas (API → client) with from_entity()
"""

from pydantic import BaseModel, EmailStr, Field

from src.domain.entities import Employee


# =============================================================================
# Request Schemas
# =============================================================================


class EmployeeRequest(BaseModel):
    """Create or replace an employee.

    Attributes:
        first_name: Given name.
        last_name: Family name.
        email: Work email.
        manager_id: Direct manager's employee id.
        department_id: Department id.
    """

    first_name: str = Field(..., min_length=1, max_length=100, examples=["Ada"])
    last_name: str = Field(..., min_length=1, max_length=100, examples=["Lovelace"])
    email: EmailStr = Field(..., description="Work email address")
    manager_id: int | None = Field(None, description="Direct manager's employee id")
    department_id: int | None = Field(None, description="Department id")

    def to_entity(self, employee_id: int = 0) -> Employee:
        """Build the domain entity (id 0 for new employees)."""
        return Employee(
            id=employee_id,
            first_name=self.first_name,
            last_name=self.last_name,
            email=str(self.email),
            manager_id=self.manager_id,
            department_id=self.department_id,
        )


# =============================================================================
# Response Schemas
# =============================================================================


class EmployeeResponse(BaseModel):
    """Single employee response."""

    id: int = Field(..., description="Employee id")
    first_name: str
    last_name: str
    full_name: str
    email: str
    manager_id: int | None = None
    department_id: int | None = None

    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeeResponse":
        return cls(
            id=employee.id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            full_name=employee.full_name,
            email=employee.email,
            manager_id=employee.manager_id,
            department_id=employee.department_id,
        )


class EmployeeListResponse(BaseModel):
    """Employee list response.

    Attributes:
        employees: Visible employees.
        total_count: Number of employees returned.
    """

    employees: list[EmployeeResponse]
    total_count: int

    @classmethod
    def from_entities(cls, employees: list[Employee]) -> "EmployeeListResponse":
        return cls(
            employees=[EmployeeResponse.from_entity(e) for e in employees],
            total_count=len(employees),
        )
