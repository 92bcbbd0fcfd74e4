"""Department, skill and review cycle request and response schemas."""

from datetime import date

from pydantic import BaseModel, Field, model_validator

from src.domain.entities import Department, EmployeeSkill, ReviewCycle, Skill


# =============================================================================
# Departments
# =============================================================================


class DepartmentRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["Engineering"])

    def to_entity(self, department_id: int = 0) -> Department:
        return Department(id=department_id, name=self.name)


class DepartmentResponse(BaseModel):
    id: int
    name: str

    @classmethod
    def from_entity(cls, department: Department) -> "DepartmentResponse":
        return cls(id=department.id, name=department.name)


class DepartmentListResponse(BaseModel):
    departments: list[DepartmentResponse]
    total_count: int

    @classmethod
    def from_entities(cls, departments: list[Department]) -> "DepartmentListResponse":
        return cls(
            departments=[DepartmentResponse.from_entity(d) for d in departments],
            total_count=len(departments),
        )


# =============================================================================
# Skills
# =============================================================================


class SkillRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["Python"])
    description: str | None = None

    def to_entity(self, skill_id: int = 0) -> Skill:
        return Skill(id=skill_id, name=self.name, description=self.description)


class SkillResponse(BaseModel):
    id: int
    name: str
    description: str | None = None

    @classmethod
    def from_entity(cls, skill: Skill) -> "SkillResponse":
        return cls(id=skill.id, name=skill.name, description=skill.description)


class SkillListResponse(BaseModel):
    skills: list[SkillResponse]
    total_count: int

    @classmethod
    def from_entities(cls, skills: list[Skill]) -> "SkillListResponse":
        return cls(skills=[SkillResponse.from_entity(s) for s in skills], total_count=len(skills))


# =============================================================================
# Employee skills
# =============================================================================


class EmployeeSkillRequest(BaseModel):
    """Assign a skill to an employee.

    Attributes:
        skill_id: Catalog skill.
        proficiency_level: 1 (novice) to 5 (expert).
    """

    skill_id: int = Field(..., description="Catalog skill id")
    proficiency_level: int = Field(..., ge=1, le=5)

    def to_entity(self, employee_id: int) -> EmployeeSkill:
        return EmployeeSkill(
            id=0,
            employee_id=employee_id,
            skill_id=self.skill_id,
            proficiency_level=self.proficiency_level,
        )


class EmployeeSkillResponse(BaseModel):
    id: int
    employee_id: int
    skill_id: int
    proficiency_level: int

    @classmethod
    def from_entity(cls, link: EmployeeSkill) -> "EmployeeSkillResponse":
        return cls(
            id=link.id,
            employee_id=link.employee_id,
            skill_id=link.skill_id,
            proficiency_level=link.proficiency_level,
        )


class EmployeeSkillListResponse(BaseModel):
    employee_skills: list[EmployeeSkillResponse]
    total_count: int

    @classmethod
    def from_entities(cls, links: list[EmployeeSkill]) -> "EmployeeSkillListResponse":
        return cls(
            employee_skills=[EmployeeSkillResponse.from_entity(link) for link in links],
            total_count=len(links),
        )


# =============================================================================
# Review cycles
# =============================================================================


class ReviewCycleRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["Q1 2024"])
    cycle_type: str | None = Field(None, max_length=50, examples=["Quarterly"])
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def check_dates(self) -> "ReviewCycleRequest":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

    def to_entity(self, cycle_id: int = 0) -> ReviewCycle:
        return ReviewCycle(
            id=cycle_id,
            name=self.name,
            start_date=self.start_date,
            end_date=self.end_date,
            cycle_type=self.cycle_type,
        )


class ReviewCycleResponse(BaseModel):
    id: int
    name: str
    cycle_type: str | None = None
    start_date: date
    end_date: date

    @classmethod
    def from_entity(cls, cycle: ReviewCycle) -> "ReviewCycleResponse":
        return cls(
            id=cycle.id,
            name=cycle.name,
            cycle_type=cycle.cycle_type,
            start_date=cycle.start_date,
            end_date=cycle.end_date,
        )


class ReviewCycleListResponse(BaseModel):
    review_cycles: list[ReviewCycleResponse]
    total_count: int

    @classmethod
    def from_entities(cls, cycles: list[ReviewCycle]) -> "ReviewCycleListResponse":
        return cls(
            review_cycles=[ReviewCycleResponse.from_entity(c) for c in cycles],
            total_count=len(cycles),
        )
