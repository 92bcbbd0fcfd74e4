"""EmployeeRepository - SQLAlchemy implementation of EmployeeRepository protocol.

Also serves as the EmployeeDirectory the authorization engine reads.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.employee import Employee
from src.infrastructure.persistence.models.employee import Employee as EmployeeModel


class EmployeeRepository:
    """SQLAlchemy implementation of EmployeeRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, employee_id: int) -> Employee | None:
        """Find employee by ID.

        Args:
            employee_id: Employee's unique identifier.

        Returns:
            Domain Employee entity if found, None otherwise.
        """
        model = await self.session.get(EmployeeModel, employee_id)
        return self._to_domain(model) if model else None

    async def find_by_email(self, email: str) -> Employee | None:
        stmt = select(EmployeeModel).where(EmployeeModel.email == email)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_all_ids(self) -> set[int]:
        result = await self.session.execute(select(EmployeeModel.id))
        return set(result.scalars().all())

    async def list_direct_report_ids(self, manager_employee_id: int) -> set[int]:
        """Ids of employees whose manager_id equals the given id.

        Args:
            manager_employee_id: Employee id of the manager.

        Returns:
            set[int]: Direct subordinate ids.
        """
        stmt = select(EmployeeModel.id).where(
            EmployeeModel.manager_id == manager_employee_id
        )
        result = await self.session.execute(stmt)
        return set(result.scalars().all())

    async def list_all(self) -> list[Employee]:
        result = await self.session.execute(select(EmployeeModel).order_by(EmployeeModel.id))
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_by_ids(self, employee_ids: set[int]) -> list[Employee]:
        if not employee_ids:
            return []
        stmt = (
            select(EmployeeModel)
            .where(EmployeeModel.id.in_(employee_ids))
            .order_by(EmployeeModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_by_department(self, department_id: int) -> list[Employee]:
        stmt = (
            select(EmployeeModel)
            .where(EmployeeModel.department_id == department_id)
            .order_by(EmployeeModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def add(self, employee: Employee) -> Employee:
        """Create new employee.

        Args:
            employee: Employee entity (id is assigned by the database).

        Returns:
            Employee with its assigned id.
        """
        model = self._to_model(employee)
        self.session.add(model)
        await self.session.commit()
        await self.session.refresh(model)
        return self._to_domain(model)

    async def update(self, employee: Employee) -> Employee | None:
        """Update existing employee.

        Args:
            employee: Employee entity with updated fields.

        Returns:
            Updated employee, or None if it does not exist.
        """
        model = await self.session.get(EmployeeModel, employee.id)
        if model is None:
            return None

        model.first_name = employee.first_name
        model.last_name = employee.last_name
        model.email = employee.email
        model.manager_id = employee.manager_id
        model.department_id = employee.department_id

        await self.session.commit()
        await self.session.refresh(model)
        return self._to_domain(model)

    async def delete(self, employee_id: int) -> bool:
        model = await self.session.get(EmployeeModel, employee_id)
        if model is None:
            return False
        await self.session.delete(model)
        await self.session.commit()
        return True

    def _to_domain(self, model: EmployeeModel) -> Employee:
        return Employee(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            manager_id=model.manager_id,
            department_id=model.department_id,
        )

    def _to_model(self, employee: Employee) -> EmployeeModel:
        return EmployeeModel(
            first_name=employee.first_name,
            last_name=employee.last_name,
            email=employee.email,
            manager_id=employee.manager_id,
            department_id=employee.department_id,
        )
