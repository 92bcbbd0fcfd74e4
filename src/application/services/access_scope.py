"""Per-request snapshot of the employees a caller may read.

List handlers compute the scope once and then filter rows by set
membership, so a response never mixes answers from different points in
time and never costs one authorization lookup per row.

Usage:
    scope = await engine.get_access_scope(user_id)
    visible_goals = scope.filter_goals(await goal_repo.list_all())
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from src.domain.entities import Employee, EmployeeSkill, Goal, Principal, Review


@dataclass(frozen=True, slots=True, kw_only=True)
class AccessScope:
    """Accessible-employee snapshot.

    Attributes:
        principal: Resolved caller (None if the user could not be resolved).
        employee_ids: Employee ids the caller may read.
        unrestricted: True for HR Admins, who see every row including
            reviews with neither reviewer nor reviewee set.
    """

    principal: Principal | None
    employee_ids: frozenset[int] = field(default_factory=frozenset)
    unrestricted: bool = False

    @classmethod
    def empty(cls) -> "AccessScope":
        """Scope that grants nothing (unresolved caller)."""
        return cls(principal=None)

    def includes(self, employee_id: int | None) -> bool:
        """Check if an employee id is in scope.

        Args:
            employee_id: Employee id (None is never in a restricted scope).

        Returns:
            bool: True if visible.
        """
        if self.unrestricted:
            return True
        return employee_id is not None and employee_id in self.employee_ids

    def includes_review(self, review: Review) -> bool:
        """Check if either side of a review is in scope."""
        if self.unrestricted:
            return True
        return self.includes(review.reviewee_id) or self.includes(review.reviewer_id)

    def filter_employees(self, employees: Iterable[Employee]) -> list[Employee]:
        return [employee for employee in employees if self.includes(employee.id)]

    def filter_goals(self, goals: Iterable[Goal]) -> list[Goal]:
        return [goal for goal in goals if self.includes(goal.employee_id)]

    def filter_reviews(self, reviews: Iterable[Review]) -> list[Review]:
        return [review for review in reviews if self.includes_review(review)]

    def filter_employee_skills(self, links: Iterable[EmployeeSkill]) -> list[EmployeeSkill]:
        return [link for link in links if self.includes(link.employee_id)]
