"""API test fixtures.

The real app runs with its repository factories overridden by the
in-memory repositories from tests/conftest.py. Authentication is real:
requests carry JWTs signed by the app's own token service, so the
bearer dependency, role permission gates and the authorization engine
all run unmodified.
"""

import pytest
from fastapi.testclient import TestClient

from src.core.container import (
    get_department_repository,
    get_employee_repository,
    get_employee_skill_repository,
    get_goal_repository,
    get_review_cycle_repository,
    get_review_repository,
    get_skill_repository,
    get_token_service,
    get_user_repository,
)
from src.main import app
from tests.conftest import build_users


@pytest.fixture
def client(
    user_store,
    employee_repo,
    goal_repo,
    review_repo,
    department_repo,
    skill_repo,
    cycle_repo,
    employee_skill_repo,
):
    """TestClient over the in-memory org chart."""
    app.dependency_overrides[get_user_repository] = lambda: user_store
    app.dependency_overrides[get_employee_repository] = lambda: employee_repo
    app.dependency_overrides[get_goal_repository] = lambda: goal_repo
    app.dependency_overrides[get_review_repository] = lambda: review_repo
    app.dependency_overrides[get_department_repository] = lambda: department_repo
    app.dependency_overrides[get_skill_repository] = lambda: skill_repo
    app.dependency_overrides[get_review_cycle_repository] = lambda: cycle_repo
    app.dependency_overrides[get_employee_skill_repository] = lambda: employee_skill_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth_headers(user_id: int) -> dict[str, str]:
    """Bearer header for one of the seeded users (or an unknown id)."""
    users = {user.id: user for user in build_users()}
    user = users.get(user_id)
    token = get_token_service().generate_access_token(
        user_id=user_id,
        role=user.role if user else "Employee",
        employee_id=user.employee_id if user else 0,
    )
    return {"Authorization": f"Bearer {token}"}
