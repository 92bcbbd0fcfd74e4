"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_authorization_engine, ...

The container is organized into modules:
- infrastructure: Database, session, token service, logging
- repositories: Repository factories (request-scoped)
- authorization: Casbin role permissions and the authorization engine
- services: Resource service factories (request-scoped)
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_token_service,
)

# Repositories
from src.core.container.repositories import (
    get_department_repository,
    get_employee_repository,
    get_employee_skill_repository,
    get_goal_repository,
    get_review_cycle_repository,
    get_review_repository,
    get_skill_repository,
    get_user_repository,
)

# Authorization
from src.core.container.authorization import (
    get_authorization_engine,
    get_enforcer,
    get_role_permissions,
    init_enforcer,
)

# Services
from src.core.container.services import (
    get_department_service,
    get_employee_service,
    get_employee_skill_service,
    get_goal_service,
    get_review_cycle_service,
    get_review_service,
    get_skill_service,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    "get_token_service",
    # Repositories
    "get_user_repository",
    "get_employee_repository",
    "get_goal_repository",
    "get_review_repository",
    "get_department_repository",
    "get_skill_repository",
    "get_review_cycle_repository",
    "get_employee_skill_repository",
    # Authorization
    "init_enforcer",
    "get_enforcer",
    "get_role_permissions",
    "get_authorization_engine",
    # Services
    "get_employee_service",
    "get_goal_service",
    "get_review_service",
    "get_department_service",
    "get_skill_service",
    "get_review_cycle_service",
    "get_employee_skill_service",
]
