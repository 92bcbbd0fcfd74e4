"""Infrastructure layer - Adapters for domain protocols.

Structure:
- authorization/: Casbin role permission matrix (model.conf + policy.csv)
- logging/: structlog console adapter
- persistence/: SQLAlchemy models and repositories
- security/: JWT access tokens

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
