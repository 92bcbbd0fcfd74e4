"""Test suite for the HR performance API.

Test structure follows the test pyramid:
- unit/: Engine, scope, services and adapters with in-memory collaborators
- integration/: SQLAlchemy repositories against in-memory SQLite
- api/: HTTP endpoints through the FastAPI app with real JWTs
"""
