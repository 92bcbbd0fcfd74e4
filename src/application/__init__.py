"""Application layer - Use cases and orchestration.

Structure:
- errors/: ApplicationError returned inside Failure results
- services/: AuthorizationEngine, AccessScope and the per-resource
  services that apply access rules before reading or writing

The application layer orchestrates domain logic and repositories; it has
no knowledge of HTTP.
"""
