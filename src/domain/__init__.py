"""Domain layer - Pure business logic.

This layer contains the core business entities, enums and protocols
(ports). The domain layer has NO dependencies on any framework or
infrastructure - it is pure Python.

Structure:
- entities/: Domain entities (employees, users, goals, reviews, ...)
- enums/: Roles, permissions, statuses
- protocols/: Repository and service interfaces
"""
