"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers and endpoint definitions. Handlers are
thin: they call an application service and translate its Result into an
HTTP response.

Structure:
- routers/system.py: Root, health and config endpoints
- routers/api/v1/: Versioned resources, registered from the route registry

The presentation layer depends on the application layer but contains NO
authorization rules of its own beyond the coarse role gates.
"""
