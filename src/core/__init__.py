"""Core shared kernel.

Foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Settings (pydantic-settings)
- Dependency container (composition root)

The core module has NO dependencies on the presentation layer.
"""

from src.core.result import Failure, Result, Success

__all__ = [
    "Failure",
    "Result",
    "Success",
]
