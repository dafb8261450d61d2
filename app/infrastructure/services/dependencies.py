"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from infrastructure.i18n.dependencies import LocaleDep

__all__ = [
    "LocaleDep",
]
