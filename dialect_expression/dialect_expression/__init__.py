"""Dialect Expression — driver-specific queries chosen by the active database.

Usage::

    from dialect_expression import Driver, Expression

    expression = Expression(engine, {"limit": 10})
    expression.define_query(Driver.POSTGRESQL, lambda expr: ...)
    expression.define_query(Driver.MYSQL, lambda expr: ...)
    expression.define_query(Driver.SQLITE, lambda expr: expr.get_defined_query(Driver.MYSQL))

    rows = expression.get_compatible_result()

Platforms are SQLAlchemy dialects; a definition matches when the active
dialect is, or subclasses, the dialect family of its :class:`Driver`.
"""

from .config import Settings, load_settings
from .container import Container
from .database import create_expression, get_engine
from .drivers import Driver
from .exceptions import ExpressionError, MissingKeyError, UnrecognizedPlatformError
from .expression import Expression, QueryDefinition
from .resolver import (
    BindPlatformResolver,
    PlatformResolver,
    is_platform_of,
    load_platform_class,
    resolve_dialect,
)

__all__ = [
    # Dispatch
    "Expression",
    "QueryDefinition",
    "Driver",
    "Container",
    # Platform resolution
    "PlatformResolver",
    "BindPlatformResolver",
    "resolve_dialect",
    "load_platform_class",
    "is_platform_of",
    # Configuration
    "Settings",
    "load_settings",
    "get_engine",
    "create_expression",
    # Exceptions
    "ExpressionError",
    "MissingKeyError",
    "UnrecognizedPlatformError",
]
