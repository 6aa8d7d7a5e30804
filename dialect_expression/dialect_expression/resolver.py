"""Resolution of the database platform (SQLAlchemy dialect) behind a bind.

A *platform* is a :class:`sqlalchemy.engine.Dialect`.  Families of platforms
are dialect base classes; a concrete driver dialect such as
``SQLiteDialect_pysqlite`` belongs to the SQLite family because it subclasses
``SQLiteDialect``.  Matching is therefore an ``isinstance`` / ``issubclass``
test, never a name comparison.
"""

from __future__ import annotations

import functools
import importlib
import logging
from typing import Any, Protocol, runtime_checkable

from sqlalchemy.engine import Dialect
from sqlalchemy.exc import UnboundExecutionError

from dialect_expression.exceptions import UnrecognizedPlatformError

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=None)
def load_platform_class(path: str) -> type[Dialect]:
    """Import the dialect class named by a dotted *path*.

    Raises:
        UnrecognizedPlatformError: If the path cannot be imported or does not
            name a :class:`Dialect` subclass.
    """
    module_name, _, attr = path.rpartition(".")
    if not module_name:
        raise UnrecognizedPlatformError(f'Unrecognized database platform "{path}"')

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise UnrecognizedPlatformError(f'Unrecognized database platform "{path}"') from exc

    platform_class = getattr(module, attr, None)
    if not (isinstance(platform_class, type) and issubclass(platform_class, Dialect)):
        raise UnrecognizedPlatformError(f'Unrecognized database platform "{path}"')
    return platform_class


def is_platform_of(platform: Dialect | type[Dialect], family: type[Dialect]) -> bool:
    """Return True if *platform* is *family* or a specialisation of it.

    *platform* may be a dialect instance or a dialect class.
    """
    if isinstance(platform, type):
        return issubclass(platform, family)
    return isinstance(platform, family)


def resolve_dialect(bind: Any) -> Dialect:
    """Return the dialect in effect for *bind*.

    Accepts a :class:`Dialect`, anything exposing ``.dialect`` (``Engine``,
    ``Connection``, ``AsyncEngine``, ``AsyncConnection``) or anything exposing
    ``get_bind()`` (``Session``, ``AsyncSession``).
    """
    if isinstance(bind, Dialect):
        return bind

    dialect = getattr(bind, "dialect", None)
    if dialect is None and callable(getattr(bind, "get_bind", None)):
        try:
            dialect = getattr(bind.get_bind(), "dialect", None)
        except UnboundExecutionError as exc:
            raise UnrecognizedPlatformError(f"Cannot determine the database platform of {bind!r}") from exc

    if not isinstance(dialect, Dialect):
        raise UnrecognizedPlatformError(f"Cannot determine the database platform of {bind!r}")
    return dialect


@runtime_checkable
class PlatformResolver(Protocol):
    """Reports the database platform currently in use."""

    def get_database_platform(self) -> Dialect | type[Dialect]: ...


class BindPlatformResolver:
    """Resolve the platform from a live SQLAlchemy bind on every call."""

    def __init__(self, bind: Any) -> None:
        self._bind = bind

    def get_database_platform(self) -> Dialect:
        dialect = resolve_dialect(self._bind)
        logger.debug("Resolved database platform %s", type(dialect).__name__)
        return dialect
