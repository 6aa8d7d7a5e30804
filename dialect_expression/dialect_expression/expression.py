"""Driver-specific query definitions selected by the active database platform.

Usage::

    expression = Expression(session, {"status": "active"})
    expression.define_query(
        Driver.MYSQL,
        lambda expr: expr.get_bind().execute(text("SELECT ... REGEXP ..."), {"s": expr.get("status")}),
    )
    expression.define_query(
        Driver.POSTGRESQL,
        lambda expr: expr.get_bind().execute(text("SELECT ... ~ ..."), {"s": expr.get("status")}),
    )
    # SQLite shares the MySQL syntax here.
    expression.define_query(Driver.SQLITE, lambda expr: expr.get_defined_query(Driver.MYSQL))

    result = expression.get_compatible_result()

Definitions are tried in registration order and the first one whose driver
family the active platform belongs to is invoked.  When several registered
families could match the same platform, register the preferred one first.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from typing import Any

from dialect_expression.container import Container
from dialect_expression.drivers import Driver
from dialect_expression.resolver import (
    BindPlatformResolver,
    PlatformResolver,
    is_platform_of,
    load_platform_class,
)

logger = logging.getLogger(__name__)

QueryDefinition = Callable[..., Any]


def _driver_key(driver: Driver | str) -> str:
    return driver.value if isinstance(driver, Driver) else str(driver)


class Expression(Container):
    """Registry of per-driver query definitions bound to one database bind.

    The expression is also a :class:`Container`, so values set on it are
    available to every definition through ``expr.get(...)``.

    Args:
        bind: SQLAlchemy ``Engine``, ``Connection``, ``Session`` (sync or
            async) or ``Dialect`` the queries run against.
        container: Initial context values.
        resolver: Overrides how the active platform is determined.  Defaults
            to inspecting *bind*.
    """

    def __init__(
        self,
        bind: Any,
        container: Mapping[str, Any] | None = None,
        *,
        resolver: PlatformResolver | None = None,
    ) -> None:
        super().__init__(container)
        self._bind = bind
        self._resolver = resolver if resolver is not None else BindPlatformResolver(bind)
        self._queries: dict[str, QueryDefinition] = {}

    def get_bind(self) -> Any:
        return self._bind

    def define_query(self, driver: Driver | str, callback: QueryDefinition) -> Expression:
        """Register *callback* for *driver*, replacing any earlier definition.

        *driver* is a :class:`Driver` or the dotted path of a dialect class.
        Paths are validated when the definition is dispatched, not here.

        The callback may accept no arguments, the expression, or the
        expression and the bind.  The bind is only passed when the callback
        has a second positional parameter without a default.
        """
        if not callable(callback):
            raise TypeError(f"Query definition for {_driver_key(driver)!r} must be callable")

        self._queries[_driver_key(driver)] = callback
        return self

    def get_defined_query(self, driver: Driver | str) -> Any:
        """Invoke the definition registered for *driver* and return its result.

        Returns ``None`` if nothing is registered for *driver*.

        Raises:
            UnrecognizedPlatformError: If *driver* is a path that does not
                name a dialect of a known driver family.
        """
        if not isinstance(driver, Driver):
            Driver.from_platform(str(driver))

        callback = self._queries.get(_driver_key(driver))
        if callback is None:
            return None
        return self._invoke(callback)

    def get_compatible_result(self) -> Any:
        """Invoke the first definition compatible with the active platform.

        Returns ``None`` if no registered driver matches the platform.

        Raises:
            UnrecognizedPlatformError: If a registered path does not name a
                dialect of a known driver family.
        """
        platform = self._resolver.get_database_platform()

        for key in list(self._queries):
            if not is_platform_of(platform, load_platform_class(key)):
                continue

            driver = Driver.from_platform(key)
            logger.debug(
                "Dispatching query for platform %s to %s definition",
                _platform_name(platform),
                driver.name,
            )
            return self._invoke(self._queries[key])

        logger.debug("No query defined for platform %s", _platform_name(platform))
        return None

    def get_driver(self) -> Driver | None:
        """Return the driver family of the active platform, or ``None``.

        Independent of which definitions have been registered.
        """
        platform = self._resolver.get_database_platform()
        for driver in Driver:
            if driver.matches(platform):
                return driver
        return None

    def _invoke(self, callback: QueryDefinition) -> Any:
        try:
            parameters = inspect.signature(callback).parameters.values()
        except (TypeError, ValueError):
            # Builtins without introspectable signatures get the expression.
            return callback(self)

        if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in parameters):
            return callback(self, self._bind)

        positional = [
            p
            for p in parameters
            if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
        ]
        required = [p for p in positional if p.default is inspect.Parameter.empty]
        if len(required) >= 2:
            return callback(self, self._bind)
        if positional:
            return callback(self)
        return callback()


def _platform_name(platform: Any) -> str:
    return platform.__name__ if isinstance(platform, type) else type(platform).__name__
