"""Shared fixtures for dialect_expression tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Dialect, Engine

from dialect_expression import Driver, Expression


class StaticResolver:
    """Platform resolver that always reports the same platform."""

    def __init__(self, platform: Dialect | type[Dialect]) -> None:
        self.platform = platform
        self.calls = 0

    def get_database_platform(self) -> Dialect | type[Dialect]:
        self.calls += 1
        return self.platform


def _marker(driver: Driver) -> Callable[[], Driver]:
    return lambda: driver


@pytest.fixture()
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite://")
    yield engine
    engine.dispose()


@pytest.fixture()
def resolver_for() -> Callable[[Dialect | type[Dialect]], StaticResolver]:
    """Build a resolver that always reports *platform* and counts its calls."""
    return StaticResolver


@pytest.fixture()
def expression_for() -> Callable[..., Expression]:
    """Build an expression whose bind reports *platform*."""

    def _build(platform: Dialect | type[Dialect], **kwargs: object) -> Expression:
        return Expression(platform, resolver=StaticResolver(platform), **kwargs)  # type: ignore[arg-type]

    return _build


@pytest.fixture()
def define_markers() -> Callable[[Expression], Expression]:
    """Register one definition per driver, each returning its own driver.

    In real use each definition would build or execute a query; here only
    the selection matters.
    """

    def _define(expression: Expression) -> Expression:
        for driver in Driver:
            expression.define_query(driver, _marker(driver))
        return expression

    return _define
