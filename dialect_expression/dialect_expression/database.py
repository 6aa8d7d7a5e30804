"""SQLAlchemy engine creation from settings."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url

from dialect_expression.config import Settings, load_settings
from dialect_expression.expression import Expression

logger = logging.getLogger(__name__)


def get_engine(database_url: str, echo: bool = False) -> Engine:
    """Create a SQLAlchemy engine for *database_url*.

    The DBAPI driver named by the URL must be installed; SQLite works out of
    the box.
    """
    engine = create_engine(database_url, echo=echo)
    logger.info(
        "Created engine dialect=%s driver=%s",
        engine.dialect.name,
        engine.dialect.driver,
    )
    return engine


def create_expression(
    settings: Settings | None = None,
    container: Mapping[str, Any] | None = None,
) -> Expression:
    """Return an :class:`Expression` bound to an engine built from *settings*."""
    settings = settings or load_settings()
    logger.debug("Binding expression to %s", make_url(settings.database_url).render_as_string(hide_password=True))
    engine = get_engine(settings.database_url, echo=settings.echo)
    return Expression(engine, container)
