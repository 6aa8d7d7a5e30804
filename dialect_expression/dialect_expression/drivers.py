"""Closed set of database driver families a query can be defined for."""

from __future__ import annotations

import enum

from sqlalchemy.engine import Dialect

from dialect_expression.exceptions import UnrecognizedPlatformError
from dialect_expression.resolver import is_platform_of, load_platform_class


class Driver(str, enum.Enum):
    """Supported database driver families.

    Each value is the import path of the SQLAlchemy dialect class at the root
    of the family.  Driver-specific dialects (``MySQLDialect_pymysql``,
    ``PGDialect_psycopg``, ...) subclass these and match their family.
    """

    MYSQL = "sqlalchemy.dialects.mysql.base.MySQLDialect"
    POSTGRESQL = "sqlalchemy.dialects.postgresql.base.PGDialect"
    SQLITE = "sqlalchemy.dialects.sqlite.base.SQLiteDialect"
    SQLSERVER = "sqlalchemy.dialects.mssql.base.MSDialect"
    ORACLE = "sqlalchemy.dialects.oracle.base.OracleDialect"

    @property
    def platform_class(self) -> type[Dialect]:
        return load_platform_class(self.value)

    def matches(self, platform: Dialect | type[Dialect]) -> bool:
        """Return True if *platform* belongs to this driver's family."""
        return is_platform_of(platform, self.platform_class)

    @classmethod
    def from_platform(cls, platform: str | Dialect | type[Dialect]) -> Driver:
        """Return the first driver whose family *platform* belongs to.

        Args:
            platform: A dialect instance, a dialect class, or the dotted
                import path of a dialect class.

        Raises:
            UnrecognizedPlatformError: If *platform* cannot be loaded or
                belongs to none of the families.
        """
        if isinstance(platform, cls):
            return platform

        if isinstance(platform, str):
            platform = load_platform_class(platform)

        for driver in cls:
            if driver.matches(platform):
                return driver

        platform_class = platform if isinstance(platform, type) else type(platform)
        raise UnrecognizedPlatformError(
            f'Unrecognized database platform "{platform_class.__module__}.{platform_class.__qualname__}"'
        )
