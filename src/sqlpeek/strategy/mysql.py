"""
MySQL-specific strategy implementation (PyMySQL driver).
"""
from typing import TYPE_CHECKING, Any

import sqlalchemy as sa
from sqlpeek.strategy.base import DialectStrategy, register_strategy
from sqlpeek.types import TypeMapping, map_mysql_type

if TYPE_CHECKING:
    from sqlpeek.options import PresetOptions


@register_strategy('mysql')
class MySQLStrategy(DialectStrategy):
    """MySQL-specific operations.
    """

    @property
    def dialect_name(self) -> str:
        return 'mysql'

    def build_connection_url(self, options: 'PresetOptions') -> sa.URL:
        """Build the SQLAlchemy connection URL for MySQL."""
        return sa.URL.create(
            drivername='mysql+pymysql',
            username=options.username,
            password=options.password,
            host=options.hostname,
            port=options.port or None,
            database=options.database,
            query={'charset': 'utf8mb4'},
        )

    def get_engine_kwargs(self, options: 'PresetOptions') -> dict[str, Any]:
        if options.timeout:
            return {'connect_args': {'connect_timeout': options.timeout}}
        return {}

    def map_type(self, type_code: Any) -> TypeMapping:
        return map_mysql_type(type_code)

    @classmethod
    def get_required_options(cls) -> list[str]:
        return ['hostname', 'username', 'password', 'database']
