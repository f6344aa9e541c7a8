"""
PostgreSQL-specific strategy implementation (psycopg driver).
"""
from typing import TYPE_CHECKING, Any

import sqlalchemy as sa
from sqlpeek.strategy.base import DialectStrategy, register_strategy
from sqlpeek.types import TypeMapping, map_postgres_type

if TYPE_CHECKING:
    from sqlpeek.options import PresetOptions


@register_strategy('postgresql')
class PostgresStrategy(DialectStrategy):
    """PostgreSQL-specific operations.
    """

    @property
    def dialect_name(self) -> str:
        return 'postgresql'

    def build_connection_url(self, options: 'PresetOptions') -> sa.URL:
        """Build the SQLAlchemy connection URL for PostgreSQL."""
        query = {}
        if options.timeout:
            query['connect_timeout'] = str(options.timeout)

        return sa.URL.create(
            drivername='postgresql+psycopg',
            username=options.username,
            password=options.password,
            host=options.hostname,
            port=options.port or None,
            database=options.database,
            query=query,
        )

    def get_engine_kwargs(self, options: 'PresetOptions') -> dict[str, Any]:
        return {}

    def map_type(self, type_code: Any) -> TypeMapping:
        return map_postgres_type(type_code)

    @classmethod
    def get_required_options(cls) -> list[str]:
        return ['hostname', 'username', 'password', 'database']
