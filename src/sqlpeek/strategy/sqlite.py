"""
SQLite-specific strategy implementation.

SQLite only needs a database path. Its cursors report no column types, so
every column maps to ``UNKNOWN``.
"""
from typing import TYPE_CHECKING, Any

import sqlalchemy as sa
from sqlpeek.strategy.base import DialectStrategy, register_strategy
from sqlpeek.types import TypeMapping, map_sqlite_type

if TYPE_CHECKING:
    from sqlpeek.options import PresetOptions


@register_strategy('sqlite')
class SQLiteStrategy(DialectStrategy):
    """SQLite-specific operations.
    """

    @property
    def dialect_name(self) -> str:
        return 'sqlite'

    def build_connection_url(self, options: 'PresetOptions') -> sa.URL:
        """Build the SQLAlchemy connection URL for SQLite."""
        return sa.URL.create(drivername='sqlite', database=options.database)

    def get_engine_kwargs(self, options: 'PresetOptions') -> dict[str, Any]:
        if options.timeout:
            return {'connect_args': {'timeout': options.timeout}}
        return {}

    def map_type(self, type_code: Any) -> TypeMapping:
        return map_sqlite_type(type_code)

    @classmethod
    def get_required_options(cls) -> list[str]:
        return ['database']
