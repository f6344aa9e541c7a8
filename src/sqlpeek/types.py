"""
Native column type to portable type mapping.

Each dialect reports a column type tag in ``cursor.description``: MySQL a
``FIELD_TYPE`` code, PostgreSQL an OID, SQLite nothing at all. The mappers
here turn any tag into a ``TypeMapping`` pair. They are total: a tag missing
from the table, including ``None`` and codes added by future servers, maps
to ``UNKNOWN``.
"""
import logging
from collections.abc import Callable
from typing import Any, NamedTuple

from pymysql.constants import FIELD_TYPE

logger = logging.getLogger(__name__)

__all__ = [
    'TypeMapping',
    'UNKNOWN',
    'mysql_types',
    'postgres_types',
    'map_mysql_type',
    'map_postgres_type',
    'map_sqlite_type',
    ]


class TypeMapping(NamedTuple):
    """Native type name paired with its portable type name.
    """
    native: str
    portable: str


UNKNOWN = TypeMapping('UNKNOWN', 'any')

mysql_types: dict[int, TypeMapping] = {
    FIELD_TYPE.DECIMAL: TypeMapping('DECIMAL', 'double'),
    FIELD_TYPE.NEWDECIMAL: TypeMapping('DECIMAL', 'double'),
    FIELD_TYPE.TINY: TypeMapping('TINYINT', 'int8'),
    FIELD_TYPE.SHORT: TypeMapping('SMALLINT', 'int16'),
    FIELD_TYPE.LONG: TypeMapping('INT', 'int32'),
    FIELD_TYPE.FLOAT: TypeMapping('FLOAT', 'float'),
    FIELD_TYPE.DOUBLE: TypeMapping('DOUBLE', 'double'),
    FIELD_TYPE.NULL: TypeMapping('NULL', 'void'),
    FIELD_TYPE.TIMESTAMP: TypeMapping('TIMESTAMP', 'text'),
    FIELD_TYPE.LONGLONG: TypeMapping('BIGINT', 'int64'),
    FIELD_TYPE.INT24: TypeMapping('MEDIUMINT', 'int32'),
    FIELD_TYPE.DATE: TypeMapping('DATE', 'text'),
    FIELD_TYPE.TIME: TypeMapping('TIME', 'text'),
    FIELD_TYPE.DATETIME: TypeMapping('DATETIME', 'text'),
    FIELD_TYPE.YEAR: TypeMapping('YEAR', 'text'),
    FIELD_TYPE.NEWDATE: TypeMapping('NEWDATE', 'text'),
    FIELD_TYPE.VARCHAR: TypeMapping('VARCHAR', 'text'),
    FIELD_TYPE.BIT: TypeMapping('BIT', 'uint8'),
    FIELD_TYPE.JSON: TypeMapping('JSON', 'text'),
    FIELD_TYPE.ENUM: TypeMapping('ENUM', 'text'),
    FIELD_TYPE.SET: TypeMapping('SET', 'text'),
    FIELD_TYPE.TINY_BLOB: TypeMapping('TINYBLOB', 'text'),
    FIELD_TYPE.MEDIUM_BLOB: TypeMapping('MEDIUMBLOB', 'text'),
    FIELD_TYPE.LONG_BLOB: TypeMapping('LONGBLOB', 'text'),
    FIELD_TYPE.BLOB: TypeMapping('BLOB', 'text'),
    FIELD_TYPE.VAR_STRING: TypeMapping('STRING', 'text'),
    FIELD_TYPE.STRING: TypeMapping('STRING', 'text'),
    FIELD_TYPE.GEOMETRY: TypeMapping('GEOMETRY', 'text'),
    }

# builtin OIDs, fixed across server versions
postgres_types: dict[int, TypeMapping] = {
    16: TypeMapping('BOOLEAN', 'uint8'),
    17: TypeMapping('BYTEA', 'text'),
    18: TypeMapping('CHAR', 'text'),
    19: TypeMapping('NAME', 'text'),
    20: TypeMapping('BIGINT', 'int64'),
    21: TypeMapping('SMALLINT', 'int16'),
    23: TypeMapping('INTEGER', 'int32'),
    25: TypeMapping('TEXT', 'text'),
    114: TypeMapping('JSON', 'text'),
    142: TypeMapping('XML', 'text'),
    700: TypeMapping('REAL', 'float'),
    701: TypeMapping('DOUBLE PRECISION', 'double'),
    1042: TypeMapping('BPCHAR', 'text'),
    1043: TypeMapping('VARCHAR', 'text'),
    1082: TypeMapping('DATE', 'text'),
    1083: TypeMapping('TIME', 'text'),
    1114: TypeMapping('TIMESTAMP', 'text'),
    1184: TypeMapping('TIMESTAMPTZ', 'text'),
    1186: TypeMapping('INTERVAL', 'text'),
    1266: TypeMapping('TIMETZ', 'text'),
    1560: TypeMapping('BIT', 'uint8'),
    1562: TypeMapping('VARBIT', 'uint8'),
    1700: TypeMapping('NUMERIC', 'double'),
    2278: TypeMapping('VOID', 'void'),
    2950: TypeMapping('UUID', 'text'),
    3802: TypeMapping('JSONB', 'text'),
    }


def _lookup(table: dict[int, TypeMapping], type_code: Any) -> TypeMapping:
    try:
        return table[type_code]
    except (KeyError, TypeError):
        logger.debug(f'No mapping for type code {type_code!r}, using {UNKNOWN.native}')
        return UNKNOWN


def map_mysql_type(type_code: Any) -> TypeMapping:
    """Map a MySQL ``FIELD_TYPE`` code to its type pair.
    """
    return _lookup(mysql_types, type_code)


def map_postgres_type(type_code: Any) -> TypeMapping:
    """Map a PostgreSQL type OID to its type pair.
    """
    return _lookup(postgres_types, type_code)


def map_sqlite_type(type_code: Any) -> TypeMapping:
    """SQLite cursors carry no type codes, every column is UNKNOWN.
    """
    return UNKNOWN


TypeMapper = Callable[[Any], TypeMapping]
