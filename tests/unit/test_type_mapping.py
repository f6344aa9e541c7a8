"""
Tests for native to portable type mapping.
"""
import pytest
from pymysql.constants import FIELD_TYPE
from sqlpeek.types import UNKNOWN, TypeMapping, map_mysql_type
from sqlpeek.types import map_postgres_type, map_sqlite_type, mysql_types

MYSQL_FIELD_TYPES = [
    'DECIMAL', 'TINY', 'SHORT', 'LONG', 'FLOAT', 'DOUBLE', 'NULL', 'TIMESTAMP',
    'LONGLONG', 'INT24', 'DATE', 'TIME', 'DATETIME', 'YEAR', 'NEWDATE',
    'VARCHAR', 'BIT', 'JSON', 'NEWDECIMAL', 'ENUM', 'SET', 'TINY_BLOB',
    'MEDIUM_BLOB', 'LONG_BLOB', 'BLOB', 'VAR_STRING', 'STRING', 'GEOMETRY',
    'CHAR', 'INTERVAL',
]


@pytest.mark.parametrize('name', MYSQL_FIELD_TYPES)
def test_every_mysql_field_type_is_mapped(name):
    """Every known FIELD_TYPE tag has an explicit, non-empty mapping"""
    mapping = map_mysql_type(getattr(FIELD_TYPE, name))
    assert mapping != UNKNOWN
    assert mapping.native
    assert mapping.portable


@pytest.mark.parametrize(('tag', 'expected'), [
    (FIELD_TYPE.DECIMAL, ('DECIMAL', 'double')),
    (FIELD_TYPE.NEWDECIMAL, ('DECIMAL', 'double')),
    (FIELD_TYPE.TINY, ('TINYINT', 'int8')),
    (FIELD_TYPE.SHORT, ('SMALLINT', 'int16')),
    (FIELD_TYPE.LONG, ('INT', 'int32')),
    (FIELD_TYPE.INT24, ('MEDIUMINT', 'int32')),
    (FIELD_TYPE.LONGLONG, ('BIGINT', 'int64')),
    (FIELD_TYPE.FLOAT, ('FLOAT', 'float')),
    (FIELD_TYPE.DOUBLE, ('DOUBLE', 'double')),
    (FIELD_TYPE.BIT, ('BIT', 'uint8')),
    (FIELD_TYPE.NULL, ('NULL', 'void')),
    (FIELD_TYPE.DATETIME, ('DATETIME', 'text')),
    (FIELD_TYPE.YEAR, ('YEAR', 'text')),
    (FIELD_TYPE.JSON, ('JSON', 'text')),
    (FIELD_TYPE.VAR_STRING, ('STRING', 'text')),
    (FIELD_TYPE.STRING, ('STRING', 'text')),
    (FIELD_TYPE.GEOMETRY, ('GEOMETRY', 'text')),
])
def test_mysql_mapping_table(tag, expected):
    assert map_mysql_type(tag) == expected


@pytest.mark.parametrize('tag', [9999, -1, None, 'VARCHAR', [], 3.5])
def test_unknown_tags_map_to_unknown(tag):
    """Unrecognized, absent and unhashable tags still yield a pair"""
    assert map_mysql_type(tag) == UNKNOWN
    assert map_postgres_type(tag) == UNKNOWN
    assert UNKNOWN == ('UNKNOWN', 'any')


def test_mapping_values_are_portable_categories():
    portable = {m.portable for m in mysql_types.values()}
    assert portable <= {'double', 'int8', 'int16', 'int32', 'int64', 'float',
                        'uint8', 'text', 'void'}


@pytest.mark.parametrize(('oid', 'expected'), [
    (16, ('BOOLEAN', 'uint8')),
    (21, ('SMALLINT', 'int16')),
    (23, ('INTEGER', 'int32')),
    (20, ('BIGINT', 'int64')),
    (700, ('REAL', 'float')),
    (701, ('DOUBLE PRECISION', 'double')),
    (1700, ('NUMERIC', 'double')),
    (1043, ('VARCHAR', 'text')),
    (1114, ('TIMESTAMP', 'text')),
    (3802, ('JSONB', 'text')),
    (2278, ('VOID', 'void')),
])
def test_postgres_mapping_table(oid, expected):
    assert map_postgres_type(oid) == expected


def test_sqlite_has_no_type_tags():
    assert map_sqlite_type(None) == UNKNOWN
    assert map_sqlite_type(FIELD_TYPE.LONG) == UNKNOWN


def test_type_mapping_is_a_named_pair():
    mapping = TypeMapping('INT', 'int32')
    native, portable = mapping
    assert (native, portable) == (mapping.native, mapping.portable)


if __name__ == '__main__':
    __import__('pytest').main([__file__])
