"""
Materialized query results.

A `ResultSet` is built once from a fully drained cursor and never changes
afterwards. Construction is staged: column metadata first, then the row-major
cell grid. If any step fails, everything copied so far is handed to
`sqlpeek.lifecycle.release` before `ResultMaterializationError` is raised, so
callers see either a complete result or none at all.
"""
import logging
from collections.abc import Iterator
from typing import Any

from sqlpeek.exceptions import ResultMaterializationError
from sqlpeek.lifecycle import release
from sqlpeek.strategy import get_strategy
from sqlpeek.types import TypeMapper

logger = logging.getLogger(__name__)

__all__ = [
    'NULL',
    'ResultSet',
    'ResultSetBuilder',
    'build_result_set',
    'copy_text',
    ]

NULL = 'NULL'


def copy_text(value: Any) -> str:
    """Text form of one driver value; ``None`` becomes the ``NULL`` sentinel.
    """
    if value is None:
        return NULL
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode('utf-8', errors='replace')
    return str(value)


class ResultSet:
    """Rectangular query result with every value held as text.

    Cells are stored row-major: the value at row ``i``, column ``j`` is
    ``cells[i * col_count + j]``. Header and type sequences are parallel and
    each has ``col_count`` entries. Once released, all storage is ``None``.
    """

    __slots__ = ('_row_count', '_col_count', '_headers', '_native_types',
                 '_portable_types', '_cells', '_released')

    def __init__(self, row_count: int = 0, col_count: int = 0) -> None:
        self._row_count = row_count
        self._col_count = col_count
        self._headers: list[str | None] | tuple[str, ...] | None = None
        self._native_types: list[str | None] | tuple[str, ...] | None = None
        self._portable_types: list[str | None] | tuple[str, ...] | None = None
        self._cells: list[str | None] | tuple[str, ...] | None = None
        self._released = False

    def __repr__(self) -> str:
        state = ' released' if self._released else ''
        return f'<ResultSet {self._row_count}x{self._col_count}{state}>'

    def __len__(self) -> int:
        return self._row_count

    @property
    def row_count(self) -> int:
        return self._row_count

    @property
    def col_count(self) -> int:
        return self._col_count

    @property
    def headers(self) -> tuple[str, ...] | None:
        return self._headers

    @property
    def native_types(self) -> tuple[str, ...] | None:
        return self._native_types

    @property
    def portable_types(self) -> tuple[str, ...] | None:
        return self._portable_types

    @property
    def cells(self) -> tuple[str, ...] | None:
        return self._cells

    @property
    def released(self) -> bool:
        return self._released

    def cell(self, row: int, col: int) -> str:
        return self._cells[row * self._col_count + col]

    def row(self, index: int) -> tuple[str, ...]:
        """Return the ``col_count`` cells of row ``index``.
        """
        if not 0 <= index < self._row_count:
            raise IndexError(f'row index {index} out of range for {self._row_count} rows')
        start = index * self._col_count
        return self._cells[start:start + self._col_count]

    def rows(self) -> Iterator[tuple[str, ...]]:
        for i in range(self._row_count):
            yield self.row(i)

    def _seal(self) -> None:
        self._headers = tuple(self._headers)
        self._native_types = tuple(self._native_types)
        self._portable_types = tuple(self._portable_types)
        self._cells = tuple(self._cells)


class ResultSetBuilder:
    """Builds a `ResultSet` from a cursor, rolling back on failure.
    """

    def __init__(self, type_mapper: TypeMapper) -> None:
        self.type_mapper = type_mapper

    def build(self, cursor: Any) -> ResultSet:
        """Drain ``cursor`` and return the complete result.

        The cursor must expose ``columns`` (objects with ``name`` and
        ``type_code``), ``fetchall()`` and ``rowcount``, the latter exact
        once the rows have been drained.

        Raises
            ResultMaterializationError: Copying failed; nothing was retained
        """
        columns = cursor.columns
        rows = cursor.fetchall()

        result = ResultSet(cursor.rowcount, len(columns))
        width = result.col_count
        i = j = None
        try:
            result._headers = [None] * width
            result._native_types = [None] * width
            result._portable_types = [None] * width
            for j, column in enumerate(columns):
                mapping = self.type_mapper(column.type_code)
                result._headers[j] = copy_text(column.name)
                result._native_types[j] = copy_text(mapping.native)
                result._portable_types[j] = copy_text(mapping.portable)

            j = None
            if len(rows) != result.row_count:
                raise ValueError(f'cursor reported {result.row_count} rows, fetched {len(rows)}')
            result._cells = [None] * (result.row_count * width)
            for i, row in enumerate(rows):
                j = None
                if len(row) != width:
                    raise ValueError(f'row has {len(row)} values, expected {width}')
                for j, value in enumerate(row):
                    result._cells[i * width + j] = copy_text(value)
        except Exception as e:
            freed = release(result)
            logger.warning(f'Result materialization failed (row={i}, column={j}), '
                           f'released {freed} values')
            raise ResultMaterializationError(
                f'Could not materialize result: {e}', row=i, column=j, freed=freed) from e

        result._seal()
        logger.debug(f'Materialized result of {result.row_count} rows x {result.col_count} columns')
        return result


def build_result_set(cursor: Any, type_mapper: TypeMapper | None = None) -> ResultSet:
    """Materialize the cursor's result, mapping types with its dialect's mapper.
    """
    if type_mapper is None:
        type_mapper = get_strategy(cursor.dialect).map_type
    return ResultSetBuilder(type_mapper).build(cursor)
