"""
Cursor wrapper exposing what the result set builder consumes: column
metadata, the row count and the rows themselves.

Implements the read side of Python DB-API 2.0 (PEP-249).
"""
import logging
import time
from functools import wraps
from typing import Any

from sqlpeek.exceptions import DbQueryError, QueryError

logger = logging.getLogger(__name__)


def dumpsql(func):
    """Decorator for logging SQL queries and timing."""
    @wraps(func)
    def wrapper(self, operation: str, *args: Any, **kwargs: Any):
        start = time.time()
        logger.debug(f'SQL:\n{operation}\nargs: {args}')
        try:
            return func(self, operation, *args, **kwargs)
        except Exception:
            logger.error(f'Error with query:\nSQL:\n{operation}\nargs: {args}')
            raise
        finally:
            elapsed = time.time() - start
            self.connwrapper.addcall(elapsed)
            logger.debug(f'Query time: {elapsed:.4f}s')
    return wrapper


class Column:
    """Name and native type tag of one result column.
    """

    __slots__ = ('name', 'type_code')

    def __init__(self, name: str, type_code: Any = None) -> None:
        self.name = name
        self.type_code = type_code

    def __repr__(self) -> str:
        return f'Column(name={self.name!r}, type_code={self.type_code!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Column):
            return NotImplemented
        return (self.name, self.type_code) == (other.name, other.type_code)

    @classmethod
    def from_cursor_description(cls, description_item: Any) -> 'Column':
        """Create a Column from one ``cursor.description`` item.

        psycopg items expose ``name``/``type_code`` attributes, PyMySQL and
        sqlite3 items are plain 7-tuples.
        """
        if hasattr(description_item, 'name'):
            return cls(str(description_item.name), getattr(description_item, 'type_code', None))
        return cls(str(description_item[0]), description_item[1])


class Cursor:
    """Cursor wrapper bound to its connection wrapper.

    Driver errors raised while executing or fetching surface as ``QueryError``.
    """

    def __init__(self, cursor: Any, connection_wrapper: Any) -> None:
        self.dbapi_cursor = cursor
        self.connwrapper = connection_wrapper
        self._rows: list[tuple] | None = None

    def __enter__(self) -> 'Cursor':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @property
    def dialect(self) -> str:
        return self.connwrapper.dialect

    @property
    def description(self) -> list[tuple] | None:
        """Column descriptions for last query."""
        return self.dbapi_cursor.description

    @property
    def columns(self) -> list[Column]:
        """Columns of the current result, empty when the statement returned none."""
        if self.description is None:
            return []
        return [Column.from_cursor_description(item) for item in self.description]

    @property
    def rowcount(self) -> int:
        """Number of rows in the result.

        sqlite3 reports -1 for SELECT, so the count comes from the fetched
        rows once they have been drained.
        """
        if self._rows is not None:
            return len(self._rows)
        return self.dbapi_cursor.rowcount

    @dumpsql
    def execute(self, operation: str, *args: Any) -> int:
        """Execute a database operation."""
        try:
            if args:
                self.dbapi_cursor.execute(operation, args)
            else:
                self.dbapi_cursor.execute(operation)
        except DbQueryError as e:
            raise QueryError(f'Query failed: {e}') from e
        self._rows = None
        return self.dbapi_cursor.rowcount

    def fetchall(self) -> list[tuple]:
        """Drain the cursor. Subsequent calls return the same rows."""
        if self._rows is None:
            if self.description is None:
                self._rows = []
            else:
                try:
                    self._rows = list(self.dbapi_cursor.fetchall())
                except DbQueryError as e:
                    raise QueryError(f'Fetching rows failed: {e}') from e
            logger.debug(f'Fetched {len(self._rows)} rows')
        return self._rows

    def close(self) -> None:
        """Close cursor."""
        self.dbapi_cursor.close()
