"""
Database connection handling with SQLAlchemy.

This module provides:
1. The `connect()` function for opening the single connection a report needs
2. The `ConnectionWrapper` class that wraps the SQLAlchemy connection and
   hands out `Cursor` objects over the raw DBAPI connection
3. Engine creation from `PresetOptions` through the dialect strategies

Engines use `NullPool`: one connection is opened, used for one query and
closed again.
"""
import logging
from collections.abc import Callable
from typing import Any, Self

import sqlalchemy as sa
from sqlalchemy.engine import Engine
from sqlalchemy.pool import NullPool
from sqlpeek.cursor import Cursor
from sqlpeek.exceptions import ConnectionError, DbConnectionError
from sqlpeek.options import PresetOptions
from sqlpeek.strategy import get_strategy

__all__ = [
    'ConnectionWrapper',
    'connect',
    'create_url_from_options',
    'create_engine_for_options',
    ]

logger = logging.getLogger(__name__)


def create_url_from_options(options: PresetOptions) -> sa.URL:
    """Convert PresetOptions to SQLAlchemy URL.
    """
    return get_strategy(options.drivername).build_connection_url(options)


def create_engine_for_options(options: PresetOptions,
                              engine_factory: Callable[..., Engine] = sa.create_engine,
                              **kwargs: Any) -> Engine:
    """Create a non-pooling SQLAlchemy engine for the given options.
    """
    strategy = get_strategy(options.drivername)
    url = create_url_from_options(options)

    engine_kwargs: dict[str, Any] = {'echo': False, 'poolclass': NullPool}
    engine_kwargs.update(strategy.get_engine_kwargs(options))
    engine_kwargs.update(kwargs)

    engine = engine_factory(url, **engine_kwargs)
    logger.debug(f'Created new engine for {options.drivername}')
    return engine


class ConnectionWrapper:
    """Wraps a SQLAlchemy connection object to track calls and execution time

    Supports the context manager protocol; leaving the block closes the
    connection and disposes of its engine.
    """

    def __init__(self, sa_connection: sa.engine.Connection | None = None,
                 options: PresetOptions | None = None) -> None:
        self.sa_connection = sa_connection
        self.engine = sa_connection.engine if sa_connection else None
        self.options = options
        self.dbapi_connection = sa_connection.connection if sa_connection else None
        self._dialect = options.drivername if options else None
        self.calls = 0
        self.time = 0

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type: type | None, exc_val: Exception | None,
                 exc_tb: Any | None) -> None:
        self.close()
        logger.debug('Closed connection via context manager')

    @property
    def dialect(self) -> str:
        """Return the dialect name ('mysql', 'postgresql' or 'sqlite')."""
        return self._dialect

    @property
    def closed(self) -> bool:
        return self.sa_connection is None or self.sa_connection.closed

    def addcall(self, elapsed: float) -> None:
        """Track execution statistics
        """
        self.time += elapsed
        self.calls += 1

    def cursor(self) -> Cursor:
        """Get a wrapped cursor over the raw DBAPI connection
        """
        return Cursor(self.dbapi_connection.cursor(), self)

    def execute(self, sql: str, *args: Any) -> Cursor:
        """Execute ``sql`` and return the cursor positioned on its result.
        """
        cursor = self.cursor()
        try:
            cursor.execute(sql, *args)
        except Exception:
            cursor.close()
            raise
        return cursor

    def close(self) -> None:
        """Close the SQLAlchemy connection and dispose of the engine
        """
        if not self.closed:
            self.sa_connection.close()
            logger.debug(f'Connection closed: {self.calls} queries in {self.time:.2f}s')
        if self.engine is not None:
            self.engine.dispose()


def connect(options: PresetOptions,
            engine_factory: Callable[..., Engine] = sa.create_engine) -> ConnectionWrapper:
    """Connect to the database described by ``options``.

    The connection autocommits, so data changing statements persist once
    they have executed.

    Raises
        ConnectionError: The driver is missing or the server refused the connection
    """
    try:
        engine = create_engine_for_options(options, engine_factory=engine_factory)
        sa_connection = engine.connect().execution_options(isolation_level='AUTOCOMMIT')
    except (sa.exc.DBAPIError, sa.exc.ArgumentError, ImportError) + DbConnectionError as e:
        logger.error(f'Connection to {options.drivername} database {options.database!r} failed')
        raise ConnectionError(f'Connection failed: {e}') from e

    logger.debug(f'Connected to {options.drivername} database {options.database!r}')
    return ConnectionWrapper(sa_connection, options)
