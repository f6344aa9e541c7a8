"""
Error taxonomy for sqlpeek.

Every error is fatal at the command line boundary. Driver exceptions are
grouped by kind so they can be caught once and re-raised as one of the
classes below.
"""
import sqlite3

import psycopg
import pymysql


class ReportError(Exception):
    """Base class for all sqlpeek errors.
    """


class ConfigIOError(ReportError):
    """Preset configuration file could not be read.
    """


class ConfigParseError(ReportError):
    """Preset configuration file is malformed.
    """


class PresetNotFoundError(ReportError):
    """Named preset is absent from the configuration.
    """


class ConnectionError(ReportError):
    """Error establishing the database connection.
    """


class QueryError(ReportError):
    """Error in query syntax or execution.
    """


class ResultMaterializationError(ReportError):
    """Result set construction failed and was rolled back.

    ``row`` and ``column`` locate the failure (``row`` is None while column
    metadata was being copied), ``freed`` counts the values the rollback
    released.
    """

    def __init__(self, message: str, row: int | None = None,
                 column: int | None = None, freed: int = 0) -> None:
        super().__init__(message)
        self.row = row
        self.column = column
        self.freed = freed


class ReleaseError(ReportError):
    """Result set was released more than once.
    """


# sqlite3 raises OperationalError for failed queries as well, so only its
# InterfaceError counts here. SQLAlchemy wraps a failed SQLite open in
# sa.exc.OperationalError, which connect() catches separately.
DbConnectionError = (
    pymysql.err.OperationalError,
    pymysql.err.InterfaceError,
    psycopg.OperationalError,
    psycopg.InterfaceError,
    sqlite3.InterfaceError,
    )

DbQueryError = (
    pymysql.err.Error,
    psycopg.Error,
    sqlite3.Error,
    )
