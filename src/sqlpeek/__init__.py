"""
Run one ad-hoc query against a named connection preset and render the
result as a bounded, human-readable report.

Supported dialects: MySQL (default), PostgreSQL and SQLite.
"""
__version__ = '0.1.0'

from sqlpeek.config import get_preset, load_presets
from sqlpeek.connection import ConnectionWrapper, connect
from sqlpeek.exceptions import ConfigIOError, ConfigParseError, ConnectionError
from sqlpeek.exceptions import PresetNotFoundError, QueryError, ReleaseError
from sqlpeek.exceptions import ReportError, ResultMaterializationError
from sqlpeek.lifecycle import owned, release
from sqlpeek.options import PresetOptions
from sqlpeek.query import fetch_result, run_report
from sqlpeek.render import LegendEntry, Report, render
from sqlpeek.report import format_report
from sqlpeek.resultset import NULL, ResultSet, ResultSetBuilder
from sqlpeek.resultset import build_result_set
from sqlpeek.types import UNKNOWN, TypeMapping

__all__ = [
    'connect',
    'ConnectionWrapper',
    'PresetOptions',
    'get_preset',
    'load_presets',
    'fetch_result',
    'run_report',
    'NULL',
    'ResultSet',
    'ResultSetBuilder',
    'build_result_set',
    'release',
    'owned',
    'render',
    'Report',
    'LegendEntry',
    'format_report',
    'TypeMapping',
    'UNKNOWN',
    'ReportError',
    'ConfigIOError',
    'ConfigParseError',
    'PresetNotFoundError',
    'ConnectionError',
    'QueryError',
    'ResultMaterializationError',
    'ReleaseError',
]
