"""
End-to-end execution of one ad-hoc query.
"""
import logging
import os

from sqlpeek.config import get_preset
from sqlpeek.connection import connect
from sqlpeek.lifecycle import owned
from sqlpeek.options import PresetOptions
from sqlpeek.render import render
from sqlpeek.report import format_report
from sqlpeek.resultset import ResultSet, build_result_set

logger = logging.getLogger(__name__)

__all__ = ['fetch_result', 'run_report']


def fetch_result(options: PresetOptions, sql: str) -> ResultSet:
    """Run ``sql`` on a fresh connection and materialize its result.

    The connection is closed before the result is returned.
    """
    with connect(options) as cn, cn.execute(sql) as cursor:
        return build_result_set(cursor)


def run_report(preset_name: str, sql: str,
               config_path: str | os.PathLike | None = None) -> str:
    """Resolve ``preset_name``, run ``sql`` and return the formatted report.
    """
    options = get_preset(preset_name, config_path)
    with owned(fetch_result(options, sql)) as result:
        logger.info(f'Query on preset {preset_name} returned {result.row_count} rows')
        return format_report(render(result))
