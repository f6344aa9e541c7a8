"""
Text layout of a rendered report.
"""
from tabulate import tabulate

from sqlpeek.render import Report

__all__ = ['format_table', 'format_summary', 'format_report']

TABLE_FORMAT = 'grid'


def format_table(report: Report, tablefmt: str = TABLE_FORMAT) -> str:
    """Lay out the display grid, header row first, all text left aligned.

    A result without columns has no table.
    """
    if not report.header:
        return ''
    return tabulate(report.body, headers=report.header, tablefmt=tablefmt,
                    stralign='left', disable_numparse=True)


def format_summary(report: Report) -> str:
    lines = [
        f'Total number of rows: {report.row_count}',
        f'Size in memory: {report.size_gb:.7f} GB',
        '',
        'Column names and data types:',
        ]
    lines.extend(f'{e.header} ({e.native} => {e.portable})' for e in report.legend)
    return '\n'.join(lines)


def format_report(report: Report, tablefmt: str = TABLE_FORMAT) -> str:
    """Table followed by the row count, footprint and column legend.
    """
    return f'{format_table(report, tablefmt)}\n{format_summary(report)}\n'
