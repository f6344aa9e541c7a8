"""
Bounded rendering of a result set.

Whatever the size of the result, the display grid holds at most eight
columns (three leading, one marker for the hidden ones, four trailing) and
eleven data rows (five leading, one ellipsis row, five trailing). Every
displayed cell is cut to one shared width sized by the widest displayed
header.

The summary artifacts always describe the full result: total row count,
estimated in-memory footprint and the type legend of every column.
"""
import logging
import struct
from dataclasses import dataclass, field
from typing import NamedTuple

from sqlpeek.resultset import ResultSet

logger = logging.getLogger(__name__)

__all__ = [
    'ELLIPSIS',
    'LegendEntry',
    'Report',
    'select_columns',
    'hidden_column_count',
    'marker_label',
    'select_rows',
    'column_width',
    'truncate_cell',
    'estimate_footprint',
    'build_legend',
    'render',
    ]

HEAD_COLUMNS = 3
TAIL_COLUMNS = 4
TAIL_THRESHOLD = 4
MARKER_THRESHOLD = HEAD_COLUMNS + TAIL_COLUMNS
ROW_THRESHOLD = 10
EDGE_ROWS = 5

ELLIPSIS = '...'

POINTER_SIZE = struct.calcsize('P')
# four array references and the two counts
RECORD_OVERHEAD = 4 * POINTER_SIZE + 2 * struct.calcsize('i')
GIB = 1024 ** 3


class LegendEntry(NamedTuple):
    header: str
    native: str
    portable: str


@dataclass
class Report:
    """Display grid plus summary of one result set.

    ``grid[0]`` is the header row.
    """
    grid: list[list[str]]
    row_count: int
    size_bytes: int
    legend: list[LegendEntry] = field(default_factory=list)

    @property
    def size_gb(self) -> float:
        return self.size_bytes / GIB

    @property
    def header(self) -> list[str]:
        return self.grid[0]

    @property
    def body(self) -> list[list[str]]:
        return self.grid[1:]


def hidden_column_count(col_count: int) -> int:
    """Columns shown neither in the head nor in the tail."""
    return max(col_count - MARKER_THRESHOLD, 0)


def marker_label(col_count: int) -> str:
    return f'<<+{hidden_column_count(col_count)} cols>>'


def select_columns(col_count: int) -> list[int | None]:
    """Return displayed column indexes in order, ``None`` marking the marker column.

    The tail starts at ``col_count - 4`` whenever there are more than four
    columns, so for five or six columns it repeats some head columns, and
    with exactly four columns the last one is not shown.
    """
    selected: list[int | None] = list(range(min(HEAD_COLUMNS, col_count)))
    if col_count > MARKER_THRESHOLD:
        selected.append(None)
    if col_count > TAIL_THRESHOLD:
        selected.extend(range(col_count - TAIL_COLUMNS, col_count))
    return selected


def select_rows(row_count: int) -> list[int | None]:
    """Return displayed row indexes in order, ``None`` marking the ellipsis row.
    """
    if row_count <= ROW_THRESHOLD:
        return list(range(row_count))
    return [*range(EDGE_ROWS), None, *range(row_count - EDGE_ROWS, row_count)]


def column_width(headers: tuple[str, ...] | list[str], columns: list[int | None]) -> int:
    """Shared width of all displayed columns.

    One more than the longest displayed header, counting at least one
    character. The marker column does not take part.
    """
    longest = max((len(headers[j]) for j in columns if j is not None), default=0)
    return max(longest, 1) + 1


def truncate_cell(text: str, width: int) -> str:
    """Fit ``text`` into ``width - 1`` characters.

    Longer text keeps its first ``width - 4`` characters followed by
    ``...``. Below three characters of budget the ellipsis itself is cut.
    """
    budget = width - 1
    if len(text) <= budget:
        return text
    if budget < len(ELLIPSIS):
        return ELLIPSIS[:max(budget, 0)]
    return text[:budget - len(ELLIPSIS)] + ELLIPSIS


def _text_bytes(values) -> int:
    return sum(len(value.encode('utf-8')) + 1 for value in values)


def estimate_footprint(result: ResultSet) -> int:
    """Estimated bytes held by ``result``.

    Record overhead, one pointer per cell, three pointers per column, and the
    encoded length plus a terminator of every stored string.
    """
    size = RECORD_OVERHEAD
    size += result.row_count * result.col_count * POINTER_SIZE
    size += result.col_count * POINTER_SIZE * 3
    size += _text_bytes(result.cells)
    size += _text_bytes(result.headers)
    size += _text_bytes(result.native_types)
    size += _text_bytes(result.portable_types)
    return size


def build_legend(result: ResultSet) -> list[LegendEntry]:
    return [LegendEntry(*entry) for entry in
            zip(result.headers, result.native_types, result.portable_types)]


def render(result: ResultSet) -> Report:
    """Build the bounded report for ``result``.
    """
    columns = select_columns(result.col_count)
    rows = select_rows(result.row_count)
    width = column_width(result.headers, columns)
    marker = marker_label(result.col_count)

    grid = [[marker if j is None else result.headers[j] for j in columns]]
    for i in rows:
        if i is None:
            grid.append([ELLIPSIS] * len(columns))
            continue
        grid.append([ELLIPSIS if j is None else truncate_cell(result.cell(i, j), width)
                     for j in columns])

    logger.debug(f'Rendering {len(rows)} of {result.row_count} rows and '
                 f'{len(columns)} of {result.col_count} columns at width {width}')
    return Report(
        grid=grid,
        row_count=result.row_count,
        size_bytes=estimate_footprint(result),
        legend=build_legend(result),
    )
