"""
Single teardown path for result sets.

`release` works on complete results as well as on the partially filled shells
left behind by a failed build, where any field may still be absent.
"""
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from sqlpeek.exceptions import ReleaseError

if TYPE_CHECKING:
    from sqlpeek.resultset import ResultSet

logger = logging.getLogger(__name__)

__all__ = ['release', 'owned']


def _free(values) -> int:
    """Drop every present value of ``values`` and return how many there were."""
    if values is None:
        return 0
    freed = sum(1 for value in values if value is not None)
    if isinstance(values, list):
        values.clear()
    return freed


def release(result: 'ResultSet') -> int:
    """Free all storage owned by ``result``.

    Cells go first, then headers and type names, then the arrays and finally
    the record is marked released. Returns the number of values freed.

    Raises
        ReleaseError: ``result`` was already released
    """
    if result.released:
        raise ReleaseError(f'{result!r} was already released')

    freed = _free(result._cells)
    for values in (result._headers, result._native_types, result._portable_types):
        freed += _free(values)

    result._cells = None
    result._headers = None
    result._native_types = None
    result._portable_types = None
    result._released = True

    logger.debug(f'Released {freed} values of {result!r}')
    return freed


@contextmanager
def owned(result: 'ResultSet') -> Iterator['ResultSet']:
    """Yield ``result`` and release it when the block exits.
    """
    try:
        yield result
    finally:
        if not result.released:
            release(result)
