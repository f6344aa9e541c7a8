"""
Tests for result set teardown.
"""
import pytest
from sqlpeek.exceptions import ReleaseError
from sqlpeek.lifecycle import owned, release
from sqlpeek.resultset import ResultSet, build_result_set


def test_release_complete_result(wide_cursor):
    result = build_result_set(wide_cursor(3, 4))

    freed = release(result)

    assert freed == 3 * 4 + 3 * 4
    assert result.released
    assert result.cells is None
    assert result.headers is None
    assert result.native_types is None
    assert result.portable_types is None


def test_release_twice_is_rejected(scenario_cursor):
    result = build_result_set(scenario_cursor)
    release(result)

    with pytest.raises(ReleaseError):
        release(result)


def test_release_empty_shell():
    shell = ResultSet(5, 3)
    assert release(shell) == 0
    assert shell.released


def test_release_partial_shell_frees_only_present_values():
    shell = ResultSet(2, 2)
    shell._headers = ['id', 'name']
    shell._native_types = ['INT', None]
    shell._cells = [None] * 4

    assert release(shell) == 3
    assert shell.headers is None
    assert shell.native_types is None


def test_release_partial_cells():
    shell = ResultSet(2, 2)
    shell._headers = ['a', 'b']
    shell._native_types = ['X', 'X']
    shell._portable_types = ['x', 'x']
    shell._cells = ['1', '2', '3', None]

    assert release(shell) == 9


def test_owned_releases_on_exit(scenario_cursor):
    with owned(build_result_set(scenario_cursor)) as result:
        assert not result.released
    assert result.released


def test_owned_releases_on_error(scenario_cursor):
    result = build_result_set(scenario_cursor)
    with pytest.raises(RuntimeError), owned(result):
        raise RuntimeError('boom')
    assert result.released


def test_owned_tolerates_early_release(scenario_cursor):
    with owned(build_result_set(scenario_cursor)) as result:
        release(result)
    assert result.released


if __name__ == '__main__':
    __import__('pytest').main([__file__])
