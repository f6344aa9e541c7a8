"""
End-to-end reports against a file-based SQLite database.
"""
import pytest
from sqlpeek.lifecycle import owned
from sqlpeek.options import PresetOptions
from sqlpeek.query import fetch_result, run_report


@pytest.fixture
def local_options(sqlite_db):
    return PresetOptions(name='local', drivername='sqlite', database=str(sqlite_db))


def test_fetch_result(local_options):
    with owned(fetch_result(local_options, 'SELECT id, name FROM people ORDER BY id')) as result:
        assert result.row_count == 2
        assert result.col_count == 2
        assert result.headers == ('id', 'name')
        assert result.cells == ('1', 'Alice', '2', 'NULL')
        assert result.native_types == ('UNKNOWN', 'UNKNOWN')
        assert result.portable_types == ('any', 'any')
    assert result.released


def test_run_report(preset_file):
    output = run_report('local', 'SELECT id, name FROM people ORDER BY id', preset_file)
    lines = output.splitlines()

    assert lines[:3] == ['+------+--------+', '| id   | name   |', '+======+========+']
    assert '| 1    | A...   |' in lines
    assert '| 2    | NULL   |' in lines
    assert 'Total number of rows: 2' in lines
    assert lines[-3:] == [
        'Column names and data types:',
        'id (UNKNOWN => any)',
        'name (UNKNOWN => any)',
    ]


def test_long_result_is_collapsed(preset_file):
    output = run_report('local', 'SELECT n, label FROM numbers ORDER BY n', preset_file)
    lines = output.splitlines()

    assert 'Total number of rows: 25' in lines
    assert '| ... | ...     |' in lines
    # width 6 leaves five characters per cell
    assert '| 0   | nu...   |' in lines
    assert '| 24  | nu...   |' in lines
    assert not any(line.startswith('| 5 ') for line in lines)
    assert not any(line.startswith('| 19 ') for line in lines)


def test_wide_result_shows_marker(preset_file):
    columns = ', '.join(f'{i} AS col_{i}' for i in range(10))
    output = run_report('local', f'SELECT {columns}', preset_file)

    assert '<<+3 cols>>' in output
    assert 'col_3 (UNKNOWN => any)' in output
    assert 'col_2' in output.splitlines()[1]
    assert 'col_3' not in output.splitlines()[1]


def test_empty_result(preset_file):
    output = run_report('local', 'SELECT id, name FROM people WHERE id > 100', preset_file)
    assert 'Total number of rows: 0' in output
    assert 'name (UNKNOWN => any)' in output


def test_statement_without_result(preset_file):
    output = run_report('local', "UPDATE people SET name = 'Bob' WHERE id = 2", preset_file)
    assert 'Total number of rows: 0' in output
    assert output.rstrip().endswith('Column names and data types:')

    output = run_report('local', 'SELECT name FROM people WHERE id = 2', preset_file)
    assert '| Bob    |' in output.splitlines()


if __name__ == '__main__':
    __import__('pytest').main([__file__])
