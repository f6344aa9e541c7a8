"""
Tests for the command line entry point.
"""
import pytest
from sqlpeek import __version__
from sqlpeek.cli import EXIT_FAILURE, EXIT_SUCCESS, main, parse_args
from sqlpeek.config import CONFIG_ENV_VAR


def test_parse_args():
    args = parse_args(['prod', 'SELECT 1', '-c', 'presets.json', '-v'])
    assert args.preset_name == 'prod'
    assert args.query == 'SELECT 1'
    assert args.config == 'presets.json'
    assert args.verbose


def test_missing_arguments_exit_with_usage(capsys):
    with pytest.raises(SystemExit) as exc:
        main(['prod'])
    assert exc.value.code == 2
    assert 'usage: sqlpeek' in capsys.readouterr().err


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(['--version'])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_report_printed(capsys, preset_file):
    code = main(['local', 'SELECT id, name FROM people ORDER BY id', '-c', str(preset_file)])
    out = capsys.readouterr().out

    assert code == EXIT_SUCCESS
    assert '| id   | name   |' in out
    assert 'Total number of rows: 2' in out
    assert 'name (UNKNOWN => any)' in out


def test_config_from_environment(capsys, monkeypatch, preset_file):
    monkeypatch.setenv(CONFIG_ENV_VAR, str(preset_file))
    assert main(['local', 'SELECT 1 AS one']) == EXIT_SUCCESS
    assert 'Total number of rows: 1' in capsys.readouterr().out


def test_unknown_preset(capsys, preset_file):
    code = main(['staging', 'SELECT 1', '-c', str(preset_file)])
    captured = capsys.readouterr()

    assert code == EXIT_FAILURE
    assert captured.out == ''
    assert 'PresetNotFoundError: Preset not found: staging' in captured.err


def test_missing_config_file(capsys, tmp_path):
    code = main(['local', 'SELECT 1', '-c', str(tmp_path / 'absent.json')])
    assert code == EXIT_FAILURE
    assert 'ConfigIOError: Could not open file' in capsys.readouterr().err


def test_malformed_config_file(capsys, write_config):
    path = write_config('{"db_presets": ')
    assert main(['local', 'SELECT 1', '-c', str(path)]) == EXIT_FAILURE
    assert 'ConfigParseError' in capsys.readouterr().err


def test_bad_query(capsys, preset_file):
    code = main(['local', 'SELECT * FROM missing_table', '-c', str(preset_file)])
    captured = capsys.readouterr()

    assert code == EXIT_FAILURE
    assert 'QueryError' in captured.err
    assert 'missing_table' in captured.err


if __name__ == '__main__':
    __import__('pytest').main([__file__])
