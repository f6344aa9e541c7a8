"""
Preset configuration loading.

Presets live in a JSON document::

    {"db_presets": [{"name": "prod", "host": "db.local", "username": "ro",
                     "password": "...", "database": "sales"}]}

Each preset may also carry ``drivername`` (default ``mysql``), ``port`` and
``timeout``.
"""
import json
import logging
import os
import pathlib
from typing import Any

from sqlpeek.exceptions import ConfigIOError, ConfigParseError
from sqlpeek.exceptions import PresetNotFoundError
from sqlpeek.options import PresetOptions

from libb import attrdict

logger = logging.getLogger(__name__)

__all__ = [
    'CONFIG_ENV_VAR',
    'default_locations',
    'resolve_config_path',
    'load_presets',
    'find_preset',
    'get_preset',
    ]

CONFIG_ENV_VAR = 'SQLPEEK_CONFIG'

default_locations = [
    pathlib.Path('~/.config/sqlpeek/presets.json').expanduser(),
    pathlib.Path('/etc/sqlpeek/presets.json'),
    pathlib.Path('presets.json'),
    ]

# preset key -> PresetOptions field
_FIELD_MAP = {
    'name': 'name',
    'drivername': 'drivername',
    'host': 'hostname',
    'username': 'username',
    'password': 'password',
    'database': 'database',
    'port': 'port',
    'timeout': 'timeout',
    }


def resolve_config_path(path: str | os.PathLike | None = None) -> pathlib.Path:
    """Pick the configuration file to read.

    An explicit path wins, then the ``SQLPEEK_CONFIG`` environment variable,
    then the first existing default location.
    """
    if path:
        return pathlib.Path(path)
    if os.environ.get(CONFIG_ENV_VAR):
        return pathlib.Path(os.environ[CONFIG_ENV_VAR])
    for location in default_locations:
        if location.exists():
            return location
    searched = ', '.join(str(p) for p in default_locations)
    raise ConfigIOError(f'No configuration file found (searched {searched})')


def load_presets(path: str | os.PathLike | None = None) -> list[attrdict]:
    """Read and parse the preset list from the configuration file.
    """
    config_path = resolve_config_path(path)
    try:
        content = config_path.read_text(encoding='utf-8')
    except OSError as e:
        raise ConfigIOError(f'Could not open file {config_path}: {e}') from e

    try:
        document = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f'Could not parse JSON in {config_path}: {e}') from e

    if not isinstance(document, dict):
        raise ConfigParseError(f'Expected a JSON object at top level of {config_path}')
    presets = document.get('db_presets')
    if not isinstance(presets, list):
        raise ConfigParseError(f"Expected a 'db_presets' list in {config_path}")
    for preset in presets:
        if not isinstance(preset, dict):
            raise ConfigParseError(f"Every entry of 'db_presets' must be an object in {config_path}")

    logger.debug(f'Loaded {len(presets)} presets from {config_path}')
    return [attrdict(preset) for preset in presets]


def find_preset(presets: list[dict[str, Any]], name: str) -> attrdict:
    """Return the first preset whose ``name`` matches exactly.
    """
    for preset in presets:
        if isinstance(preset.get('name'), str) and preset['name'] == name:
            return attrdict(preset)
    raise PresetNotFoundError(f'Preset not found: {name}')


def get_preset(name: str, path: str | os.PathLike | None = None) -> PresetOptions:
    """Load the configuration and resolve preset ``name`` into options.
    """
    preset = find_preset(load_presets(path), name)
    unknown = set(preset) - set(_FIELD_MAP)
    if unknown:
        logger.debug(f"Ignoring unknown keys in preset {name}: {', '.join(sorted(unknown))}")
    kwargs = {field: preset[key] for key, field in _FIELD_MAP.items() if key in preset}
    try:
        options = PresetOptions(**kwargs)
    except (TypeError, ValueError) as e:
        raise ConfigParseError(f'Invalid preset {name}: {e}') from e
    logger.debug(f'Resolved preset {options!r}')
    return options
