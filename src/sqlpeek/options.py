from dataclasses import dataclass

from sqlpeek.strategy import get_available_dialects, get_strategy_class
from sqlpeek.strategy import is_supported_dialect

from libb import ConfigOptions

__all__ = ['PresetOptions']


@dataclass
class PresetOptions(ConfigOptions):
    """Connection options resolved from a named preset

    supported driver names: `mysql`, `postgresql`, `sqlite`

    `port` and `timeout` of 0 leave the driver defaults in place.
    """
    name: str = None
    drivername: str = 'mysql'
    hostname: str = None
    username: str = None
    password: str = None
    database: str = None
    port: int = 0
    timeout: int = 0

    def __post_init__(self):
        if not is_supported_dialect(self.drivername):
            available = get_available_dialects()
            raise ValueError(f'drivername must be one of: {available}')
        self.port = int(self.port or 0)
        self.timeout = int(self.timeout or 0)
        strategy_cls = get_strategy_class(self.drivername)
        strategy_cls.validate_options(self)

    def __repr__(self):
        return (f'PresetOptions(name={self.name!r}, drivername={self.drivername!r}, '
                f'hostname={self.hostname!r}, username={self.username!r}, '
                f'database={self.database!r}, port={self.port!r})')
