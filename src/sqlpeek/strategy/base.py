"""
Base strategy interface for dialect-specific behavior.

A strategy knows how to reach its database through SQLAlchemy (URL and engine
arguments), which preset fields it needs, and how to read the native type
tags its driver puts in ``cursor.description``.
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

import sqlalchemy as sa
from sqlpeek.types import TypeMapping

if TYPE_CHECKING:
    from sqlpeek.options import PresetOptions

# Registry of dialect name -> strategy class
# Defined here to avoid circular imports (concrete strategies import from base)
_STRATEGY_REGISTRY: dict[str, type['DialectStrategy']] = {}


def register_strategy(dialect: str):
    """Decorator to register a strategy class for a dialect.

    Usage:
        @register_strategy('mysql')
        class MySQLStrategy(DialectStrategy):
            ...
    """
    def decorator(cls: type['DialectStrategy']) -> type['DialectStrategy']:
        _STRATEGY_REGISTRY[dialect] = cls
        return cls
    return decorator


class DialectStrategy(ABC):
    """Base class for dialect-specific operations.
    """

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the dialect identifier."""

    @abstractmethod
    def build_connection_url(self, options: 'PresetOptions') -> sa.URL:
        """Build the SQLAlchemy connection URL.

        Args:
            options: Resolved preset options

        Returns
            SQLAlchemy URL object
        """

    @abstractmethod
    def get_engine_kwargs(self, options: 'PresetOptions') -> dict[str, Any]:
        """Return extra keyword arguments for ``sa.create_engine``.
        """

    @abstractmethod
    def map_type(self, type_code: Any) -> TypeMapping:
        """Map a native type tag from ``cursor.description``.

        Must be total: unknown tags map to ``UNKNOWN``.
        """

    @classmethod
    @abstractmethod
    def get_required_options(cls) -> list[str]:
        """Return the preset fields this dialect cannot connect without.
        """

    @classmethod
    def validate_options(cls, options: 'PresetOptions') -> None:
        """Validate options for this dialect.

        Raises
            ValueError: If any required field is None or empty
        """
        for field in cls.get_required_options():
            if getattr(options, field) is None or getattr(options, field) == '':
                raise ValueError(f'field {field} cannot be None or empty')
