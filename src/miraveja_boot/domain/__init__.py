"""
Domain layer - Core models and rules.

This layer contains the bootstrap state, configuration records, the
accessor-based base object and the exceptions of the package.
It has no dependencies on other layers.
"""

from .column_schema import ColumnSchema, Expression
from .component import BaseObject, configure
from .enums import ColumnType, ImportKind, LogLevel
from .exceptions import (
    BootException,
    ClassNotFoundError,
    InvalidAliasError,
    InvalidConfigError,
    ReadOnlyPropertyError,
    UnknownPropertyError,
)
from .interfaces import IAliasRegistry, IClassResolver, Initializable, IObjectFactory
from .models import ImportRecord, LogMessage, ObjectConfig, Registry

__all__ = [
    # Enums
    "ColumnType",
    "ImportKind",
    "LogLevel",
    # Exceptions
    "BootException",
    "ClassNotFoundError",
    "InvalidAliasError",
    "InvalidConfigError",
    "ReadOnlyPropertyError",
    "UnknownPropertyError",
    # Interfaces
    "IAliasRegistry",
    "IClassResolver",
    "IObjectFactory",
    "Initializable",
    # Models
    "ImportRecord",
    "LogMessage",
    "ObjectConfig",
    "Registry",
    # Base classes
    "BaseObject",
    "ColumnSchema",
    "Expression",
    "configure",
]
