"""
miraveja-boot: Bootstrap layer with path aliases, class autoloading and configuration-driven objects.

Public API exports for the miraveja-boot package.
"""

__version__ = "0.1.0"

# Application exports
from miraveja_boot.application import AliasRegistry, ClassResolver, Kernel, ObjectFactory

# Domain exports
from miraveja_boot.domain import (
    BaseObject,
    BootException,
    ClassNotFoundError,
    ColumnSchema,
    Initializable,
    InvalidAliasError,
    InvalidConfigError,
    ObjectConfig,
    ReadOnlyPropertyError,
    Registry,
    UnknownPropertyError,
)

# Infrastructure exports
from miraveja_boot.infrastructure import BootSettings, bootstrap
from miraveja_boot.infrastructure.log_targets import FileTarget, LogTarget

__all__ = [
    # Kernel
    "Kernel",
    "AliasRegistry",
    "ClassResolver",
    "ObjectFactory",
    "bootstrap",
    "BootSettings",
    # Models
    "BaseObject",
    "ColumnSchema",
    "Initializable",
    "ObjectConfig",
    "Registry",
    # Log targets
    "LogTarget",
    "FileTarget",
    # Exceptions
    "BootException",
    "ClassNotFoundError",
    "InvalidAliasError",
    "InvalidConfigError",
    "ReadOnlyPropertyError",
    "UnknownPropertyError",
]
