"""
Application layer - Use cases and orchestration.

This layer contains alias translation, class resolution and object creation.
It depends only on the Domain layer.
"""

from .alias_registry import AliasRegistry
from .class_resolver import ClassResolver
from .kernel import FRAMEWORK_ALIAS, Kernel
from .object_factory import ObjectFactory

__all__ = [
    "Kernel",
    "AliasRegistry",
    "ClassResolver",
    "ObjectFactory",
    "FRAMEWORK_ALIAS",
]
