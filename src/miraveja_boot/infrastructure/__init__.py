"""
Infrastructure layer - External integrations.

This layer contains log targets, settings, the console entry point and
testing helpers. It depends on both Application and Domain layers.
"""

from . import log_targets, testing
from .bootstrap import bootstrap
from .settings import BootSettings

__all__ = [
    "bootstrap",
    "BootSettings",
    "log_targets",
    "testing",
]
