"""
Log targets module.

Provides log targets that can be attached to stdlib loggers.
"""

from .file_target import FileTarget
from .target import LogTarget, TargetHandler, level_name

__all__ = [
    "LogTarget",
    "FileTarget",
    "TargetHandler",
    "level_name",
]
