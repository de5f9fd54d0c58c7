import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from miraveja_boot.domain import BaseObject, LogLevel, LogMessage

# stdlib level => target level
LEVEL_NAMES: Dict[int, str] = {
    logging.DEBUG: LogLevel.TRACE.value,
    logging.INFO: LogLevel.INFO.value,
    logging.WARNING: LogLevel.WARNING.value,
    logging.ERROR: LogLevel.ERROR.value,
    logging.CRITICAL: LogLevel.ERROR.value,
}

TIME_FORMAT = "%Y/%m/%d %H:%M:%S"


def level_name(levelno: int) -> str:
    """Map a stdlib logging level number to a target level name."""
    if levelno in LEVEL_NAMES:
        return LEVEL_NAMES[levelno]
    if levelno < logging.INFO:
        return LogLevel.TRACE.value
    if levelno < logging.WARNING:
        return LogLevel.INFO.value
    if levelno < logging.ERROR:
        return LogLevel.WARNING.value
    return LogLevel.ERROR.value


class LogTarget(BaseObject, ABC):
    """Base class for log targets.

    A log target receives messages, keeps the ones matching its level and
    category filters and exports them to a destination.

    Attributes:
        enabled: Whether the target exports anything at all.
        levels: Level names to keep. None or empty keeps every level.
        categories: Categories to keep. A trailing "*" matches by prefix
            (``app.*``). None or empty keeps every category.
    """

    enabled: bool = True
    levels: Optional[List[str]] = None
    categories: Optional[List[str]] = None

    @abstractmethod
    def export(self, messages: List[LogMessage]) -> None:
        """Write messages to the destination of this target.

        Args:
            messages: The messages to export, already filtered.
        """

    def collect(self, messages: Iterable[LogMessage]) -> None:
        """Filter messages and export the remaining ones."""
        if not self.enabled:
            return
        kept = self.filter_messages(messages)
        if kept:
            self.export(kept)

    def filter_messages(self, messages: Iterable[LogMessage]) -> List[LogMessage]:
        """Return the messages matching the level and category filters."""
        return [m for m in messages if self._accepts_level(m.level) and self._accepts_category(m.category)]

    def format_message(self, message: LogMessage) -> str:
        """Format a message as one line of text."""
        time = datetime.fromtimestamp(message.timestamp).strftime(TIME_FORMAT)
        return f"{time} [{message.level}] [{message.category}] {message.message}\n"

    def as_handler(self, level: int = logging.NOTSET) -> "TargetHandler":
        """Wrap this target in a stdlib logging handler."""
        return TargetHandler(self, level)

    def _accepts_level(self, level: str) -> bool:
        return not self.levels or level in self.levels

    def _accepts_category(self, category: str) -> bool:
        if not self.categories:
            return True
        for pattern in self.categories:
            if pattern == category or (pattern.endswith("*") and category.startswith(pattern[:-1])):
                return True
        return False


class TargetHandler(logging.Handler):
    """Stdlib logging handler forwarding records to a log target.

    Attributes:
        target: The log target receiving the records.
    """

    def __init__(self, target: LogTarget, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.target = target
        self._emitting = False

    def emit(self, record: logging.LogRecord) -> None:
        # Records logged by the target while exporting are dropped.
        if self._emitting:
            return
        self._emitting = True
        try:
            message = LogMessage(
                message=self.format(record),
                level=level_name(record.levelno),
                category=record.name,
                timestamp=record.created,
            )
            self.target.collect([message])
        except Exception:
            self.handleError(record)
        finally:
            self._emitting = False
