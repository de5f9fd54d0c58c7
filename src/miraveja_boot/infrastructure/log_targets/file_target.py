import fcntl
import logging
import os
from typing import List, Optional

from miraveja_boot.domain import IAliasRegistry, Initializable, InvalidConfigError, LogMessage
from miraveja_boot.infrastructure.log_targets.target import LogTarget

logger = logging.getLogger(__name__)

DEFAULT_LOG_FILE = "@runtime/application.log"


class FileTarget(LogTarget, Initializable):
    """Records log messages in a file.

    If the size of the log file exceeds ``max_file_size`` (in kilobytes), a
    rotation is performed: the current file is renamed with a ".1" suffix
    and existing rotated files move back by one place (".1" to ".2", ".2"
    to ".3", and so on). ``max_log_files`` is the number of rotated files
    kept.

    Writing is best effort: I/O errors never reach the caller.

    Attributes:
        log_file: Log file path or path alias. Defaults to
            ``@runtime/application.log``.
        max_file_size: Maximum log file size in kilobytes.
        max_log_files: Number of rotated files to keep.

    Example:
        >>> target = kernel.create(
        ...     {"class": "FileTarget", "log_file": "@runtime/app.log", "max_log_files": 3},
        ...     kernel.aliases,
        ... )
    """

    log_file: Optional[str] = None
    max_file_size: int = 1024
    max_log_files: int = 5

    def __init__(self, aliases: Optional[IAliasRegistry] = None) -> None:
        """Initialize the target.

        Args:
            aliases: Alias registry used to translate an aliased ``log_file``.
        """
        self._aliases = aliases

    def init(self) -> None:
        """Resolve the log file and validate the configuration.

        Raises:
            InvalidConfigError: If the log file alias cannot be resolved or
                its directory does not exist or is not writable.
        """
        self.log_file = self._resolve_log_file(self.log_file or DEFAULT_LOG_FILE)
        log_path = os.path.dirname(self.log_file) or os.curdir
        if not os.path.isdir(log_path) or not os.access(log_path, os.W_OK):
            raise InvalidConfigError(f"Directory '{log_path}' does not exist or is not writable.")
        if self.max_log_files < 1:
            self.max_log_files = 1
        if self.max_file_size < 1:
            self.max_file_size = 1

    def export(self, messages: List[LogMessage]) -> None:
        """Append messages to the log file, rotating it first when it is too big.

        The log file is resolved on first use if :meth:`init` has not run.
        """
        if self.log_file is None:
            try:
                self.init()
            except InvalidConfigError:
                logger.debug("Unable to resolve the log file", exc_info=True)
                return
        text = "".join(self.format_message(message) for message in messages)
        try:
            with open(self.log_file, "a", encoding="utf-8") as fp:
                fcntl.flock(fp, fcntl.LOCK_EX)
                try:
                    rotate = os.path.getsize(self.log_file) > self.max_file_size * 1024
                    if rotate:
                        self.rotate_files()
                    else:
                        fp.write(text)
                        fp.flush()
                finally:
                    fcntl.flock(fp, fcntl.LOCK_UN)
            if rotate:
                with open(self.log_file, "a", encoding="utf-8") as fp:
                    fcntl.flock(fp, fcntl.LOCK_EX)
                    try:
                        fp.write(text)
                        fp.flush()
                    finally:
                        fcntl.flock(fp, fcntl.LOCK_UN)
        except OSError:
            logger.debug("Unable to write log file %s", self.log_file, exc_info=True)

    def rotate_files(self) -> None:
        """Rotate log files, dropping the oldest one.

        Errors are ignored since several processes may rotate the same file
        at the same time.
        """
        file = self.log_file
        for i in range(self.max_log_files, 0, -1):
            rotate_file = f"{file}.{i}"
            if not os.path.isfile(rotate_file):
                continue
            try:
                if i == self.max_log_files:
                    os.unlink(rotate_file)
                else:
                    os.rename(rotate_file, f"{file}.{i + 1}")
            except OSError:
                logger.debug("Unable to rotate %s", rotate_file, exc_info=True)
        if os.path.isfile(file):
            try:
                os.rename(file, f"{file}.1")
            except OSError:
                logger.debug("Unable to rotate %s", file, exc_info=True)

    def _resolve_log_file(self, log_file: str) -> str:
        if not log_file.startswith("@"):
            return log_file
        path = self._aliases.get_alias(log_file) if self._aliases is not None else None
        if path is None:
            raise InvalidConfigError(f"Unable to resolve log file alias: {log_file}")
        return path
