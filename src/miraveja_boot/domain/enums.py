from enum import Enum


class ImportKind(str, Enum):
    """What an import identifier turned out to denote.

    Attributes:
        CLASS: A single class (the result is the class name).
        DIRECTORY: A whole directory added to the search path (the result is the path).
    """

    CLASS = "class"
    DIRECTORY = "directory"

    def __str__(self) -> str:
        return self.value


class ColumnType(str, Enum):
    """Logical (driver-independent) database column types."""

    STRING = "string"
    TEXT = "text"
    BOOLEAN = "boolean"
    SMALLINT = "smallint"
    INTEGER = "integer"
    BIGINT = "bigint"
    FLOAT = "float"
    DECIMAL = "decimal"
    DATETIME = "datetime"
    TIMESTAMP = "timestamp"
    TIME = "time"
    DATE = "date"
    BINARY = "binary"
    MONEY = "money"

    def __str__(self) -> str:
        return self.value


class LogLevel(str, Enum):
    """Levels written by log targets."""

    TRACE = "trace"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    PROFILE = "profile"

    def __str__(self) -> str:
        return self.value
