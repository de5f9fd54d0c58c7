import re
from typing import Any, Dict, List, Optional

from miraveja_boot.domain.component import BaseObject
from miraveja_boot.domain.enums import ColumnType
from miraveja_boot.domain.interfaces import Initializable

# logical type => python type
TYPE_MAP: Dict[str, type] = {
    ColumnType.SMALLINT.value: int,
    ColumnType.INTEGER.value: int,
    ColumnType.BIGINT.value: int,
    ColumnType.BOOLEAN.value: bool,
    ColumnType.FLOAT.value: float,
}

LEADING_INTEGER = re.compile(r"\s*[+-]?\d+")

# strings drivers use for false
FALSE_STRINGS = ("", "0")


def to_int(value: Any) -> int:
    """Convert a value to int, reading strings up to the first non-digit.

    Strings without a leading integer convert to 0.

    Example:
        >>> to_int("12abc"), to_int("abc"), to_int(" -3")
        (12, 0, -3)
    """
    if isinstance(value, str):
        match = LEADING_INTEGER.match(value)
        return int(match.group()) if match else 0
    return int(value)


def to_bool(value: Any) -> bool:
    """Convert a value to bool, treating "" and "0" as False."""
    if isinstance(value, str):
        return value not in FALSE_STRINGS
    return bool(value)


CASTERS: Dict[type, Any] = {
    str: str,
    int: to_int,
    bool: to_bool,
}


class Expression:
    """A raw database expression that is passed through without typecasting.

    Attributes:
        expression: The expression text.
        params: Parameters bound to the expression.
    """

    def __init__(self, expression: str, params: Optional[Dict[str, Any]] = None) -> None:
        self.expression = expression
        self.params = params or {}

    def __str__(self) -> str:
        return self.expression

    def __repr__(self) -> str:
        return f"Expression({self.expression!r})"


class ColumnSchema(BaseObject, Initializable):
    """Describes the column metadata of a database table.

    Attributes:
        name: Name of the column, without quotes.
        quoted_name: Quoted name usable in SQL statements.
        allow_null: Whether the column can be null.
        type: Logical type of the column (see ColumnType).
        python_type: Python type values of this column are cast to.
        db_type: Type as reported by the database.
        default_value: Default value of the column.
        enum_values: Enumerable values.
        size: Size of the column.
        precision: Precision of numeric data.
        scale: Scale of numeric data.
        is_primary_key: Whether the column is a primary key.
        auto_increment: Whether the column is auto-incremental.
        unsigned: Whether the column is unsigned (integer types only).
    """

    name: Optional[str] = None
    quoted_name: Optional[str] = None
    allow_null: Optional[bool] = None
    python_type: Optional[type] = None
    type: Optional[str] = None
    db_type: Optional[str] = None
    default_value: Any = None
    enum_values: Optional[List[Any]] = None
    size: Optional[int] = None
    precision: Optional[int] = None
    scale: Optional[int] = None
    is_primary_key: Optional[bool] = None
    auto_increment: bool = False
    unsigned: Optional[bool] = None

    def init(self) -> None:
        if self.python_type is None:
            self.python_type = self.extract_python_type()

    def extract_python_type(self) -> type:
        """Derive the Python type from the logical type.

        Python integers are unbounded, so unsigned and big integer columns
        still map to ``int``.
        """
        return TYPE_MAP.get(str(self.type), str)

    def typecast(self, value: Any) -> Any:
        """Convert an input value to the type of this column.

        None, expressions and values already of the column's type are
        returned unchanged, as are values of types without a caster.
        Strings are converted leniently: "0" and "" are False for boolean
        columns, and integer columns read the leading integer (0 if none).
        """
        if value is None or type(value) is self.python_type or isinstance(value, Expression):
            return value
        caster = CASTERS.get(self.python_type)
        if caster is None:
            return value
        return caster(value)
