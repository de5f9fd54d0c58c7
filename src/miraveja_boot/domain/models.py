import time
from types import ModuleType
from typing import Any, Callable, Dict, List, Mapping, Type, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from miraveja_boot.domain.enums import ImportKind
from miraveja_boot.domain.exceptions import InvalidConfigError

CLASS_KEY = "class"


class ImportRecord(BaseModel):
    """Value object memoizing the outcome of an import.

    Attributes:
        identifier: The alias or class name that was imported.
        kind: Whether the identifier denoted a class or a directory.
        result: The class name or the directory path.
    """

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., description="The alias or class name that was imported.")
    kind: ImportKind = Field(..., description="What the identifier denoted.")
    result: str = Field(..., description="The resolved class name or directory path.")


class ObjectConfig(BaseModel):
    """Configuration record describing an object to construct.

    The record is either a bare class identifier or a mapping holding a
    ``class`` element plus property name/value pairs. The ``class`` element
    is kept apart from the properties, which retain their original order.

    Attributes:
        class_: Class identifier (name, namespaced name, alias or class object).
    """

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    class_: Union[str, Type] = Field(..., alias=CLASS_KEY, description="Class identifier of the object.")

    @property
    def properties(self) -> Dict[str, Any]:
        """Property name/value pairs to apply after construction."""
        return dict(self.model_extra or {})

    @classmethod
    def from_value(cls, config: Union[str, Type, Mapping[str, Any], "ObjectConfig"]) -> "ObjectConfig":
        """Normalize any accepted configuration form into a record.

        Args:
            config: A class identifier, a class, a mapping with a "class" element,
                or an existing record.

        Returns:
            The normalized configuration record.

        Raises:
            InvalidConfigError: If a mapping lacks the "class" element or is malformed.
        """
        if isinstance(config, ObjectConfig):
            return config
        if isinstance(config, (str, type)):
            return cls.model_validate({CLASS_KEY: config})
        if not isinstance(config, Mapping) or CLASS_KEY not in config:
            raise InvalidConfigError('Object configuration must be a mapping containing a "class" element.')
        try:
            return cls.model_validate(dict(config))
        except ValidationError as e:
            raise InvalidConfigError(f"Invalid object configuration: {e}") from e


class LogMessage(BaseModel):
    """A single message handed to log targets.

    Attributes:
        message: The message text.
        level: Level name (trace, info, warning, error, profile).
        category: Category of the message, usually the logger name.
        timestamp: Unix timestamp the message was recorded at.
    """

    message: str = Field(..., description="The message text.")
    level: str = Field(..., description="The message level.")
    category: str = Field(default="application", description="The message category.")
    timestamp: float = Field(default_factory=time.time, description="When the message was recorded.")


class Registry(BaseModel):
    """Process-wide bootstrap state, held in one explicit object.

    A process builds one registry at startup and hands it to the alias
    registry, the class resolver and the object factory.

    Attributes:
        aliases: Registered and memoized aliases (alias => path or URL).
        class_map: Explicit class identifier => file path overrides.
        class_path: Directories searched for class files, most recent first.
        imported: Memoized import outcomes keyed by identifier.
        classes: Defined classes keyed by identifier (the class table).
        loaded_files: Modules already executed, keyed by file path.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    aliases: Dict[str, str] = Field(default_factory=dict, description="Alias => path or URL.")
    class_map: Dict[str, str] = Field(default_factory=dict, description="Class identifier => file path.")
    class_path: List[str] = Field(default_factory=list, description="Search directories, most recent first.")
    imported: Dict[str, ImportRecord] = Field(default_factory=dict, description="Memoized import outcomes.")
    classes: Dict[str, Callable[..., Any]] = Field(default_factory=dict, description="Identifier => class.")
    loaded_files: Dict[str, ModuleType] = Field(default_factory=dict, description="File path => loaded module.")

    def define_class(self, identifier: str, factory: Callable[..., Any]) -> None:
        """Make a class (or factory callable) available under an identifier.

        Args:
            identifier: The name callers use to refer to the class.
            factory: The class or constructor callable.
        """
        self.classes[identifier] = factory

    def dynamic(self, identifier: Union[str, None] = None) -> Callable[[Type], Type]:
        """Class decorator registering the decorated class in the class table.

        Args:
            identifier: Name to register under. Defaults to the class name.

        Example:
            >>> @registry.dynamic()
            ... class GoogleMap(BaseObject):
            ...     pass
        """

        def decorator(cls: Type) -> Type:
            self.define_class(identifier or cls.__name__, cls)
            return cls

        return decorator

    def is_defined(self, identifier: str) -> bool:
        """Whether a class is defined under the identifier."""
        return identifier in self.classes

    def copy_state(self) -> "Registry":
        """Return a registry holding shallow copies of every table."""
        return Registry(
            aliases=dict(self.aliases),
            class_map=dict(self.class_map),
            class_path=list(self.class_path),
            imported=dict(self.imported),
            classes=dict(self.classes),
            loaded_files=dict(self.loaded_files),
        )

    def restore_state(self, other: "Registry") -> None:
        """Replace every table with the contents of another registry."""
        self.aliases = dict(other.aliases)
        self.class_map = dict(other.class_map)
        self.class_path = list(other.class_path)
        self.imported = dict(other.imported)
        self.classes = dict(other.classes)
        self.loaded_files = dict(other.loaded_files)

    def clear(self) -> None:
        """Drop all aliases, class entries, search paths and import records."""
        self.aliases.clear()
        self.class_map.clear()
        self.class_path.clear()
        self.imported.clear()
        self.classes.clear()
        self.loaded_files.clear()
