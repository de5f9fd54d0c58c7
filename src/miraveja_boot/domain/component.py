"""Base object implementing accessor-defined properties."""

import inspect
from typing import Any, Callable, Dict, FrozenSet, Mapping, TypeVar

from miraveja_boot.domain.exceptions import InvalidConfigError, ReadOnlyPropertyError, UnknownPropertyError
from miraveja_boot.domain.interfaces import Initializable

T = TypeVar("T")

GETTER_PREFIX = "get_"
SETTER_PREFIX = "set_"


def configure(obj: T, properties: Mapping[str, Any]) -> T:
    """Apply property values to an object, then run its lifecycle hook.

    Args:
        obj: The freshly constructed object.
        properties: Property name/value pairs, applied in iteration order.

    Returns:
        The same object.

    Raises:
        UnknownPropertyError: If a name is not a property of the object.
        ReadOnlyPropertyError: If a property has no setter.
    """
    for name, value in properties.items():
        setattr(obj, name, value)
    if isinstance(obj, Initializable):
        obj.init()
    return obj


class BaseObject:
    """Base class that implements the *property* feature.

    A property is defined by a getter method (e.g. ``get_label``) and/or a
    setter method (e.g. ``set_label``). Reading ``obj.label`` calls the
    getter and assigning it calls the setter. A property with only a getter
    is read-only. Property names are case-insensitive.

    Names starting with an underscore and plain attributes declared on the
    class (annotations or class-level defaults) are ordinary attributes and
    never go through the accessor table.

    The accessor table is built once per class when the class is defined.

    Example:
        >>> class Widget(BaseObject):
        ...     def __init__(self):
        ...         self._label = None
        ...     def get_label(self):
        ...         return self._label
        ...     def set_label(self, value):
        ...         self._label = value
        >>> widget = Widget()
        >>> widget.label = "abc"  # calls set_label("abc")
    """

    _getters: Dict[str, Callable[[Any], Any]] = {}
    _setters: Dict[str, Callable[[Any, Any], None]] = {}
    _fields: FrozenSet[str] = frozenset()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        getters: Dict[str, Callable[[Any], Any]] = {}
        setters: Dict[str, Callable[[Any, Any], None]] = {}
        fields = set()
        for klass in reversed(cls.__mro__):
            fields.update(name for name in getattr(klass, "__annotations__", {}) if not name.startswith("_"))
            for name, value in vars(klass).items():
                if name.startswith("_"):
                    continue
                if isinstance(value, (classmethod, staticmethod)):
                    continue
                if not inspect.isfunction(value):
                    fields.add(name)
                    continue
                lowered = name.lower()
                if lowered.startswith(GETTER_PREFIX) and len(lowered) > len(GETTER_PREFIX):
                    getters[lowered[len(GETTER_PREFIX) :]] = value
                elif lowered.startswith(SETTER_PREFIX) and len(lowered) > len(SETTER_PREFIX):
                    setters[lowered[len(SETTER_PREFIX) :]] = value
        cls._getters = getters
        cls._setters = setters
        cls._fields = frozenset(fields)

    def _is_plain_attribute(self, name: str) -> bool:
        return name.startswith("_") or name in self.__dict__ or name in type(self)._fields

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal attribute lookup failed.
        if name.startswith("_"):
            raise AttributeError(name)
        if name in type(self)._fields:
            return None
        return self.read_property(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if self._is_plain_attribute(name):
            object.__setattr__(self, name, value)
        else:
            self.write_property(name, value)

    def __delattr__(self, name: str) -> None:
        if name.startswith("_") or name in self.__dict__:
            object.__delattr__(self, name)
        else:
            self.clear_property(name)

    def read_property(self, name: str) -> Any:
        """Return a property value through its getter.

        Args:
            name: The property name (case-insensitive).

        Raises:
            UnknownPropertyError: If no getter is defined.
        """
        getter = type(self)._getters.get(name.lower())
        if getter is None:
            raise UnknownPropertyError(type(self).__name__, name)
        return getter(self)

    def write_property(self, name: str, value: Any) -> None:
        """Set a property value through its setter.

        Args:
            name: The property name (case-insensitive).
            value: The value to set.

        Raises:
            ReadOnlyPropertyError: If only a getter is defined.
            UnknownPropertyError: If neither accessor is defined.
        """
        key = name.lower()
        setter = type(self)._setters.get(key)
        if setter is not None:
            setter(self, value)
        elif key in type(self)._getters:
            raise ReadOnlyPropertyError(type(self).__name__, name)
        else:
            raise UnknownPropertyError(type(self).__name__, name, action="Setting")

    def clear_property(self, name: str) -> None:
        """Set a property to None through its setter.

        Does nothing if the property is not defined.

        Raises:
            ReadOnlyPropertyError: If only a getter is defined.
        """
        key = name.lower()
        setter = type(self)._setters.get(key)
        if setter is not None:
            setter(self, None)
        elif key in type(self)._getters:
            raise ReadOnlyPropertyError(type(self).__name__, name, action="Unsetting")

    def is_set(self, name: str) -> bool:
        """Whether the named property is set, meaning readable and not None."""
        if self._is_plain_attribute(name) and not name.startswith("_"):
            return getattr(self, name, None) is not None
        getter = type(self)._getters.get(name.lower())
        if getter is None:
            return False
        return getter(self) is not None

    def has_property(self, name: str) -> bool:
        """Whether a getter or a setter is defined for the property."""
        return self.can_get_property(name) or self.can_set_property(name)

    def can_get_property(self, name: str) -> bool:
        """Whether a getter is defined for the property."""
        return name.lower() in type(self)._getters

    def can_set_property(self, name: str) -> bool:
        """Whether a setter is defined for the property."""
        return name.lower() in type(self)._setters

    def evaluate_expression(self, callback: Callable[..., Any], *params: Any) -> Any:
        """Evaluate a callback in the context of this object.

        The callback receives ``params`` followed by the object itself.

        Args:
            callback: The callable to evaluate.
            *params: Leading arguments for the callback.

        Raises:
            InvalidConfigError: If the expression is not callable.
        """
        if not callable(callback):
            raise InvalidConfigError(f"Expression must be callable, got {type(callback).__name__}.")
        return callback(*params, self)

    @classmethod
    def create(cls, *args: Any, **properties: Any) -> Any:
        """Create a configured instance of this class.

        Positional arguments go to the constructor; keyword arguments are
        applied as properties before :meth:`Initializable.init` runs.

        Example:
            >>> target = FileTarget.create(log_file="@runtime/app.log", max_log_files=3)
        """
        return configure(cls(*args), properties)
