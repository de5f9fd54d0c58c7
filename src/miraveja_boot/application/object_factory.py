import logging
from typing import Any, Callable, Mapping, Type, Union

from miraveja_boot.domain import (
    ClassNotFoundError,
    IClassResolver,
    IObjectFactory,
    ObjectConfig,
    Registry,
    configure,
)

logger = logging.getLogger(__name__)


class ObjectFactory(IObjectFactory):
    """Creates objects from class identifiers and configuration records.

    Attributes:
        _registry: The registry holding the class table.
        _resolver: Resolver used to load classes that are not defined yet.
    """

    def __init__(self, registry: Registry, resolver: IClassResolver) -> None:
        """Initialize the factory.

        Args:
            registry: The registry holding the class table.
            resolver: Resolver used to load classes that are not defined yet.
        """
        self._registry = registry
        self._resolver = resolver

    @property
    def registry(self) -> Registry:
        return self._registry

    def create(self, config: Union[str, Type, Mapping[str, Any], ObjectConfig], *args: Any) -> Any:
        """Create a new object using the given configuration.

        The configuration is either a class identifier or a mapping with a
        ``class`` element; the remaining elements of the mapping initialize
        the corresponding object properties, in order. Extra positional
        arguments are passed to the constructor. If the object is
        ``Initializable``, its ``init`` method runs after all properties
        are set.

        Args:
            config: A class name, alias, class object or configuration mapping.
            *args: Positional arguments forwarded to the constructor.

        Returns:
            The created and configured object.

        Raises:
            InvalidConfigError: If the configuration is invalid or names an
                unknown or read-only property.
            InvalidAliasError: If the class alias cannot be resolved.
            ClassNotFoundError: If the class cannot be found.

        Example:
            >>> factory.create("@app/components/GoogleMap")
            >>> factory.create({"class": "app.components.GoogleMap", "api_key": "xyz"})
        """
        record = ObjectConfig.from_value(config)
        factory = self.resolve_class(record.class_)
        instance = factory(*args)
        return configure(instance, record.properties)

    def resolve_class(self, identifier: Union[str, Type]) -> Callable[..., Any]:
        """Return the class (or factory callable) for an identifier.

        Identifiers that are not defined yet are imported with a forced include.

        Raises:
            ClassNotFoundError: If no strategy yields the class.
        """
        if isinstance(identifier, type):
            return identifier

        classes = self._registry.classes
        if identifier in classes:
            return classes[identifier]

        class_name = self._resolver.import_(identifier, force_include=True)
        if class_name not in classes:
            raise ClassNotFoundError(identifier)
        logger.debug("Resolved %s to class %s", identifier, class_name)
        return classes[class_name]
