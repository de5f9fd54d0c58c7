import logging
import os
from typing import Any, Callable, Dict, Mapping, Optional, Type, Union

from miraveja_boot.application.alias_registry import AliasRegistry
from miraveja_boot.application.class_resolver import ClassResolver
from miraveja_boot.application.object_factory import ObjectFactory
from miraveja_boot.domain import ObjectConfig, Registry

FRAMEWORK_ALIAS = "@boot"
FRAMEWORK_PATH = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class Kernel:
    """Bootstrap helper owning the registry and the services built on it.

    Orchestrates alias translation, class import/autoload and object
    creation over a single registry. A process normally builds one kernel
    at startup and passes it to the code that needs it.

    Attributes:
        _registry: The bootstrap registry shared by all services.
        _aliases: Alias translation service.
        _resolver: Class import and autoload service.
        _factory: Configuration-driven object factory.
    """

    def __init__(self, registry: Optional[Registry] = None) -> None:
        """Initialize the kernel and register the framework root alias.

        Args:
            registry: Registry to work on. A new one is created when omitted.
        """
        self._registry = registry if registry is not None else Registry()
        self._aliases = AliasRegistry(self._registry)
        self._resolver = ClassResolver(self._registry, self._aliases)
        self._factory = ObjectFactory(self._registry, self._resolver)
        self._registry.aliases.setdefault(FRAMEWORK_ALIAS, FRAMEWORK_PATH)

    @staticmethod
    def get_version() -> str:
        """Return the version of the package."""
        from miraveja_boot import __version__

        return __version__

    @property
    def registry(self) -> Registry:
        return self._registry

    @property
    def aliases(self) -> AliasRegistry:
        return self._aliases

    @property
    def resolver(self) -> ClassResolver:
        return self._resolver

    @property
    def factory(self) -> ObjectFactory:
        return self._factory

    def get_alias(self, alias: str) -> Optional[str]:
        """Translate a path alias. See :meth:`AliasRegistry.get_alias`."""
        return self._aliases.get_alias(alias)

    def set_alias(self, alias: str, path: Optional[str]) -> None:
        """Register a path alias. See :meth:`AliasRegistry.set_alias`."""
        self._aliases.set_alias(alias, path)

    def import_(self, alias: str, force_include: bool = False) -> str:
        """Import a class or directory. See :meth:`ClassResolver.import_`."""
        return self._resolver.import_(alias, force_include)

    def autoload(self, class_name: str) -> bool:
        """Load a class file. See :meth:`ClassResolver.autoload`."""
        return self._resolver.autoload(class_name)

    def create(self, config: Union[str, Type, Mapping[str, Any], ObjectConfig], *args: Any) -> Any:
        """Create a configured object. See :meth:`ObjectFactory.create`.

        Example:
            >>> kernel = Kernel()
            >>> kernel.set_alias("@app", "/var/www/app")
            >>> target = kernel.create({"class": "@app/components/GoogleMap", "api_key": "xyz"})
        """
        return self._factory.create(config, *args)

    def define_classes(self, classes: Dict[str, Callable[..., Any]]) -> None:
        """Make multiple classes available to :meth:`create` at once.

        Args:
            classes: Dictionary mapping identifiers to classes or factory callables.

        Example:
            >>> kernel.define_classes({
            ...     "FileTarget": FileTarget,
            ...     "column": lambda: ColumnSchema(),
            ... })
        """
        for identifier, factory in classes.items():
            self._registry.define_class(identifier, factory)

    def attach_log_target(self, target: Any, logger_name: Optional[str] = None) -> logging.Handler:
        """Route records of a stdlib logger to a log target.

        Args:
            target: A log target exposing ``as_handler()``.
            logger_name: Logger to attach to; the root logger when omitted.

        Returns:
            The installed handler, so callers can detach it later.
        """
        handler = target.as_handler()
        logging.getLogger(logger_name).addHandler(handler)
        return handler

    def clear(self) -> None:
        """Drop all registry state, keeping only the framework root alias.

        Useful for testing or resetting the process state.
        """
        self._registry.clear()
        self._registry.aliases[FRAMEWORK_ALIAS] = FRAMEWORK_PATH
