from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Type, Union

from miraveja_boot.domain.models import ObjectConfig, Registry


class Initializable(ABC):
    """Capability of objects that need a post-configuration hook.

    The object factory calls :meth:`init` once every configured property
    has been applied.
    """

    @abstractmethod
    def init(self) -> None:
        """Finish initialization after properties are configured."""


class IAliasRegistry(ABC):
    """Abstract interface for path alias operations."""

    @abstractmethod
    def set_alias(self, alias: str, path: Optional[str]) -> None:
        """Register a path alias, or remove it when path is empty.

        Args:
            alias: The alias name, starting with "@".
            path: The path, URL or another alias the name stands for.
        """

    @abstractmethod
    def get_alias(self, alias: str) -> Optional[str]:
        """Translate an alias into a path.

        Args:
            alias: The alias to translate.

        Returns:
            The path, or None when the root alias is not registered.
        """


class IClassResolver(ABC):
    """Abstract interface for class import and autoload operations."""

    @abstractmethod
    def import_(self, alias: str, force_include: bool = False) -> str:
        """Import a class or a directory.

        Args:
            alias: A path alias or a class name.
            force_include: Whether to load the class file immediately.

        Returns:
            The class name or the directory the alias refers to.
        """

    @abstractmethod
    def autoload(self, class_name: str) -> bool:
        """Load the file defining a class.

        Args:
            class_name: The class name to load.

        Returns:
            Whether the class file was found and loaded.
        """


class IObjectFactory(ABC):
    """Abstract interface for configuration-driven object construction."""

    @abstractmethod
    def create(self, config: Union[str, Type, Mapping[str, Any], ObjectConfig], *args: Any) -> Any:
        """Create and configure a new object.

        Args:
            config: A class identifier or a configuration record.
            *args: Positional arguments forwarded to the constructor.

        Returns:
            The fully initialized object.
        """

    @property
    @abstractmethod
    def registry(self) -> Registry:
        """The registry the factory resolves classes from."""
