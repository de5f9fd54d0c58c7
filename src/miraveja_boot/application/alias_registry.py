import logging
from typing import Dict, Optional

from miraveja_boot.domain import IAliasRegistry, InvalidAliasError, Registry

logger = logging.getLogger(__name__)

ALIAS_PREFIX = "@"
ALIAS_SEPARATOR = "/"


class AliasRegistry(IAliasRegistry):
    """Translates path aliases into actual paths.

    A path alias is a short name for a directory, a file path or a URL.
    Root aliases (e.g. ``@app``) are registered explicitly; an alias that
    starts with a root alias (e.g. ``@app/components``) is resolved by
    replacing the root with its path, and the result is memoized.

    Attributes:
        _registry: The registry holding the alias table.
    """

    def __init__(self, registry: Registry) -> None:
        """Initialize the alias registry on top of a bootstrap registry.

        Args:
            registry: The registry holding the alias table.
        """
        self._registry = registry

    @staticmethod
    def is_alias(name: str) -> bool:
        """Whether a name is written as an alias (starts with "@")."""
        return name.startswith(ALIAS_PREFIX)

    def get_alias(self, alias: str) -> Optional[str]:
        """Translate a path alias into an actual path.

        Names that are not aliases are returned unchanged. The existence of
        the resulting path is not checked.

        Args:
            alias: A root alias or an alias starting with a root alias.

        Returns:
            The path the alias stands for, or None if its root is not registered.

        Example:
            >>> aliases.set_alias("@app", "/var/www/app")
            >>> aliases.get_alias("@app/components")
            '/var/www/app/components'
        """
        aliases = self._registry.aliases
        if alias in aliases:
            return aliases[alias]
        if not self.is_alias(alias):
            return alias
        root, separator, _ = alias.partition(ALIAS_SEPARATOR)
        if separator and root in aliases:
            path = aliases[root] + alias[len(root) :]
            aliases[alias] = path
            logger.debug("Memoized alias %s => %s", alias, path)
            return path
        return None

    def resolve_alias(self, alias: str) -> str:
        """Translate a path alias, failing if it cannot be resolved.

        Raises:
            InvalidAliasError: If the root alias is not registered.
        """
        path = self.get_alias(alias)
        if path is None:
            raise InvalidAliasError(alias, "root alias is not registered")
        return path

    def set_alias(self, alias: str, path: Optional[str]) -> None:
        """Register a path alias.

        Trailing "/" and "\\" characters are removed from the path. When the
        path is itself an alias it is translated first, so the stored value
        is always an actual path. Aliases memoized from a previous value of
        the alias are dropped.

        Args:
            alias: The alias name, starting with "@".
            path: The path or URL. None or an empty string removes the alias.

        Raises:
            InvalidAliasError: If the path is an alias that cannot be resolved.

        Example:
            >>> aliases.set_alias("@runtime", "@app/runtime")
        """
        if not path:
            self.remove_alias(alias)
            return
        if self.is_alias(path):
            resolved = self.get_alias(path)
            if resolved is None:
                raise InvalidAliasError(path, f"cannot register {alias} with an unresolvable path")
        else:
            resolved = path.rstrip("\\/")
        self._drop_derived(alias)
        self._registry.aliases[alias] = resolved

    def set_aliases(self, aliases: Dict[str, Optional[str]]) -> None:
        """Register multiple path aliases at once, in iteration order."""
        for alias, path in aliases.items():
            self.set_alias(alias, path)

    def remove_alias(self, alias: str) -> None:
        """Unregister a path alias and the aliases memoized from it. Unknown aliases are ignored."""
        self._registry.aliases.pop(alias, None)
        self._drop_derived(alias)

    def _drop_derived(self, alias: str) -> None:
        aliases = self._registry.aliases
        prefix = alias + ALIAS_SEPARATOR
        for derived in [name for name in aliases if name.startswith(prefix)]:
            del aliases[derived]

    def has_alias(self, alias: str) -> bool:
        """Whether the alias can be resolved."""
        return self.is_alias(alias) and self.get_alias(alias) is not None

    @property
    def aliases(self) -> Dict[str, str]:
        """Copy of the alias table, memoized aliases included."""
        return dict(self._registry.aliases)
