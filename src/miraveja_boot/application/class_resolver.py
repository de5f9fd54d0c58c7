import importlib.util
import logging
import os
import re
import sys
from types import ModuleType
from typing import Optional

from miraveja_boot.application.alias_registry import ALIAS_PREFIX, ALIAS_SEPARATOR, AliasRegistry
from miraveja_boot.domain import (
    ClassNotFoundError,
    IClassResolver,
    ImportKind,
    ImportRecord,
    InvalidAliasError,
    Registry,
)

logger = logging.getLogger(__name__)

CLASS_FILE_EXTENSION = ".py"
NAMESPACE_SEPARATOR = "."
COMPOUND_SEPARATOR = "_"
DIRECTORY_WILDCARD = "*"
LOADED_MODULE_PREFIX = "miraveja_boot_autoload"


class ClassResolver(IClassResolver):
    """Imports classes and directories and loads class files on demand.

    A class is *defined* once it is present in the registry's class table.
    Class files are plain Python modules named after the class they define
    (``GoogleMap.py`` defines ``GoogleMap``); loading one executes it once
    and registers the class under the requested identifier.

    Attributes:
        _registry: The registry holding class map, search path and class table.
        _aliases: Alias registry used to translate path aliases.
    """

    def __init__(self, registry: Registry, aliases: AliasRegistry) -> None:
        """Initialize the resolver.

        Args:
            registry: The registry holding class map, search path and class table.
            aliases: Alias registry used to translate path aliases.
        """
        self._registry = registry
        self._aliases = aliases

    def import_(self, alias: str, force_include: bool = False) -> str:
        """Import a class or a directory.

        Importing a class registers its file in the class map, so the file is
        only loaded when the class is first needed. Importing a directory
        (``@app/components/*``) puts it at the front of the search path, so
        directories imported later take precedence. Only the first import of
        an identifier counts.

        Args:
            alias: A path alias (``@app/components/GoogleMap``), a directory
                alias (``@app/components/*``) or a class name (``GoogleMap``).
            force_include: Whether to load the class file immediately.

        Returns:
            The class name or the directory the alias refers to.

        Raises:
            InvalidAliasError: If the directory part of the alias cannot be resolved.
            ClassNotFoundError: If a forced include finds no class file or class.

        Example:
            >>> resolver.import_("@app/components/*")
            '/var/www/app/components'
            >>> resolver.import_("@app/components/GoogleMap")
            'GoogleMap'
        """
        record = self._registry.imported.get(alias)
        if record is not None:
            return record.result

        if self._registry.is_defined(alias):
            return self._remember(alias, ImportKind.CLASS, alias)

        if not AliasRegistry.is_alias(alias):
            if force_include and self.autoload(alias):
                self._remember(alias, ImportKind.CLASS, alias)
            return alias

        directory, _, class_name = alias.rpartition(ALIAS_SEPARATOR)
        is_class = class_name != DIRECTORY_WILDCARD

        if is_class and self._registry.is_defined(class_name):
            return self._remember(alias, ImportKind.CLASS, class_name)

        path = self._aliases.get_alias(directory) if directory else None
        if path is None:
            raise InvalidAliasError(alias)

        if not is_class:
            self._registry.class_path.insert(0, path)
            logger.debug("Added %s to the class search path", path)
            return self._remember(alias, ImportKind.DIRECTORY, path)

        class_file = os.path.join(path, class_name + CLASS_FILE_EXTENSION)
        if force_include:
            self._include(class_file, class_name)
            self._remember(alias, ImportKind.CLASS, class_name)
        else:
            self._registry.class_map[class_name] = class_file
        return class_name

    def autoload(self, class_name: str) -> bool:
        """Load the file defining a class.

        The class file is searched as follows:

        1. The class map;
        2. For namespaced names (``app.models.User``), the file of the
           matching path alias (``@app/models/User.py``). The search stops
           here for namespaced names;
        3. For compound names (``Vendor_Pkg_Widget``), the file of the
           matching path alias (``@Vendor/Pkg/Widget.py``);
        4. The directories of the class search path, in order.

        Args:
            class_name: The class name to load.

        Returns:
            Whether the class file was found and loaded. False lets other
            resolution strategies have a go.
        """
        class_file = self.locate(class_name)
        if class_file is None:
            return False
        self._include(class_file, class_name)
        return True

    def locate(self, class_name: str) -> Optional[str]:
        """Return the file :meth:`autoload` would load for a class, without loading it.

        Args:
            class_name: The class name to look up.

        Returns:
            The class file path, or None if no strategy matched.
        """
        class_map = self._registry.class_map
        if class_name in class_map:
            return class_map[class_name]

        if NAMESPACE_SEPARATOR in class_name:
            alias = ALIAS_PREFIX + class_name.lstrip(NAMESPACE_SEPARATOR).replace(NAMESPACE_SEPARATOR, ALIAS_SEPARATOR)
            path = self._aliases.get_alias(alias)
            return None if path is None else path + CLASS_FILE_EXTENSION

        if COMPOUND_SEPARATOR in class_name:
            alias = ALIAS_PREFIX + class_name.replace(COMPOUND_SEPARATOR, ALIAS_SEPARATOR)
            path = self._aliases.get_alias(alias)
            if path is not None:
                return path + CLASS_FILE_EXTENSION

        for directory in self._registry.class_path:
            class_file = os.path.join(directory, class_name + CLASS_FILE_EXTENSION)
            if os.path.isfile(class_file):
                return class_file
        return None

    def _remember(self, identifier: str, kind: ImportKind, result: str) -> str:
        self._registry.imported[identifier] = ImportRecord(identifier=identifier, kind=kind, result=result)
        return result

    def _include(self, class_file: str, class_name: str) -> None:
        """Load a class file and register the class it defines.

        The attribute looked up in the module is the last segment of the
        class name; for compound names the last compound part is tried too.

        Raises:
            ClassNotFoundError: If the file does not exist or lacks the class.
        """
        module = self._load_file(class_file, class_name)
        short_name = class_name.rsplit(NAMESPACE_SEPARATOR, 1)[-1]
        for attribute in dict.fromkeys([short_name, short_name.rsplit(COMPOUND_SEPARATOR, 1)[-1]]):
            factory = getattr(module, attribute, None)
            if factory is not None:
                self._registry.define_class(class_name, factory)
                return
        raise ClassNotFoundError(class_name, f"{class_file} does not define {short_name}")

    def _load_file(self, class_file: str, class_name: str) -> ModuleType:
        loaded = self._registry.loaded_files.get(class_file)
        if loaded is not None:
            return loaded

        if not os.path.isfile(class_file):
            raise ClassNotFoundError(class_name, f"class file {class_file} does not exist")

        module_name = LOADED_MODULE_PREFIX + "_" + re.sub(r"\W", "_", os.path.abspath(class_file))
        spec = importlib.util.spec_from_file_location(module_name, class_file)
        if spec is None or spec.loader is None:
            raise ClassNotFoundError(class_name, f"cannot load class file {class_file}")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except BaseException:
            sys.modules.pop(module_name, None)
            raise

        self._registry.loaded_files[class_file] = module
        logger.debug("Loaded class file %s for %s", class_file, class_name)
        return module
