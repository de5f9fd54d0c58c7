import logging
from typing import Optional

from miraveja_boot.application import Kernel
from miraveja_boot.domain import ColumnSchema, Registry
from miraveja_boot.infrastructure.log_targets import FileTarget
from miraveja_boot.infrastructure.settings import BootSettings

APP_ALIAS = "@app"
RUNTIME_ALIAS = "@runtime"
PACKAGE_LOGGER = "miraveja_boot"


def bootstrap(settings: Optional[BootSettings] = None, registry: Optional[Registry] = None) -> Kernel:
    """Build a kernel configured from settings.

    Registers ``@app`` and ``@runtime``, the configured aliases, class map
    and search path, defines the built-in classes and, when ``log_file`` is
    set, attaches a file log target to the root logger.

    Args:
        settings: Settings to apply. Loaded from the environment when omitted.
        registry: Registry for the kernel. A new one is created when omitted.

    Returns:
        The configured kernel.

    Raises:
        InvalidAliasError: If a configured alias cannot be resolved.
        InvalidConfigError: If the log target configuration is invalid.

    Example:
        >>> kernel = bootstrap(BootSettings(base_path="/var/www/app"))
        >>> kernel.get_alias("@runtime")
        '/var/www/app/runtime'
    """
    settings = settings if settings is not None else BootSettings()
    kernel = Kernel(registry)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG if settings.debug else settings.log_level.upper())

    if settings.base_path:
        kernel.set_alias(APP_ALIAS, settings.base_path)
    runtime_path = settings.runtime_path or (f"{APP_ALIAS}/runtime" if settings.base_path else None)
    if runtime_path:
        kernel.set_alias(RUNTIME_ALIAS, runtime_path)
    kernel.aliases.set_aliases(settings.aliases)

    kernel.registry.class_map.update(settings.class_map)
    kernel.registry.class_path.extend(settings.class_path)
    kernel.define_classes(
        {
            "FileTarget": FileTarget,
            "ColumnSchema": ColumnSchema,
        }
    )

    if settings.log_file:
        target = kernel.create(
            {
                "class": "FileTarget",
                "log_file": settings.log_file,
                "max_file_size": settings.max_file_size,
                "max_log_files": settings.max_log_files,
            },
            kernel.aliases,
        )
        kernel.attach_log_target(target)

    return kernel
