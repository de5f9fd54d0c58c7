from typing import Dict, List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BootSettings(BaseSettings):
    """Bootstrap settings loaded from the environment.

    Environment variables use the MIRAVEJA_BOOT_ prefix, for example
    MIRAVEJA_BOOT_BASE_PATH or MIRAVEJA_BOOT_ALIASES='{"@web": "/srv/www"}'.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MIRAVEJA_BOOT_",
        extra="ignore",
    )

    debug: bool = Field(default=False, description="Whether to log package diagnostics at debug level.")
    log_level: str = Field(default="WARNING", description="Level of the package logger when not in debug mode.")
    base_path: Optional[str] = Field(default=None, description="Application base path, registered as @app.")
    runtime_path: Optional[str] = Field(
        default=None,
        description="Runtime path, registered as @runtime. Defaults to @app/runtime when base_path is set.",
    )
    aliases: Dict[str, str] = Field(default_factory=dict, description="Additional aliases, in registration order.")
    class_map: Dict[str, str] = Field(default_factory=dict, description="Class name => class file overrides.")
    class_path: List[str] = Field(default_factory=list, description="Class search directories, first searched first.")
    log_file: Optional[str] = Field(default=None, description="Log file path or alias. Disables file logging if unset.")
    max_file_size: int = Field(default=1024, description="Log file size in kilobytes that triggers a rotation.")
    max_log_files: int = Field(default=5, description="Number of rotated log files to keep.")
