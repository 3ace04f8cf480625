"""Services that feed configurations into the core."""

from launcher.services.config_loader import (
    ConfigLoader,
    build_configuration,
    parse_platform_override,
)

__all__ = [
    "ConfigLoader",
    "build_configuration",
    "parse_platform_override",
]
