"""Launcher configuration core package"""

from launcher.errors import (
    ConfigFileError,
    InvalidPlatformNameError,
    InvalidValueError,
    LauncherConfigError,
    MissingRequiredFieldError,
    UnknownFieldError,
)
from launcher.models import (
    DaemonMethod,
    LaunchConfiguration,
    LauncherType,
    Platform,
    PlatformOverride,
    ResolvedPlatform,
    WorkingDirMode,
    default_platform_overrides,
)
from launcher.services import ConfigLoader, build_configuration
from launcher.validation import find_missing_fields, validate_configuration

__all__ = [
    # Models
    "DaemonMethod",
    "LaunchConfiguration",
    "LauncherType",
    "Platform",
    "PlatformOverride",
    "ResolvedPlatform",
    "WorkingDirMode",
    "default_platform_overrides",
    # Errors
    "ConfigFileError",
    "InvalidPlatformNameError",
    "InvalidValueError",
    "LauncherConfigError",
    "MissingRequiredFieldError",
    "UnknownFieldError",
    # Services
    "ConfigLoader",
    "build_configuration",
    "find_missing_fields",
    "validate_configuration",
]
