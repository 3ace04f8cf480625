"""Launch configuration data model."""

from launcher.models.configuration import (
    FIELD_FALLBACK_POLICY,
    PLATFORM_FALLBACKS,
    REQUIRED_FIELDS,
    LaunchConfiguration,
    LauncherType,
    ResolvedPlatform,
    WorkingDirMode,
)
from launcher.models.platform import (
    DaemonMethod,
    Platform,
    PlatformOverride,
    default_platform_overrides,
)

__all__ = [
    "FIELD_FALLBACK_POLICY",
    "PLATFORM_FALLBACKS",
    "REQUIRED_FIELDS",
    "DaemonMethod",
    "LaunchConfiguration",
    "LauncherType",
    "Platform",
    "PlatformOverride",
    "ResolvedPlatform",
    "WorkingDirMode",
    "default_platform_overrides",
]
