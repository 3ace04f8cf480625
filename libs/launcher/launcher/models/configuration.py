"""Launch configuration model and per-platform resolution."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from launcher.errors import InvalidValueError, MissingRequiredFieldError
from launcher.models.platform import (
    DaemonMethod,
    Platform,
    PlatformOverride,
    default_platform_overrides,
)


class LauncherType(str, Enum):
    """Whether the launcher runs in the foreground or as a daemon."""
    CONSOLE = "CONSOLE"
    DAEMON = "DAEMON"


class WorkingDirMode(str, Enum):
    """Working directory the launched process starts in."""
    RETAIN = "RETAIN"
    APP_HOME = "APP_HOME"


# Platforms that read another platform's value when they have none of their
# own, tried in order.
PLATFORM_FALLBACKS: dict[Platform, tuple[Platform, ...]] = {
    Platform.MAC_OSX: (Platform.LINUX,),
}

# Override fields and whether they walk PLATFORM_FALLBACKS. Directory
# overrides stay per-platform: MAC_OSX does not inherit LINUX's log/run dirs.
FIELD_FALLBACK_POLICY: dict[str, bool] = {
    "daemon_method": True,
    "user": True,
    "group": True,
    "prefix_dir": True,
    "log_dir": False,
    "run_dir": False,
}

REQUIRED_FIELDS: tuple[str, ...] = (
    "name",
    "domain",
    "short_description",
    "main_class",
    "type",
    "platforms",
)

_DEFAULT_WORKING_DIR_MODES = {
    LauncherType.CONSOLE: WorkingDirMode.RETAIN,
    LauncherType.DAEMON: WorkingDirMode.APP_HOME,
}


@dataclass
class ResolvedPlatform:
    """Fully resolved override values for one platform.

    Attributes:
        platform: Platform the values were resolved for
        daemon_method: Resolved daemon method, with fallback
        user: Resolved run-as user, with fallback
        group: Resolved run-as group, with fallback
        prefix_dir: Resolved install prefix, with fallback
        log_dir: The platform's own log dir override, if any
        run_dir: The platform's own run dir override, if any
    """

    platform: Platform
    daemon_method: DaemonMethod | None = None
    user: str | None = None
    group: str | None = None
    prefix_dir: str | None = None
    log_dir: str | None = None
    run_dir: str | None = None


@dataclass
class LaunchConfiguration:
    """Describes the launcher(s) to generate.

    Required fields are constructor arguments; everything else carries the
    conventional default. Renderers must go through the ``platform_*``
    queries rather than reading ``platform_overrides`` so that fallback is
    applied.

    Attributes:
        name: Unique launcher identifier
        domain: Reverse-DNS namespace (e.g., 'com.example')
        short_description: One-line description
        main_class: Fully qualified Java entry class
        type: CONSOLE or DAEMON
        platforms: Platforms to generate launchers for
        display_name: Human-friendly name, defaults to name
        long_description: Longer description
        working_dir_mode: Explicit working dir mode, derived from type if unset
        min_java_memory: Minimum heap in MB
        max_java_memory: Maximum heap in MB
        min_java_memory_pct: Minimum heap as percent of system memory
        max_java_memory_pct: Maximum heap as percent of system memory
        include_java_xrs: Pass -Xrs so signals do not produce abrupt exit codes
        symlink_java: Symlink the java binary to a friendly process name
            (only safe when the app name is unique among daemons)
        include_java_detect_helper: Ship the java-detect helper script
        daemon_min_lifetime: Seconds a daemon must survive to count as started
        platform_overrides: Per-platform overrides, seeded with built-ins
        systemd_service_section: Raw text merged into the systemd [Service] section
        source_path: File this configuration was loaded from, if any
    """

    name: str
    domain: str
    short_description: str
    main_class: str
    type: LauncherType
    platforms: set[Platform]
    display_name: str | None = None
    long_description: str | None = None

    bin_dir: str = "bin"
    run_dir: str = "run"
    share_dir: str = "share"
    log_dir: str = "log"
    lib_dir: str = "lib"

    working_dir_mode: WorkingDirMode | None = None
    app_args: str = ""
    java_args: str = ""
    extra_app_args: str = ""
    extra_java_args: str = ""

    min_java_version: str = "1.6"
    max_java_version: str | None = None
    min_java_memory: int | None = None
    max_java_memory: int | None = None
    min_java_memory_pct: int | None = None
    max_java_memory_pct: int | None = None

    include_java_xrs: bool = True
    symlink_java: bool = False
    include_java_detect_helper: bool = False
    daemon_min_lifetime: int = 5

    platform_overrides: dict[Platform, PlatformOverride] = field(
        default_factory=default_platform_overrides
    )
    systemd_service_section: str | None = None
    source_path: Path | None = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        if self.platforms is not None:
            self.platforms = {Platform.parse(p) for p in self.platforms}
        if self.platform_overrides is not None:
            overrides = {}
            for key, override in self.platform_overrides.items():
                platform = Platform.parse(key)
                if platform in overrides:
                    raise InvalidValueError(
                        "platform_overrides", key, f"duplicate entry for platform {platform.value}"
                    )
                overrides[platform] = override
            self.platform_overrides = overrides

    def resolve_display_name(self) -> str:
        """Display name, falling back to name."""
        return self.display_name if self.display_name is not None else self.name

    def resolve_working_dir_mode(self) -> WorkingDirMode:
        """Explicit working dir mode, else the default for the launcher type.

        Raises:
            MissingRequiredFieldError: If neither a mode nor a type is set
        """
        if self.working_dir_mode is not None:
            return self.working_dir_mode
        if self.type is None:
            raise MissingRequiredFieldError("type")
        return _DEFAULT_WORKING_DIR_MODES[LauncherType(self.type)]

    def platform_override(self, platform: Platform | str | None) -> PlatformOverride | None:
        """Direct lookup of a platform's override entry, without fallback.

        Raises:
            InvalidPlatformNameError: If a platform name is not recognized
        """
        platform = Platform.parse(platform)
        if platform is None or not self.platform_overrides:
            return None
        return self.platform_overrides.get(platform)

    def platform_daemon_method(self, platform: Platform | str | None) -> DaemonMethod | None:
        return self._resolve("daemon_method", platform)

    def platform_user(self, platform: Platform | str | None) -> str | None:
        return self._resolve("user", platform)

    def platform_group(self, platform: Platform | str | None) -> str | None:
        return self._resolve("group", platform)

    def platform_prefix_dir(self, platform: Platform | str | None) -> str | None:
        return self._resolve("prefix_dir", platform)

    def platform_log_dir(self, platform: Platform | str | None) -> str | None:
        return self._resolve("log_dir", platform)

    def platform_run_dir(self, platform: Platform | str | None) -> str | None:
        return self._resolve("run_dir", platform)

    def resolved_platform_values(self, platform: Platform | str) -> ResolvedPlatform:
        """Resolve every override field for a platform at once."""
        platform = Platform.parse(platform)
        return ResolvedPlatform(
            platform=platform,
            **{name: self._resolve(name, platform) for name in FIELD_FALLBACK_POLICY},
        )

    def resolved_platforms(self) -> list[ResolvedPlatform]:
        """Resolved values for each selected platform, in declaration order."""
        selected = self.platforms or set()
        return [self.resolved_platform_values(p) for p in Platform if p in selected]

    def _resolve(self, field_name: str, platform: Platform | str | None):
        """Look up an override field, walking the fallback chain if allowed.

        Args:
            field_name: PlatformOverride attribute to read
            platform: Platform constant or name

        Returns:
            First value that is not None, or None
        """
        platform = Platform.parse(platform)
        if platform is None:
            return None

        candidates = (platform,)
        if FIELD_FALLBACK_POLICY[field_name]:
            candidates += PLATFORM_FALLBACKS.get(platform, ())

        for candidate in candidates:
            override = self.platform_override(candidate)
            if override is None:
                continue
            value = getattr(override, field_name)
            if value is not None:
                return value
        return None
