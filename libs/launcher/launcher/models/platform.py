from dataclasses import dataclass
from enum import Enum

from launcher.errors import InvalidPlatformNameError


class Platform(str, Enum):
    """Operating system a launcher can be generated for."""
    LINUX = "LINUX"
    MAC_OSX = "MAC_OSX"
    WINDOWS = "WINDOWS"

    @classmethod
    def parse(cls, value: "Platform | str | None") -> "Platform | None":
        """Coerce a platform constant or its name into a Platform.

        Names are matched case-insensitively. None passes through unchanged.

        Raises:
            InvalidPlatformNameError: If a name matches no known platform
        """
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, str):
            member = cls.__members__.get(value.strip().upper())
            if member is not None:
                return member
        raise InvalidPlatformNameError(value)


class DaemonMethod(str, Enum):
    """Mechanism used to background and supervise a daemon process."""
    NOHUP = "NOHUP"
    JSLWIN = "JSLWIN"
    WINSW = "WINSW"


@dataclass
class PlatformOverride:
    """Platform-specific values layered over the global configuration.

    Every field is optional. None means "not configured"; an empty string is
    a configured value. Fallback between platforms is decided by
    LaunchConfiguration, never here.

    Attributes:
        daemon_method: How daemons are backgrounded (DAEMON launchers only)
        user: Account the daemon runs as
        group: Group the daemon runs as
        prefix_dir: Install path prefix (e.g., '/opt')
        run_dir: Override for the run directory on this platform
        log_dir: Override for the log directory on this platform
    """

    daemon_method: DaemonMethod | None = None
    user: str | None = None
    group: str | None = None
    prefix_dir: str | None = None
    run_dir: str | None = None
    log_dir: str | None = None


def default_platform_overrides() -> dict[Platform, PlatformOverride]:
    """Build the built-in overrides every configuration starts with.

    MAC_OSX is left out so that it inherits from LINUX.

    Returns:
        A new mapping on every call
    """
    return {
        Platform.LINUX: PlatformOverride(
            daemon_method=DaemonMethod.NOHUP,
            prefix_dir="/opt",
        ),
        Platform.WINDOWS: PlatformOverride(daemon_method=DaemonMethod.JSLWIN),
    }
