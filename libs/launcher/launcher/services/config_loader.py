"""Builds launch configurations from mappings and YAML/JSON files."""

import json
import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from launcher.errors import (
    ConfigFileError,
    InvalidValueError,
    MissingRequiredFieldError,
    UnknownFieldError,
)
from launcher.models import (
    REQUIRED_FIELDS,
    DaemonMethod,
    LaunchConfiguration,
    LauncherType,
    Platform,
    PlatformOverride,
    WorkingDirMode,
    default_platform_overrides,
)
from launcher_logging import get_logger

CONFIG_PATH_ENV = "LAUNCHER_CONFIG_PATH"
DEFAULT_CONFIG_FILES = ("launcher.yaml", "launcher.yml")

# File keys accepted for the per-platform override map
OVERRIDES_KEYS = ("platform_overrides", "platform_configurations")

_STR_FIELDS = frozenset({
    "name", "display_name", "domain", "short_description", "long_description",
    "main_class", "bin_dir", "run_dir", "share_dir", "log_dir", "lib_dir",
    "app_args", "java_args", "extra_app_args", "extra_java_args",
    "min_java_version", "max_java_version", "systemd_service_section",
})
_INT_FIELDS = frozenset({
    "min_java_memory", "max_java_memory",
    "min_java_memory_pct", "max_java_memory_pct",
    "daemon_min_lifetime",
})
_BOOL_FIELDS = frozenset({"include_java_xrs", "symlink_java", "include_java_detect_helper"})
_ENUM_FIELDS: dict[str, type[Enum]] = {
    "type": LauncherType,
    "working_dir_mode": WorkingDirMode,
}
_OVERRIDE_STR_FIELDS = frozenset({"user", "group", "prefix_dir", "run_dir", "log_dir"})

logger = get_logger('config')


def _parse_enum(enum_cls: type[Enum], field: str, value: Any):
    if value is None or isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        member = enum_cls.__members__.get(value.strip().upper())
        if member is not None:
            return member
    choices = ", ".join(enum_cls.__members__)
    raise InvalidValueError(field, value, f"expected one of {choices}")


def _parse_int(field: str, value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidValueError(field, value, "expected an integer")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError as e:
        raise InvalidValueError(field, value, "expected an integer") from e


def _parse_bool(field: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise InvalidValueError(field, value, "expected true or false")


def _parse_str(value: Any) -> str | None:
    # YAML reads unquoted versions like 1.8 as numbers
    return None if value is None else str(value)


def _parse_platforms(value: Any) -> set[Platform]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple, set)):
        raise InvalidValueError("platforms", value, "expected a list of platform names")
    if any(p is None for p in value):
        raise InvalidValueError("platforms", value, "platform names must not be null")
    return {Platform.parse(p) for p in value}


def parse_platform_override(data: Mapping[str, Any] | None, platform: Platform) -> PlatformOverride:
    """Build a PlatformOverride from a mapping of its fields.

    Raises:
        UnknownFieldError: If the mapping has a key PlatformOverride lacks
        InvalidValueError: If the entry is not a mapping or daemon_method is
            not a known method
    """
    if data is None:
        return PlatformOverride()
    if not isinstance(data, Mapping):
        raise InvalidValueError(f"platform {platform.value}", data, "expected a mapping of override fields")

    override = PlatformOverride()
    for key, value in data.items():
        if key == "daemon_method":
            override.daemon_method = _parse_enum(DaemonMethod, key, value)
        elif key in _OVERRIDE_STR_FIELDS:
            setattr(override, key, _parse_str(value))
        else:
            raise UnknownFieldError(key, section=f"platform {platform.value}")
    return override


def build_configuration(data: Mapping[str, Any], source_path: Path | None = None) -> LaunchConfiguration:
    """Build a LaunchConfiguration from a mapping of snake_case keys.

    Platform entries in the mapping replace the built-in default for that
    platform; platforms it does not mention keep their built-in defaults.

    Args:
        data: Parsed configuration
        source_path: File the data was read from

    Returns:
        Populated configuration

    Raises:
        MissingRequiredFieldError: If required keys are absent or null
        UnknownFieldError: If a key maps to no field
        InvalidValueError: If a value cannot be converted
        InvalidPlatformNameError: If a platform name is not recognized
    """
    missing = [name for name in REQUIRED_FIELDS if data.get(name) is None]
    if missing:
        raise MissingRequiredFieldError(missing)

    kwargs: dict[str, Any] = {}
    overrides = default_platform_overrides()
    seen: set[Platform] = set()

    for key, value in data.items():
        if key in OVERRIDES_KEYS:
            if value is None:
                continue
            if not isinstance(value, Mapping):
                raise InvalidValueError(key, value, "expected a mapping of platform to settings")
            for platform_name, entry in value.items():
                platform = Platform.parse(platform_name)
                if platform in seen:
                    raise InvalidValueError(key, platform_name, f"duplicate entry for platform {platform.value}")
                seen.add(platform)
                overrides[platform] = parse_platform_override(entry, platform)
        elif key == "platforms":
            kwargs[key] = _parse_platforms(value)
        elif key in _ENUM_FIELDS:
            kwargs[key] = _parse_enum(_ENUM_FIELDS[key], key, value)
        elif key in _INT_FIELDS:
            kwargs[key] = _parse_int(key, value)
        elif key in _BOOL_FIELDS:
            kwargs[key] = _parse_bool(key, value)
        elif key in _STR_FIELDS:
            kwargs[key] = _parse_str(value)
        else:
            raise UnknownFieldError(key)

    return LaunchConfiguration(
        platform_overrides=overrides,
        source_path=source_path,
        **kwargs,
    )


class ConfigLoader:
    """Locates and loads a launcher configuration file."""

    def __init__(self, config_path: Path | str | None = None):
        """Initialize the loader.

        Args:
            config_path: Explicit file; otherwise $LAUNCHER_CONFIG_PATH, then
                launcher.yaml or launcher.yml in the working directory
        """
        if config_path is None:
            config_path = os.getenv(CONFIG_PATH_ENV)
        if config_path is None:
            config_path = next(
                (name for name in DEFAULT_CONFIG_FILES if Path(name).exists()),
                DEFAULT_CONFIG_FILES[0],
            )
        self.config_path = Path(config_path).expanduser()

    def read_data(self) -> dict[str, Any]:
        """Read the raw mapping from the configuration file.

        Raises:
            ConfigFileError: If the file is missing, unreadable, or malformed
        """
        if not self.config_path.exists():
            raise ConfigFileError(f"Config file not found: {self.config_path}")

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                if self.config_path.suffix in [".yaml", ".yml"]:
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except OSError as e:
            raise ConfigFileError(f"Cannot read {self.config_path}: {e}") from e
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigFileError(f"Cannot parse {self.config_path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigFileError(f"Expected a mapping at the top of {self.config_path}")
        return data

    def load(self) -> LaunchConfiguration:
        """Load the configuration file into a LaunchConfiguration."""
        config = build_configuration(self.read_data(), source_path=self.config_path)
        logger.info(
            "Loaded launch configuration",
            path=str(self.config_path),
            launcher=config.name,
            type=config.type.value,
        )
        return config
