"""Validation of launch configurations before generation."""

from launcher.errors import InvalidValueError, MissingRequiredFieldError
from launcher.models.configuration import REQUIRED_FIELDS, LaunchConfiguration
from launcher_logging import get_logger

logger = get_logger('validation')


def find_missing_fields(config: LaunchConfiguration) -> list[str]:
    """List required fields that are unset, blank, or (for platforms) empty."""
    missing = []
    for name in REQUIRED_FIELDS:
        value = getattr(config, name)
        if value is None:
            missing.append(name)
        elif isinstance(value, str) and not value.strip():
            missing.append(name)
        elif name == "platforms" and not value:
            missing.append(name)
    return missing


def validate_configuration(config: LaunchConfiguration) -> None:
    """Check required fields and numeric ranges.

    Absolute and percentage memory settings are checked independently of
    each other.

    Args:
        config: Configuration to validate

    Raises:
        MissingRequiredFieldError: If any required field is missing
        InvalidValueError: If a numeric setting is out of range or the
            platform set contains None
    """
    missing = find_missing_fields(config)
    if missing:
        logger.debug("Configuration is missing required fields", launcher=config.name, fields=missing)
        raise MissingRequiredFieldError(missing)

    if None in config.platforms:
        raise InvalidValueError("platforms", config.platforms, "platform set must not contain None")

    if config.daemon_min_lifetime is not None and config.daemon_min_lifetime < 0:
        raise InvalidValueError("daemon_min_lifetime", config.daemon_min_lifetime, "must not be negative")

    for name in ("min_java_memory", "max_java_memory"):
        value = getattr(config, name)
        if value is not None and value < 0:
            raise InvalidValueError(name, value, "must not be negative")

    for name in ("min_java_memory_pct", "max_java_memory_pct"):
        value = getattr(config, name)
        if value is not None and not 1 <= value <= 100:
            raise InvalidValueError(name, value, "must be between 1 and 100")

    logger.debug("Configuration is valid", launcher=config.name, platforms=sorted(p.value for p in config.platforms))
