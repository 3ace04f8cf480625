"""Errors raised while building, loading, or querying launch configurations."""


class LauncherConfigError(Exception):
    """Base class for every launcher configuration error."""


class InvalidPlatformNameError(LauncherConfigError, ValueError):
    """A platform name did not match any known platform."""

    def __init__(self, name: object):
        self.name = name
        super().__init__(f"Invalid platform name: {name!r}")


class InvalidValueError(LauncherConfigError, ValueError):
    """A field held a value outside of what it accepts."""

    def __init__(self, field: str, value: object, reason: str = ""):
        self.field = field
        self.value = value
        message = f"Invalid value for {field}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MissingRequiredFieldError(LauncherConfigError):
    """One or more required fields were not provided."""

    def __init__(self, fields: list[str] | str):
        self.fields = [fields] if isinstance(fields, str) else list(fields)
        super().__init__(f"Missing required field(s): {', '.join(self.fields)}")


class UnknownFieldError(LauncherConfigError):
    """A configuration source contained a key that maps to no field."""

    def __init__(self, field: str, section: str = "configuration"):
        self.field = field
        self.section = section
        super().__init__(f"Unknown field in {section}: {field!r}")


class ConfigFileError(LauncherConfigError):
    """A configuration file could not be read or parsed."""
