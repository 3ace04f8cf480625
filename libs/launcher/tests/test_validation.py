"""Unit tests for configuration validation."""

import pytest

from launcher.errors import InvalidValueError, MissingRequiredFieldError
from launcher.models import LaunchConfiguration, LauncherType, Platform
from launcher.validation import find_missing_fields, validate_configuration


def make_config(**kwargs) -> LaunchConfiguration:
    values = {
        "name": "hello-console",
        "domain": "com.example",
        "short_description": "Hello console",
        "main_class": "com.example.Hello",
        "type": LauncherType.CONSOLE,
        "platforms": {Platform.LINUX},
    }
    values.update(kwargs)
    return LaunchConfiguration(**values)


class TestFindMissingFields:
    """Tests for find_missing_fields."""

    def test_complete(self):
        """Test a complete configuration has nothing missing."""
        assert find_missing_fields(make_config()) == []

    def test_none_and_blank(self):
        """Test None and whitespace-only values count as missing."""
        config = make_config(domain=None, main_class="  ", type=None)

        assert find_missing_fields(config) == ["domain", "main_class", "type"]

    def test_empty_platforms(self):
        """Test an empty platform set is missing."""
        assert find_missing_fields(make_config(platforms=set())) == ["platforms"]
        assert find_missing_fields(make_config(platforms=None)) == ["platforms"]


class TestValidateConfiguration:
    """Tests for validate_configuration."""

    def test_valid(self):
        """Test a valid configuration passes."""
        validate_configuration(make_config(min_java_memory=64, max_java_memory_pct=50))

    def test_missing_fields_are_all_reported(self):
        """Test every missing field is listed at once."""
        config = make_config(name=None, short_description="", platforms=set())

        with pytest.raises(MissingRequiredFieldError) as exc_info:
            validate_configuration(config)

        assert exc_info.value.fields == ["name", "short_description", "platforms"]

    def test_none_platform_member(self):
        """Test a None member of the platform set is rejected."""
        config = make_config(platforms={Platform.LINUX, None})

        with pytest.raises(InvalidValueError) as exc_info:
            validate_configuration(config)

        assert exc_info.value.field == "platforms"

    def test_negative_lifetime(self):
        """Test a negative daemon lifetime is rejected."""
        with pytest.raises(InvalidValueError) as exc_info:
            validate_configuration(make_config(daemon_min_lifetime=-1))

        assert exc_info.value.field == "daemon_min_lifetime"

    def test_negative_memory(self):
        """Test negative absolute memory is rejected."""
        with pytest.raises(InvalidValueError):
            validate_configuration(make_config(max_java_memory=-512))

    @pytest.mark.parametrize("pct", [0, 101])
    def test_memory_percent_range(self, pct):
        """Test percentages outside 1..100 are rejected."""
        with pytest.raises(InvalidValueError):
            validate_configuration(make_config(min_java_memory_pct=pct))

    def test_absolute_and_percent_not_cross_checked(self):
        """Test min and max in different units are accepted as given."""
        validate_configuration(make_config(min_java_memory=4096, max_java_memory_pct=1))
