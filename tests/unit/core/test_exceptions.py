# tests/unit/core/test_exceptions.py
# Unit tests for exception hierarchy & error message formatting

from countdown.core.exceptions import (
    CountdownError,
    ConfigurationError,
    InvalidDurationError,
    JSONParsingError,
    SettingsValidationError,
    format_error_message,
)


# * Test format_error_message helper
class TestFormatErrorMessage:

    # * Produces Rich markup w/ red error type
    def test_format_error_message_basic(self):
        assert format_error_message("Error", "boom") == "[red]Error:[/] boom"


# * Test hierarchy & attributes
class TestHierarchy:

    # * All custom errors share CountdownError base
    def test_base_class(self):
        for cls in (ConfigurationError, InvalidDurationError, JSONParsingError, SettingsValidationError):
            assert issubclass(cls, CountdownError)

    # * Input & settings errors are also ValueErrors
    def test_value_error_compat(self):
        assert issubclass(InvalidDurationError, ValueError)
        assert issubclass(SettingsValidationError, ValueError)
        assert issubclass(SettingsValidationError, ConfigurationError)

    # * InvalidDurationError carries the offending value
    def test_invalid_duration_attributes(self):
        err = InvalidDurationError("bad", value="x")
        assert err.value == "x"
        assert str(err) == "bad"
        assert repr(err) == "InvalidDurationError('bad', value='x')"

    # * SettingsValidationError carries name & value
    def test_settings_validation_attributes(self):
        err = SettingsValidationError("nope", "tick_interval_ms", 0)
        assert err.setting_name == "tick_interval_ms"
        assert err.value == 0
        assert "setting_name='tick_interval_ms'" in repr(err)
