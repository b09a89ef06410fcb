"""Tests for the exception hierarchy and error handling helpers."""

import logging

import pytest
from pydantic import BaseModel, Field, ValidationError

from g13profile.exceptions import (
    ConfigDirectoryError,
    ConfigFileInvalidError,
    ConfigValidationError,
    DaemonLaunchError,
    ErrorContext,
    G13ProfileError,
    NoModesDefinedError,
    ProfileNotFoundError,
    StartingModeUndefinedError,
    StartupTimeoutError,
    format_error_for_display,
    wrap_pydantic_error,
)


class Limits(BaseModel):
    low: int = Field(ge=0)
    high: int = Field(le=10)


class TestExitCodes:
    """Test the exit status carried by each error class."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "error,code",
        [
            (G13ProfileError("boom"), 1),
            (ConfigDirectoryError("/nope"), 2),
            (ProfileNotFoundError("x", "/dir"), 2),
            (ConfigFileInvalidError("/dir/x.toml", "Invalid TOML"), 2),
            (ConfigValidationError("meta.rgb", 300, "too big"), 3),
            (NoModesDefinedError(), 3),
            (StartingModeUndefinedError("x", ["a"]), 3),
            (StartupTimeoutError("/tmp/g13-0_out", 30), 4),
            (DaemonLaunchError(["g13d"], "not found"), 4),
        ],
    )
    def test_exit_code(self, error, code):
        """Test that every error maps to its documented status."""
        assert error.exit_code == code
        assert isinstance(error, G13ProfileError)


class TestG13ProfileError:
    """Test the base error."""

    @pytest.mark.unit
    def test_messages(self):
        """Test defaults and the full message with hint."""
        error = G13ProfileError("short", recovery_hint="do this")
        assert str(error) == "short"
        assert error.technical_message == "short"
        assert error.get_full_message() == "short\n\nSuggestion: do this"

    @pytest.mark.unit
    def test_syntax_error_hint(self):
        """Test that parse errors get a TOML syntax hint."""
        error = ConfigFileInvalidError("a.toml", "Invalid TOML: Expected '=' after a key")
        assert "syntax error" in error.user_message
        assert "TOML" in error.recovery_hint


class TestWrapPydanticError:
    """Test conversion of pydantic errors."""

    @pytest.mark.unit
    def test_single_error(self):
        """Test that one failing field is named."""
        with pytest.raises(ValidationError) as exc_info:
            Limits(low=-1, high=5)

        error = wrap_pydantic_error(exc_info.value, "cfg.toml")

        assert isinstance(error, ConfigValidationError)
        assert error.field == "low"
        assert error.value == -1
        assert error.file_path == "cfg.toml"

    @pytest.mark.unit
    def test_multiple_errors(self):
        """Test that several failures are summarized."""
        with pytest.raises(ValidationError) as exc_info:
            Limits(low=-1, high=50)

        error = wrap_pydantic_error(exc_info.value, "cfg.toml")

        assert error.field == "multiple fields"
        assert "2 validation errors" in error.user_message

    @pytest.mark.unit
    def test_other_exception(self):
        """Test that non-pydantic errors still become ConfigValidationError."""
        error = wrap_pydantic_error(ValueError("odd"), "cfg.toml")
        assert error.field == "unknown"


class TestFormatErrorForDisplay:
    """Test user facing error text."""

    @pytest.mark.unit
    def test_app_error(self):
        """Test that app errors show their user message, and the hint on request."""
        error = StartingModeUndefinedError("x", ["a", "b"])
        assert format_error_for_display(error) == "startingMode 'x' is undefined!"
        assert format_error_for_display(error, with_hint=True) == (
            "startingMode 'x' is undefined!\n\nSuggestion: Set startingMode to one of: a, b"
        )

    @pytest.mark.unit
    def test_other_error(self):
        """Test that other errors show their type."""
        error = BrokenPipeError("gone")
        assert format_error_for_display(error) == "BrokenPipeError: gone"
        assert format_error_for_display(error, with_hint=True) == "BrokenPipeError: gone"


class TestErrorContext:
    """Test the logging context manager."""

    @pytest.mark.unit
    def test_re_raises_and_logs(self, caplog):
        """Test that errors are logged and propagated."""
        with caplog.at_level(logging.ERROR):
            with pytest.raises(OSError):
                with ErrorContext("open pipe"):
                    raise OSError("denied")

        assert "Failed to open pipe: denied" in caplog.text

    @pytest.mark.unit
    def test_suppress(self):
        """Test that re_raise=False swallows and records the error."""
        with ErrorContext("open pipe", re_raise=False) as ctx:
            raise OSError("denied")

        assert isinstance(ctx.error, OSError)
