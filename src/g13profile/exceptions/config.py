"""Configuration-related exceptions.

Lookup and syntax problems exit with status 2, problems with the content of
an otherwise readable profile exit with status 3:

- ConfigurationError: Base class for configuration errors
- ConfigDirectoryError: Config directory missing or unreadable
- ProfileNotFoundError: No profile file matches the requested name
- ConfigFileInvalidError: Profile file unreadable or has invalid TOML syntax
- ConfigSemanticError: Base class for content errors
- ConfigValidationError: Values fail schema validation
- NoModesDefinedError: Profile has no modes
- StartingModeUndefinedError: meta.startingMode names a missing mode
"""

from typing import Any, Optional

from .base import G13ProfileError


class ConfigurationError(G13ProfileError):
    """Configuration is invalid or cannot be loaded."""

    exit_code = 2


class ConfigDirectoryError(ConfigurationError):
    """Config directory does not exist or is not a directory."""

    def __init__(self, directory: str):
        super().__init__(
            user_message=f"'{directory}' no such directory!",
            technical_message=f"Config directory {directory} is missing or not a directory",
            recovery_hint="Pass an existing directory with --config-dir",
        )
        self.directory = directory


class ProfileNotFoundError(ConfigurationError):
    """No profile file matches the requested name."""

    def __init__(self, profile: str, config_dir: str):
        """
        Initialize profile not found error.

        Args:
            profile: The requested profile name
            config_dir: Directory that was searched
        """
        super().__init__(
            user_message=f"profile '{profile}' could not be found in '{config_dir}'!",
            technical_message=f"Neither {config_dir}/{profile} nor {config_dir}/{profile}.toml exists",
            recovery_hint=f"Create '{profile}.toml' in {config_dir} or choose another profile",
        )
        self.profile = profile
        self.config_dir = config_dir


class ConfigFileInvalidError(ConfigurationError):
    """Profile file cannot be read or has invalid TOML syntax."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Initialize config file invalid error.

        Args:
            file_path: Path to the invalid config file
            parse_error: The read or parse error message
        """
        user_msg = f"config '{file_path}' could not be read!"
        recovery = f"Check file permissions and TOML syntax of {file_path}"

        lowered = parse_error.lower()
        if "permission" in lowered:
            recovery = f"Make {file_path} readable by the current user"
        elif "expected" in lowered or "invalid" in lowered:
            user_msg = f"config '{file_path}' has a syntax error"
            recovery = (
                "Check for common TOML errors:\n"
                "  - Unquoted string values\n"
                "  - Duplicate keys or tables\n"
                f"  - Edit: {file_path}"
            )

        super().__init__(
            user_message=user_msg,
            technical_message=f"TOML load error in {file_path}: {parse_error}",
            recovery_hint=recovery,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigSemanticError(ConfigurationError):
    """Profile is readable but its content makes no sense."""

    exit_code = 3


class ConfigValidationError(ConfigSemanticError):
    """Configuration values fail validation."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        """
        Initialize config validation error.

        Args:
            field: The configuration field that failed validation
            value: The invalid value
            error_msg: Why the value is invalid
            file_path: Path to the config file (optional)
        """
        user_msg = f"Invalid configuration value for '{field}': {error_msg}"

        recovery = f"Update the '{field}' value in your profile"
        if file_path:
            recovery += f"\nConfig file: {file_path}"

        if "rgb" in field.lower():
            recovery += "\nrgb must be three integers between 0 and 255, e.g. rgb = [255, 0, 0]"
        elif "keydisplay" in field.lower():
            recovery += "\nkeyDisplay must be true or false"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Config validation failed for {field}={value}: {error_msg}",
            recovery_hint=recovery,
        )
        self.field = field
        self.value = value
        self.file_path = file_path


class NoModesDefinedError(ConfigSemanticError):
    """Profile does not define a single mode."""

    def __init__(self, file_path: Optional[str] = None):
        super().__init__(
            user_message="no modes defined!",
            technical_message=f"Profile {file_path or '<memory>'} has an empty [mode] table",
            recovery_hint="Add at least one [mode.<name>] table with a [mode.<name>.keys] section",
        )
        self.file_path = file_path


class StartingModeUndefinedError(ConfigSemanticError):
    """meta.startingMode does not name an existing mode."""

    def __init__(self, mode_name: str, available: list[str]):
        super().__init__(
            user_message=f"startingMode '{mode_name}' is undefined!",
            technical_message=f"startingMode {mode_name!r} not in modes {available!r}",
            recovery_hint=f"Set startingMode to one of: {', '.join(available)}",
        )
        self.mode_name = mode_name
        self.available = available
