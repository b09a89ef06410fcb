"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_serializer

from g13profile.model_manager.persistence import PydanticPersistence

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "g13"
DEFAULT_PROFILE = "default"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    # Profiles
    config_dir: Path = Field(
        default=DEFAULT_CONFIG_DIR,
        description="Directory searched for profile files",
    )
    default_profile: str = Field(
        default=DEFAULT_PROFILE,
        description="Profile used when none is given on the command line",
    )

    # Daemon
    daemon_command: list[str] = Field(
        default_factory=lambda: ["sudo", "/opt/g13/g13d"],
        min_length=1,
        description="Command that starts the g13d daemon",
    )
    input_pipe: Path = Field(
        default=Path("/tmp/g13-0"),
        description="Named pipe the daemon reads commands from",
    )
    output_pipe: Path = Field(
        default=Path("/tmp/g13-0_out"),
        description="Named pipe the daemon writes events to",
    )
    poll_interval: float = Field(
        default=1.0, gt=0, description="Seconds between checks for the daemon pipes"
    )
    startup_timeout: float | None = Field(
        default=30.0,
        gt=0,
        description="Seconds to wait for the daemon pipes (None = wait forever)",
    )
    terminate_timeout: float = Field(
        default=5.0, gt=0, description="Seconds to wait for the daemon to exit before killing it"
    )

    # Mode switching
    wrap_modes: bool = Field(
        default=True,
        description="modeup/modedown wrap around from the last mode to the first",
    )

    @field_serializer("config_dir", "input_pipe", "output_pipe")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)

    @classmethod
    def default_path(cls) -> Path:
        """Location of config.json."""
        return DEFAULT_CONFIG_DIR / "config.json"

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.config/g13/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = cls.default_path()

        return PydanticPersistence.load_or_default(path, cls)
