"""Profile file lookup and loading."""

import logging
from pathlib import Path

from g13profile.exceptions import ConfigDirectoryError, ProfileNotFoundError
from g13profile.model_manager import PydanticPersistence
from g13profile.models import Profile

logger = logging.getLogger(__name__)

PROFILE_EXTENSION = ".toml"


def find_profile(config_dir: Path, name: str) -> Path:
    """
    Find the file for a profile name.

    ``<dir>/<name>`` is tried first, then ``<dir>/<name>.toml`` unless the
    name already ends in ``.toml``.

    Args:
        config_dir: Directory holding profile files
        name: Profile name, with or without extension

    Returns:
        Path of the profile file

    Raises:
        ConfigDirectoryError: If config_dir is not a directory
        ProfileNotFoundError: If no file matches
    """
    if not config_dir.is_dir():
        raise ConfigDirectoryError(str(config_dir))

    exact = config_dir / name
    if exact.is_file():
        return exact

    if Path(name).suffix != PROFILE_EXTENSION:
        with_extension = config_dir / f"{name}{PROFILE_EXTENSION}"
        if with_extension.is_file():
            return with_extension

    raise ProfileNotFoundError(name, str(config_dir))


def load_profile(path: Path) -> Profile:
    """
    Load, validate and semantically check a profile file.

    Raises:
        ConfigFileInvalidError: If the file is unreadable or not valid TOML
        ConfigValidationError: If values have the wrong type or range
        NoModesDefinedError: If no modes are defined
        StartingModeUndefinedError: If meta.startingMode is not a mode
    """
    try:
        profile = PydanticPersistence.load_toml(path, Profile)
    except FileNotFoundError as e:
        raise ProfileNotFoundError(path.name, str(path.parent)) from e

    profile.ensure_valid(str(path))
    logger.info(f"Loaded profile {path} with modes: {', '.join(profile.mode_names)}")
    return profile


def resolve_and_load(config_dir: Path, name: str) -> Profile:
    """Find a profile by name and load it."""
    return load_profile(find_profile(config_dir, name))
