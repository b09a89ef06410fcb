"""Loading Pydantic models from TOML and JSON files.

Profiles are TOML, the application config is JSON. Both are read the same
way: read the bytes, parse, validate with Pydantic, and turn every failure
into a G13ProfileError so the CLI can print one line and pick an exit code.

- unreadable file or bad syntax -> ConfigFileInvalidError (exit 2)
- well-formed but wrong values  -> ConfigValidationError (exit 3)

An empty TOML file is a valid empty table; an empty JSON file is a syntax
error.

Nothing here writes files: profiles are edited by hand.
"""

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Callable, TypeVar

from pydantic import BaseModel, ValidationError

from g13profile.exceptions import ConfigFileInvalidError, wrap_pydantic_error

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class PydanticPersistence:
    """
    Stateless loaders shared by every file-backed model.

    Example Usage:
        ```python
        profile = PydanticPersistence.load_toml(Path("default.toml"), Profile)
        config = PydanticPersistence.load_or_default(Path("config.json"), AppConfig)
        ```
    """

    @staticmethod
    def _load(path: Path, model_type: type[T], parse: Callable[[str], Any], syntax: str) -> T:
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Cannot read {path}: {e}")
            raise ConfigFileInvalidError(str(path), str(e)) from e

        try:
            data = parse(text)
        except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
            logger.error(f"Invalid {syntax} in {path}: {e}")
            raise ConfigFileInvalidError(str(path), f"Invalid {syntax}: {e}") from e

        try:
            model = model_type.model_validate(data)
        except ValidationError as e:
            logger.error(f"Validation error loading {model_type.__name__} from {path}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded {model_type.__name__} from {path}")
        return model

    @staticmethod
    def load_toml(path: Path, model_type: type[T]) -> T:
        """
        Load and validate a model from a TOML file.

        Args:
            path: TOML file to read
            model_type: Pydantic model class to validate against

        Returns:
            Validated model instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the file is unreadable or not TOML
            ConfigValidationError: If the content fails Pydantic validation
        """
        return PydanticPersistence._load(path, model_type, tomllib.loads, "TOML")

    @staticmethod
    def load_json(path: Path, model_type: type[T]) -> T:
        """Load and validate a model from a JSON file (see load_toml)."""
        return PydanticPersistence._load(path, model_type, json.loads, "JSON")

    @staticmethod
    def load_or_default(path: Path, model_type: type[T]) -> T:
        """
        Load a model from JSON, or build the defaults if the file is missing.

        Any other problem with an existing file is raised, never defaulted.
        """
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.debug(f"No {path}, using default {model_type.__name__}")
            return model_type()
