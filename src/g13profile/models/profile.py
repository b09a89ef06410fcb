"""Profile model: meta settings plus named modes."""

import logging

from pydantic import BaseModel, ConfigDict, Field

from g13profile.exceptions import NoModesDefinedError, StartingModeUndefinedError

from .color import Color
from .enums import KeySlot

logger = logging.getLogger(__name__)

DEFAULT_COLOR = Color.red()


class ModeSettings(BaseModel):
    """Settings that may be given in [meta] and overridden per mode."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    rgb: Color | None = Field(default=None, description="Backlight color")
    key_display: bool | None = Field(
        default=None,
        alias="keyDisplay",
        description="Print the ASCII key-map when the mode is activated",
    )


class Meta(ModeSettings):
    """The [meta] table shared by every mode."""

    starting_mode: str | None = Field(
        default=None,
        alias="startingMode",
        description="Mode activated at startup (default: first mode)",
    )


class Mode(BaseModel):
    """A named set of key bindings activated as a unit."""

    model_config = ConfigDict(frozen=True)

    settings: ModeSettings = Field(default_factory=ModeSettings, description="Per-mode overrides")
    keys: dict[str, str] = Field(
        default_factory=dict,
        description="Slot name to binding expression, in file order",
    )

    def binding_for(self, slot: str) -> str | None:
        """Get the binding of a slot, or None if the slot is not listed."""
        return self.keys.get(slot)


class Profile(BaseModel):
    """A loaded profile file.

    Mirrors the TOML layout::

        [meta]
        startingMode = "base"
        rgb = [0, 0, 255]
        keyDisplay = true

        [mode.base.settings]
        rgb = [255, 255, 0]

        [mode.base.keys]
        g1 = "KEY_A"
        g2 = ">mode nav"
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    meta: Meta = Field(default_factory=Meta, description="Settings shared by all modes")
    modes: dict[str, Mode] = Field(
        default_factory=dict,
        alias="mode",
        description="Modes by name, in file order",
    )

    @property
    def mode_names(self) -> list[str]:
        """Mode names in file order."""
        return list(self.modes)

    def has_mode(self, name: str) -> bool:
        """Check if a mode is defined."""
        return name in self.modes

    def get_mode(self, name: str) -> Mode:
        """
        Get a mode by name.

        Raises:
            KeyError: If the mode is not defined
        """
        return self.modes[name]

    def ensure_valid(self, file_path: str | None = None) -> None:
        """
        Check the rules pydantic cannot express.

        Raises:
            NoModesDefinedError: If the profile has no modes
            StartingModeUndefinedError: If meta.startingMode names a missing mode
        """
        if not self.modes:
            raise NoModesDefinedError(file_path)

        starting = self.meta.starting_mode
        if starting is not None and starting not in self.modes:
            raise StartingModeUndefinedError(starting, self.mode_names)

        for name, mode in self.modes.items():
            for slot in mode.keys:
                if not KeySlot.is_known(slot):
                    logger.debug(f"Mode '{name}' binds unknown slot '{slot}'")

    @property
    def starting_mode(self) -> str:
        """meta.startingMode if set, else the first mode."""
        if self.meta.starting_mode is not None:
            return self.meta.starting_mode
        return next(iter(self.modes))

    def effective_color(self, mode_name: str) -> Color:
        """Mode rgb, else meta rgb, else red."""
        settings = self.modes[mode_name].settings
        if settings.rgb is not None:
            return settings.rgb
        if self.meta.rgb is not None:
            return self.meta.rgb
        return DEFAULT_COLOR

    def key_display_enabled(self, mode_name: str) -> bool:
        """Mode keyDisplay, else meta keyDisplay, else off."""
        settings = self.modes[mode_name].settings
        if settings.key_display is not None:
            return settings.key_display
        if self.meta.key_display is not None:
            return self.meta.key_display
        return False

    def next_mode(self, current: str, wrap: bool = True) -> str | None:
        """
        Mode after `current` in file order.

        Args:
            current: Currently active mode
            wrap: Continue from the first mode after the last one

        Returns:
            Mode name, or None if there is nowhere to go
        """
        return self._step(current, 1, wrap)

    def previous_mode(self, current: str, wrap: bool = True) -> str | None:
        """Mode before `current` in file order (see next_mode)."""
        return self._step(current, -1, wrap)

    def _step(self, current: str, offset: int, wrap: bool) -> str | None:
        names = self.mode_names
        index = names.index(current) + offset
        if wrap:
            index %= len(names)
        elif not 0 <= index < len(names):
            return None
        target = names[index]
        return None if target == current else target
