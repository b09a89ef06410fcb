"""Turns a profile mode into g13d commands."""

import logging
from dataclasses import dataclass

from g13profile.models import Profile
from g13profile.protocol import bind_command, rgb_command

from .keymap import render_keymap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledMode:
    """Everything needed to activate one mode."""

    mode_name: str
    commands: tuple[str, ...]
    rendering: str | None = None


class ModeCompiler:
    """
    Compiles modes of a profile into protocol commands.

    The output for a mode is always:

    1. ``rgb R G B`` with the effective color
    2. one ``bind`` line per entry of the mode's ``keys`` table, in file order

    plus, when keyDisplay is enabled for the mode, the ASCII key-map.
    """

    def __init__(self, profile: Profile):
        """
        Initialize the compiler.

        Args:
            profile: Validated profile; never modified
        """
        self.profile = profile

    def compile(self, mode_name: str, active_mode: str | None = None) -> CompiledMode:
        """
        Compile one mode.

        Args:
            mode_name: Mode to compile; must exist in the profile
            active_mode: Mode marked with ``*`` in the key-map
                (defaults to `mode_name`, the mode being activated)

        Returns:
            CompiledMode with commands and optional rendering

        Raises:
            KeyError: If the mode does not exist
        """
        mode = self.profile.get_mode(mode_name)

        commands = [rgb_command(self.profile.effective_color(mode_name))]
        commands.extend(bind_command(slot, expression) for slot, expression in mode.keys.items())

        rendering = None
        if self.profile.key_display_enabled(mode_name):
            rendering = render_keymap(mode, active_mode or mode_name)

        logger.debug(f"Compiled mode '{mode_name}' into {len(commands)} commands")
        return CompiledMode(mode_name=mode_name, commands=tuple(commands), rendering=rendering)
