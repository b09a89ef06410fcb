"""Encoders for the g13d command pipe.

Every command is one line of text:

    rgb <r> <g> <b>
    bind <SLOT> <expression>

A slot with an empty binding is bound to ``NOOP_BINDING`` so that activating
a mode always overwrites whatever the previous mode bound there.
"""

from g13profile.models import Color

NOOP_BINDING = "!mod 0"


def rgb_command(color: Color) -> str:
    """Build the backlight command, e.g. ``rgb 255 0 0``."""
    r, g, b = color.to_rgb_tuple()
    return f"rgb {r} {g} {b}"


def bind_command(slot: str, expression: str) -> str:
    """
    Build a bind command for one slot.

    Args:
        slot: Slot identifier as written in the profile (any case)
        expression: Binding expression; empty means clear the slot

    Example:
        >>> bind_command("g1", "KEY_A")
        'bind G1 KEY_A'
        >>> bind_command("g2", "")
        'bind G2 !mod 0'
    """
    return f"bind {slot.upper()} {expression or NOOP_BINDING}"
