"""Fixed ASCII picture of the G13 with one glyph per key."""

from g13profile.models import KeySlot, Mode

from .classifier import classify

# Mirrors the physical layout; each {slot} is replaced by a 3-char glyph.
KEYMAP_TEMPLATE = (
    "[{bd}]  [{l1}] [{l2}] [{l3}] [{l4}]\n"
    "   [{m1}]   [{m2}]     [{m3}]   [{mr}]\n"
    " [{g1}][{g2}][{g3}][{g4}][{g5}][{g6}][{g7}]\n"
    " [{g8}][{g9}][{g10}][{g11}][{g12}][{g13}][{g14}]\n"
    "     \\[{g15}][{g16}][{g17}][{g18}][{g19}]/\n"
    "          \\[{g20}][{g21}][{g22}]/    [{top}]\n"
    "                           [{left}] o\n"
    "                               [{down}]\n"
)


def render_keymap(mode: Mode, active_mode: str) -> str:
    """
    Draw the key-map for a mode.

    Args:
        mode: Mode whose bindings are drawn
        active_mode: Name of the currently active mode (for the ``*`` marker)

    Returns:
        Multi-line text ending in a newline
    """
    glyphs = {slot.value: classify(active_mode, mode.binding_for(slot.value)) for slot in KeySlot}
    return KEYMAP_TEMPLATE.format(**glyphs)
