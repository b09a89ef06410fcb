"""Three-character glyphs for the ASCII key-map."""

from g13profile.models import Binding, BindingKind

GLYPH_WIDTH = 3
BLANK_GLYPH = " " * GLYPH_WIDTH
UNKNOWN_GLYPH = "???"

# Full key name (lower case, without KEY_) -> abbreviation of at most 3 chars
KEY_SHORT_NAMES = {
    "apostrophe": "'",
    "backslash": "\\",
    "backspace": "bks",
    "capslock": "cap",
    "comma": ",",
    "delete": "del",
    "dot": ".",
    "down": "dwn",
    "enter": "ent",
    "equal": "=",
    "grave": "`",
    "home": "hom",
    "insert": "ins",
    "kpasterisk": "*",
    "kpdot": ".",
    "kpminus": "-",
    "kpplus": "+",
    "left": "lft",
    "leftalt": "alt",
    "leftbrace": "[",
    "leftctrl": "ctr",
    "leftshift": "shf",
    "minus": "-",
    "numlock": "num",
    "pagedown": "pdn",
    "pageup": "pup",
    "right": "rgt",
    "rightalt": "alt",
    "rightbrace": "]",
    "rightctrl": "ctr",
    "rightshift": "shf",
    "scrolllock": "slk",
    "semicolon": ";",
    "slash": "/",
    "space": "spa",
}


FIXED_LABELS = {
    BindingKind.COMBO: "K+K",
    BindingKind.COMMAND: "COM",
    BindingKind.MODE_NEXT: "M>",
    BindingKind.MODE_PREV: "M<",
    BindingKind.ACTION: ">",
    BindingKind.UNBOUND: BLANK_GLYPH,
    BindingKind.UNKNOWN: UNKNOWN_GLYPH,
}


def _label(active_mode: str, binding: Binding) -> str:
    if binding.kind == BindingKind.KEY:
        return binding.key_name.lower()
    if binding.kind == BindingKind.MODE_SWITCH:
        marker = "*M" if binding.target == active_mode else "M"
        return marker + binding.target[0]
    return FIXED_LABELS[binding.kind]


def pad_glyph(label: str) -> str:
    """
    Fit a label into exactly three characters.

    Example:
        >>> pad_glyph("a"), pad_glyph("Mb"), pad_glyph("esc"), pad_glyph("f1x2")
        (' a ', ' Mb', 'esc', '???')
    """
    if len(label) == 3:
        return label
    if len(label) == 2:
        return " " + label
    if len(label) == 1:
        return " " + label + " "
    return UNKNOWN_GLYPH


def classify(active_mode: str, expression: str | None) -> str:
    """
    Get the key-map glyph for a binding expression.

    Args:
        active_mode: Mode the key-map is drawn for; ``>mode`` bindings that
            point at it are marked with ``*``
        expression: Binding expression, or None if the slot is not bound

    Returns:
        Exactly three characters

    Example:
        >>> classify("nav", ">mode base")
        ' Mb'
        >>> classify("base", ">mode base")
        '*Mb'
        >>> classify("base", "KEY_LEFTSHIFT")
        'shf'
    """
    if expression is None:
        return BLANK_GLYPH

    label = _label(active_mode, Binding.parse(expression))
    label = KEY_SHORT_NAMES.get(label, label)
    return pad_glyph(label)
