"""Mode compilation and key-map rendering."""

from .classifier import KEY_SHORT_NAMES, classify, pad_glyph
from .compiler import CompiledMode, ModeCompiler
from .keymap import KEYMAP_TEMPLATE, render_keymap

__all__ = [
    "KEYMAP_TEMPLATE",
    "KEY_SHORT_NAMES",
    "CompiledMode",
    "ModeCompiler",
    "classify",
    "pad_glyph",
    "render_keymap",
]
