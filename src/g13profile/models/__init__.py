"""Data models for G13 profiles."""

from .binding import Binding
from .color import Color
from .config import AppConfig
from .enums import BindingKind, KeySlot
from .profile import Meta, Mode, ModeSettings, Profile

__all__ = [
    "AppConfig",
    "Binding",
    # Enums
    "BindingKind",
    "Color",
    "KeySlot",
    # Models
    "Meta",
    "Mode",
    "ModeSettings",
    "Profile",
]
