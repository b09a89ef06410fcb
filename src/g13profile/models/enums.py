"""Enumerations for G13 profiles."""

from enum import Enum


class KeySlot(str, Enum):
    """Physical key positions on the G13, in key-map order."""

    BD = "bd"  # Backlight/display button
    L1 = "l1"
    L2 = "l2"
    L3 = "l3"
    L4 = "l4"
    M1 = "m1"
    M2 = "m2"
    M3 = "m3"
    MR = "mr"
    G1 = "g1"
    G2 = "g2"
    G3 = "g3"
    G4 = "g4"
    G5 = "g5"
    G6 = "g6"
    G7 = "g7"
    G8 = "g8"
    G9 = "g9"
    G10 = "g10"
    G11 = "g11"
    G12 = "g12"
    G13 = "g13"
    G14 = "g14"
    G15 = "g15"
    G16 = "g16"
    G17 = "g17"
    G18 = "g18"
    G19 = "g19"
    G20 = "g20"
    G21 = "g21"
    G22 = "g22"
    TOP = "top"  # Thumb stick buttons
    LEFT = "left"
    DOWN = "down"

    @classmethod
    def is_known(cls, name: str) -> bool:
        """Check if a key name is one of the physical slots."""
        return name in cls._value2member_map_


class BindingKind(str, Enum):
    """Categories of binding expressions."""

    UNBOUND = "unbound"  # ""
    KEY = "key"  # KEY_A
    COMBO = "combo"  # KEY_LEFTCTRL+KEY_C
    COMMAND = "command"  # !<daemon command>
    MODE_SWITCH = "mode_switch"  # >mode <name>
    MODE_NEXT = "mode_next"  # >modeup, >modenext
    MODE_PREV = "mode_prev"  # >modedown, >modeprev
    ACTION = "action"  # any other >...
    UNKNOWN = "unknown"
