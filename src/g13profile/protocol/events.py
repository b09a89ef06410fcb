"""Events read from the g13d output pipe."""

from dataclasses import dataclass
from enum import Enum

MODE_PREFIX = "mode "


class DaemonEventType(Enum):
    """Kinds of lines the daemon writes."""

    MODE_UP = "modeup"  # Relative switch to the next mode
    MODE_DOWN = "modedown"  # Relative switch to the previous mode
    MODE = "mode"  # Switch to a named mode
    OUTPUT = "output"  # Anything else: status text for the operator


@dataclass(frozen=True)
class DaemonEvent:
    """One parsed line from the daemon."""

    type: DaemonEventType
    line: str
    mode_name: str | None = None

    @classmethod
    def parse(cls, line: str) -> "DaemonEvent":
        """
        Classify a line (trailing newline already stripped).

        ``modeup``/``modedown`` match as prefixes, ``mode <name>`` needs a
        non-empty name; everything else is passed through as OUTPUT.
        """
        if line.startswith(DaemonEventType.MODE_UP.value):
            return cls(DaemonEventType.MODE_UP, line)
        if line.startswith(DaemonEventType.MODE_DOWN.value):
            return cls(DaemonEventType.MODE_DOWN, line)
        if line.startswith(MODE_PREFIX) and len(line) > len(MODE_PREFIX):
            return cls(DaemonEventType.MODE, line, mode_name=line[len(MODE_PREFIX):])
        return cls(DaemonEventType.OUTPUT, line)
