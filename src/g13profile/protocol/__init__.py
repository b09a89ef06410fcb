"""Line protocol spoken with the g13d daemon."""

from .commands import NOOP_BINDING, bind_command, rgb_command
from .events import DaemonEvent, DaemonEventType

__all__ = [
    "NOOP_BINDING",
    "DaemonEvent",
    "DaemonEventType",
    "bind_command",
    "rgb_command",
]
