"""Domain events for observer pattern."""

from enum import Enum


class ReactorEvent(Enum):
    """Events from the protocol reactor."""

    MODE_ACTIVATED = "mode_activated"  # Commands for a mode were sent
    MODE_UNDEFINED = "mode_undefined"  # Daemon asked for a mode the profile lacks
    STREAM_CLOSED = "stream_closed"  # Daemon event pipe reached end of stream
