"""Protocol definitions for domain-specific observer patterns.

For the line protocol spoken with g13d, see g13profile.protocol.
"""

from .events import ReactorEvent
from .observers import ReactorObserver

__all__ = [
    # Events
    "ReactorEvent",
    # Observers
    "ReactorObserver",
]
