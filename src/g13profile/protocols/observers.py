"""Observer protocol definitions for domain-specific events."""

from typing import Protocol, runtime_checkable

from .events import ReactorEvent


@runtime_checkable
class ReactorObserver(Protocol):
    """
    Observer that receives protocol reactor events.

    Lets other components (status displays, logging, tests) follow mode
    changes without the reactor knowing about them.
    """

    def on_reactor_event(self, event: ReactorEvent, mode_name: str | None) -> None:
        """
        Handle reactor events.

        Args:
            event: The type of reactor event
            mode_name: Mode involved (activated or requested), None for STREAM_CLOSED

        Note:
            Called on the reactor thread between two daemon lines; keep it short.
        """
        ...
