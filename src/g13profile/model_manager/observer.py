"""Observer list shared by components that publish events.

The reactor publishes mode changes while it is blocked on the daemon's event
pipe, so observers may be added or removed from other threads at any time.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=object)


class ObserverManager(Generic[T]):
    """
    Ordered, duplicate-free set of observers.

    Callbacks are looked up by name at notification time, so one manager
    serves any observer protocol. A callback that raises is logged and the
    remaining observers still run.

    Example:
        ```python
        observers = ObserverManager[ReactorObserver](observer_type_name="reactor")
        observers.register(status_line)
        observers.notify("on_reactor_event", ReactorEvent.MODE_ACTIVATED, "base")
        ```
    """

    def __init__(self, lock: Lock | None = None, observer_type_name: str = "observer"):
        """
        Args:
            lock: Lock guarding the list (a new one by default)
            observer_type_name: Label used in log messages, e.g. "reactor"
        """
        self._observers: list[T] = []
        self._lock = lock or Lock()
        self._label = observer_type_name

    def register(self, observer: T) -> None:
        """Add an observer; registering twice has no effect."""
        with self._lock:
            if observer in self._observers:
                return
            self._observers.append(observer)
        logger.debug(f"{self._label} observer added: {observer!r}")

    def unregister(self, observer: T) -> None:
        """Remove an observer; unknown observers are ignored with a warning."""
        with self._lock:
            try:
                self._observers.remove(observer)
            except ValueError:
                logger.warning(f"{self._label} observer was never registered: {observer!r}")
                return
        logger.debug(f"{self._label} observer removed: {observer!r}")

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """
        Call `callback_name` on every observer, in registration order.

        Runs on a snapshot of the list taken under the lock, so a callback
        may register or unregister observers.
        """
        with self._lock:
            snapshot = tuple(self._observers)

        for observer in snapshot:
            callback = getattr(observer, callback_name, None)
            if callback is None:
                logger.error(f"{self._label} observer {observer!r} lacks {callback_name}()")
                continue
            try:
                callback(*args, **kwargs)
            except Exception:
                logger.exception(f"{self._label} observer {observer!r} failed in {callback_name}()")

    def __contains__(self, observer: T) -> bool:
        with self._lock:
            return observer in self._observers

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)
