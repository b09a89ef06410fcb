"""Event loop that keeps the daemon's bindings in sync with the active mode."""

import logging
from enum import Enum
from typing import Callable, Optional

import click

from g13profile.compiler import CompiledMode, ModeCompiler
from g13profile.daemon import DaemonChannel
from g13profile.model_manager import ObserverManager
from g13profile.models import Profile
from g13profile.protocol import DaemonEvent, DaemonEventType
from g13profile.protocols import ReactorEvent, ReactorObserver

logger = logging.getLogger(__name__)


class ReactorState(Enum):
    """Lifecycle of a ProtocolReactor."""

    IDLE = "idle"  # Nothing sent yet
    ACTIVE = "active"  # A mode is loaded in the daemon
    TERMINATED = "terminated"  # Event stream ended


def _echo_err(message: str) -> None:
    click.echo(message, err=True)


class ProtocolReactor:
    """
    Drives mode switching from daemon events.

    On start the starting mode is compiled and sent. After that each line
    from the daemon is handled in turn:

    - ``modeup`` / ``modedown``: echo the event name, then activate the
      next / previous mode in file order (wrapping around unless
      ``wrap_modes`` is False)
    - ``mode <name>``: activate that mode, or print a diagnostic if the
      profile has no such mode
    - anything else: echoed to the operator unchanged

    Each activation is sent as a single batch before the next line is read,
    so two activations never interleave. The active mode is tracked here and
    passed to the compiler so the key-map marks the right mode.
    """

    def __init__(
        self,
        profile: Profile,
        channel: DaemonChannel,
        compiler: Optional[ModeCompiler] = None,
        wrap_modes: bool = True,
        output: Callable[[str], None] = click.echo,
        diagnostics: Callable[[str], None] = _echo_err,
    ):
        """
        Initialize the reactor.

        Args:
            profile: Validated profile
            channel: Duplex line channel to the daemon
            compiler: Mode compiler (defaults to one built from `profile`)
            wrap_modes: Whether relative switches wrap around
            output: Sink for operator output (daemon text, key-maps)
            diagnostics: Sink for warnings shown to the operator
        """
        self.profile = profile
        self.channel = channel
        self.compiler = compiler or ModeCompiler(profile)
        self.wrap_modes = wrap_modes
        self._output = output
        self._diagnostics = diagnostics
        self._state = ReactorState.IDLE
        self._current_mode: Optional[str] = None
        self._observers = ObserverManager[ReactorObserver](observer_type_name="reactor")

    # =================================================================
    # Event System
    # =================================================================

    def register_observer(self, observer: ReactorObserver) -> None:
        """Register an observer to receive reactor events."""
        self._observers.register(observer)

    def unregister_observer(self, observer: ReactorObserver) -> None:
        """Unregister an observer."""
        self._observers.unregister(observer)

    def _notify(self, event: ReactorEvent, mode_name: Optional[str]) -> None:
        self._observers.notify("on_reactor_event", event, mode_name)

    # =================================================================
    # State
    # =================================================================

    @property
    def state(self) -> ReactorState:
        """Current lifecycle state."""
        return self._state

    @property
    def current_mode(self) -> Optional[str]:
        """Mode last sent to the daemon, None before start."""
        return self._current_mode

    # =================================================================
    # Lifecycle
    # =================================================================

    def start(self) -> None:
        """
        Send the starting mode.

        Raises:
            RuntimeError: If the reactor was already started
        """
        if self._state is not ReactorState.IDLE:
            raise RuntimeError(f"Reactor cannot start from state {self._state.value}")

        starting_mode = self.profile.starting_mode
        logger.info(f"Starting in mode '{starting_mode}'")
        self.activate(starting_mode)

    def run(self) -> None:
        """
        Start if needed, then handle daemon lines until end of stream.

        Returns normally when the daemon closes its event pipe.
        """
        if self._state is ReactorState.IDLE:
            self.start()

        while True:
            line = self.channel.read_line()
            if line is None:
                break
            self.handle_line(line)

        self._state = ReactorState.TERMINATED
        logger.info("Daemon event stream closed")
        self._notify(ReactorEvent.STREAM_CLOSED, None)

    def activate(self, mode_name: str) -> CompiledMode:
        """
        Compile a mode, send it and make it the current mode.

        Args:
            mode_name: Existing mode name

        Returns:
            The compiled mode that was sent
        """
        compiled = self.compiler.compile(mode_name, active_mode=mode_name)
        self.channel.send(compiled.commands)

        previous = self._current_mode
        self._current_mode = mode_name
        self._state = ReactorState.ACTIVE
        logger.info(f"Activated mode '{mode_name}' (was {previous!r})")

        if compiled.rendering is not None:
            self._output(compiled.rendering.rstrip("\n"))

        self._notify(ReactorEvent.MODE_ACTIVATED, mode_name)
        return compiled

    # =================================================================
    # Event Handling
    # =================================================================

    def handle_line(self, line: str) -> None:
        """
        Handle one line read from the daemon.

        Raises:
            RuntimeError: If the reactor is not active
        """
        if self._state is not ReactorState.ACTIVE:
            raise RuntimeError(f"Reactor cannot handle events in state {self._state.value}")

        event = DaemonEvent.parse(line.rstrip("\n"))
        logger.debug(f"Daemon event {event.type.value}: {event.line!r}")

        if event.type is DaemonEventType.MODE_UP:
            self._switch_relative(self.profile.next_mode(self._current_mode, self.wrap_modes), "up")
        elif event.type is DaemonEventType.MODE_DOWN:
            self._switch_relative(
                self.profile.previous_mode(self._current_mode, self.wrap_modes), "down"
            )
        elif event.type is DaemonEventType.MODE:
            self._switch_named(event.mode_name)
        else:
            self._output(event.line)

    def _switch_relative(self, target: Optional[str], direction: str) -> None:
        self._output(f"mode{direction}")
        if target is None:
            logger.info(f"mode{direction}: no other mode from '{self._current_mode}'")
            return
        logger.info(f"mode{direction}: '{self._current_mode}' -> '{target}'")
        self.activate(target)

    def _switch_named(self, mode_name: str) -> None:
        if not self.profile.has_mode(mode_name):
            logger.warning(f"Daemon requested undefined mode '{mode_name}'")
            self._diagnostics(f"mode '{mode_name}' is undefined!")
            self._notify(ReactorEvent.MODE_UNDEFINED, mode_name)
            return
        self.activate(mode_name)
