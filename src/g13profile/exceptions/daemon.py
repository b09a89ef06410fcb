"""Daemon-related exceptions.

This module defines exceptions for failures talking to the g13d daemon:
- DaemonError: Base class for daemon errors
- StartupTimeoutError: Daemon channel never appeared
- DaemonLaunchError: Daemon process could not be spawned
"""

from typing import Optional

from .base import G13ProfileError


class DaemonError(G13ProfileError):
    """The hardware daemon or its channel is unusable."""

    exit_code = 4


class StartupTimeoutError(DaemonError):
    """Daemon output pipe did not appear within the startup timeout."""

    def __init__(self, path: str, timeout: float):
        """
        Initialize startup timeout error.

        Args:
            path: Pipe path that was polled
            timeout: Seconds waited before giving up
        """
        super().__init__(
            user_message=f"daemon channel '{path}' did not appear after {timeout:g}s!",
            technical_message=f"Timed out after {timeout}s waiting for {path}",
            recovery_hint=(
                "Check that g13d is installed and the device is plugged in.\n"
                "Increase 'startup_timeout' in config.json if the daemon is slow to start."
            ),
        )
        self.path = path
        self.timeout = timeout


class DaemonLaunchError(DaemonError):
    """Daemon command could not be executed."""

    def __init__(self, command: list[str], original_error: Optional[str] = None):
        super().__init__(
            user_message=f"could not start daemon '{' '.join(command)}'",
            technical_message=f"Failed to spawn {command!r}: {original_error}",
            recovery_hint="Set 'daemon_command' in config.json or run with --no-daemon",
        )
        self.command = command
        self.original_error = original_error
