"""Background ownership of the g13d daemon process."""

import logging
import subprocess
import threading
from typing import Optional

from g13profile.exceptions import DaemonLaunchError, ErrorContext

logger = logging.getLogger(__name__)


class DaemonProcess:
    """
    Runs the daemon command on a background thread.

    The thread launches the process and then waits for it to exit. The main
    thread only ever touches the process through terminate(), which is the
    shutdown path on Ctrl+C.
    """

    def __init__(self, command: list[str], terminate_timeout: float = 5.0):
        """
        Initialize the daemon process wrapper.

        Args:
            command: Command line that starts the daemon
            terminate_timeout: Seconds to wait after SIGTERM before SIGKILL
        """
        self.command = list(command)
        self.terminate_timeout = terminate_timeout
        self._process: Optional[subprocess.Popen] = None
        self._process_lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None
        self._launched = threading.Event()
        self._launch_error: Optional[Exception] = None

    def start(self) -> None:
        """
        Launch the daemon on the background thread.

        Returns once the process has been spawned.

        Raises:
            DaemonLaunchError: If the command could not be executed
        """
        if self._thread is not None:
            logger.warning("DaemonProcess is already running")
            return

        self._thread = threading.Thread(target=self._run, name="g13d", daemon=True)
        self._thread.start()
        self._launched.wait()

        if self._launch_error is not None:
            raise DaemonLaunchError(self.command, str(self._launch_error)) from self._launch_error

    def _run(self) -> None:
        try:
            with ErrorContext(f"launch {' '.join(self.command)}", logger_instance=logger):
                process = subprocess.Popen(self.command)
        except Exception as e:
            # start() is blocked on _launched and re-raises this
            self._launch_error = e
            self._launched.set()
            return

        with self._process_lock:
            self._process = process
        logger.info(f"Daemon started (pid {process.pid})")
        self._launched.set()

        returncode = process.wait()
        log = logger.info if returncode == 0 else logger.warning
        log(f"Daemon exited with status {returncode}")

    def terminate(self) -> None:
        """Stop the daemon and wait for the background thread."""
        with self._process_lock:
            process = self._process

        if process is not None and process.poll() is None:
            logger.info(f"Terminating daemon (pid {process.pid})")
            process.terminate()
            try:
                process.wait(timeout=self.terminate_timeout)
            except subprocess.TimeoutExpired:
                logger.warning(f"Daemon did not exit after {self.terminate_timeout}s, killing it")
                process.kill()
                process.wait()

        if self._thread is not None and self._thread.is_alive():
            self._thread.join(timeout=self.terminate_timeout)

    @property
    def is_running(self) -> bool:
        """Check if the daemon process is alive."""
        with self._process_lock:
            return self._process is not None and self._process.poll() is None

    def __enter__(self):
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.terminate()
