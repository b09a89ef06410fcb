"""Line transport to the g13d daemon."""

import logging
import time
from pathlib import Path
from typing import Callable, Iterable, Optional, Protocol, TextIO

from g13profile.exceptions import StartupTimeoutError

logger = logging.getLogger(__name__)


class DaemonChannel(Protocol):
    """Protocol for the duplex line channel the reactor talks through."""

    def send(self, lines: Iterable[str]) -> None:
        """Write lines as one batch and flush so the daemon sees them at once."""
        ...

    def read_line(self) -> Optional[str]:
        """Block for the next line (without newline); None at end of stream."""
        ...

    def close(self) -> None:
        """Release both directions."""
        ...


class FifoChannel:
    """
    DaemonChannel over the two named pipes g13d creates.

    g13d reads commands from ``/tmp/g13-0`` and writes events to
    ``/tmp/g13-0_out``.
    """

    def __init__(self, writer: TextIO, reader: TextIO):
        """
        Initialize from already open text streams.

        Args:
            writer: Stream the daemon reads commands from
            reader: Stream the daemon writes events to
        """
        self._writer = writer
        self._reader = reader

    @classmethod
    def open(cls, input_pipe: Path, output_pipe: Path) -> "FifoChannel":
        """
        Open both pipes.

        Opening a FIFO blocks until the other side opens it too, so this
        returns once the daemon is attached to both ends.
        """
        logger.debug(f"Opening daemon command pipe {input_pipe}")
        writer = open(input_pipe, "w", encoding="utf-8")
        try:
            logger.debug(f"Opening daemon event pipe {output_pipe}")
            reader = open(output_pipe, "r", encoding="utf-8")
        except OSError:
            writer.close()
            raise
        logger.info(f"Connected to daemon via {input_pipe} / {output_pipe}")
        return cls(writer, reader)

    def send(self, lines: Iterable[str]) -> None:
        payload = "".join(f"{line}\n" for line in lines)
        self._writer.write(payload)
        self._writer.flush()

    def read_line(self) -> Optional[str]:
        line = self._reader.readline()
        if line == "":
            return None
        return line.rstrip("\n")

    def close(self) -> None:
        for stream in (self._writer, self._reader):
            try:
                stream.close()
            except OSError as e:
                logger.error(f"Error closing daemon pipe: {e}")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


def wait_for_channel(
    path: Path,
    poll_interval: float = 1.0,
    timeout: Optional[float] = None,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> None:
    """
    Wait until the daemon has created its event pipe.

    Args:
        path: Pipe to wait for
        poll_interval: Seconds between checks
        timeout: Give up after this many seconds (None = wait forever)
        sleep: Sleep function (injectable for tests)
        clock: Monotonic clock (injectable for tests)

    Raises:
        StartupTimeoutError: If the pipe did not appear in time
    """
    deadline = None if timeout is None else clock() + timeout
    waited = False

    while not path.exists():
        if deadline is not None and clock() >= deadline:
            logger.error(f"Gave up waiting for {path} after {timeout}s")
            raise StartupTimeoutError(str(path), timeout)
        if not waited:
            logger.info(f"Waiting for daemon channel {path}")
            waited = True
        sleep(poll_interval)

    logger.debug(f"Daemon channel {path} is available")
