"""Collect terminal output from a command run in a pseudo-terminal or from a pipe."""

import fcntl
import logging
import os
import pty
import select
import signal
import struct
import subprocess
import termios
import time
from typing import BinaryIO

logger = logging.getLogger(__name__)

READ_CHUNK = 4096
POLL_INTERVAL = 0.05
# Extra read time after the command exits so trailing output is not lost
EXIT_GRACE = 0.1


class CaptureError(Exception):
    """Raised when output could not be collected."""


def _set_winsize(fd: int, cols: int, rows: int) -> None:
    fcntl.ioctl(fd, termios.TIOCSWINSZ, struct.pack("HHHH", rows, cols, 0, 0))


def _kill_group(proc: subprocess.Popen) -> None:
    """Kill the command along with anything it spawned."""
    try:
        os.killpg(proc.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass


def run_in_pty(
    command: str,
    cols: int = 120,
    rows: int = 40,
    delay: float = 0.5,
    timeout: float = 10.0,
) -> bytes:
    """
    Run ``command`` under ``bash -c`` attached to a pseudo-terminal.

    The terminal is sized ``cols`` x ``rows`` and advertised as
    ``xterm-256color``. Once the command exits, output is read for a
    further ``delay`` seconds so full-screen programs can finish drawing.
    A command still running after ``delay + timeout`` seconds is killed;
    whatever it printed so far is returned.
    """
    env = dict(os.environ)
    env.update({
        "TERM": "xterm-256color",
        "COLUMNS": str(cols),
        "LINES": str(rows),
    })

    master_fd, slave_fd = pty.openpty()
    try:
        _set_winsize(slave_fd, cols, rows)
        proc = subprocess.Popen(
            ["bash", "-c", command],
            stdin=slave_fd,
            stdout=slave_fd,
            stderr=slave_fd,
            env=env,
            start_new_session=True,
        )
    except OSError as exc:
        os.close(master_fd)
        raise CaptureError(f"failed to start pty: {exc}") from exc
    finally:
        os.close(slave_fd)

    logger.debug("Started %r (pid %d) in %dx%d pty", command, proc.pid, cols, rows)

    output = bytearray()
    deadline = time.monotonic() + delay + timeout
    stop_at: float | None = None
    try:
        while True:
            now = time.monotonic()
            if stop_at is None:
                if proc.poll() is not None:
                    logger.debug("Command exited with status %d", proc.returncode)
                    stop_at = now + EXIT_GRACE + delay
                elif now >= deadline:
                    logger.warning("Command %r still running after %.1fs, killing it",
                                   command, delay + timeout)
                    _kill_group(proc)
                    proc.wait()
                    stop_at = now + delay
            elif now >= stop_at:
                break

            readable, _, _ = select.select([master_fd], [], [], POLL_INTERVAL)
            if not readable:
                continue
            try:
                chunk = os.read(master_fd, READ_CHUNK)
            except OSError:
                # Linux reports EIO once every slave descriptor is closed
                chunk = b""
            if not chunk:
                break
            output.extend(chunk)
    finally:
        os.close(master_fd)
        if proc.poll() is None:
            _kill_group(proc)
        proc.wait()

    logger.debug("Captured %d bytes", len(output))
    return bytes(output)


def read_stream(stream: BinaryIO) -> bytes:
    """Read a binary stream (usually piped stdin) to the end."""
    try:
        return stream.read()
    except OSError as exc:
        raise CaptureError(f"failed to read input: {exc}") from exc
