"""Sending side: transmit a message bit by bit as signals to a server."""

from __future__ import annotations

import os
import signal
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, Sequence, Union

from sigtalk.protocol import byte_to_bits, message_bits
from sigtalk.textutils import atoi

__all__ = ["parse_pid", "send_byte", "send_message", "main"]


def parse_pid(text: str) -> int:
    """Parse a server process id and check that it can be signalled.

    Raises ``ValueError`` for a non-positive id and ``OSError`` when the
    process does not exist or may not be signalled.
    """
    pid = atoi(text)
    if pid <= 0:
        raise ValueError(f"invalid process id: {text!r}")
    try:
        os.kill(pid, 0)
    except OverflowError as exc:
        raise ValueError(f"invalid process id: {text!r}") from exc
    return pid


@contextmanager
def _acknowledgements() -> Iterator[None]:
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, {signal.SIGUSR1})
    try:
        yield
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def _send_bit(server_pid: int, bit: bool) -> None:
    os.kill(server_pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
    signal.sigwait({signal.SIGUSR1})


def send_byte(server_pid: int, value: int) -> None:
    """Send one byte, waiting for an acknowledgement after each bit."""
    bits = byte_to_bits(value)
    with _acknowledgements():
        for bit in bits:
            _send_bit(server_pid, bit)


def send_message(server_pid: int, message: Union[str, bytes]) -> None:
    """Send ``message`` followed by its NUL terminator."""
    bits = list(message_bits(message))
    with _acknowledgements():
        for bit in bits:
            _send_bit(server_pid, bit)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Usage: client SERVER_PID MESSAGE. Returns 0 on success, 1 otherwise."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        return 1
    pid_text, message = args
    try:
        server_pid = parse_pid(pid_text)
        send_message(server_pid, os.fsencode(message))
    except (ValueError, OSError):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())