"""Receiving side: decode bits sent as SIGUSR1/SIGUSR2 and print them."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, NoReturn, Optional, Sequence

from sigtalk.protocol import CharDecoder

__all__ = ["Server", "main"]


class Server:
    """Prints bytes reassembled from signals and acknowledges every bit.

    SIGUSR1 carries a one bit and SIGUSR2 a zero bit. A completed NUL byte
    is printed as a newline.
    """

    def __init__(self, out: BinaryIO) -> None:
        self._out = out
        self._decoder = CharDecoder()

    def _write(self, data: bytes) -> None:
        self._out.write(data)
        flush = getattr(self._out, "flush", None)
        if flush is not None:
            flush()

    def handle(self, sender: int, signum: int) -> None:
        """Process one signal from process ``sender``."""
        value = self._decoder.feed(sender, signum == signal.SIGUSR1)
        if value is not None:
            self._write(b"\n" if value == 0 else bytes([value]))
        if sender > 0:
            os.kill(sender, signal.SIGUSR1)

    def serve_forever(self) -> NoReturn:
        """Announce the process id, then handle signals until interrupted."""
        signals = {signal.SIGUSR1, signal.SIGUSR2}
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        try:
            self._write(f"Process ID (PID): {os.getpid()}\n".encode("ascii"))
            while True:
                info = signal.sigwaitinfo(signals)
                self.handle(info.si_pid, info.si_signo)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server on standard output until interrupted."""
    server = Server(sys.stdout.buffer)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())