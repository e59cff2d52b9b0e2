"""Bit-level wire format of the signal messaging tools.

A message travels one bit per signal, least significant bit first, eight
bits per byte, and ends with a NUL byte. The receiver keeps a partial byte
per sender and starts over whenever the sending process changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

__all__ = ["CharDecoder", "byte_to_bits", "message_bits"]

BITS_PER_BYTE = 8


def byte_to_bits(value: int) -> tuple[bool, ...]:
    """Return the eight bits of ``value``, least significant first."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return tuple(bool((value >> shift) & 1) for shift in range(BITS_PER_BYTE))


def message_bits(message: Union[str, bytes]) -> Iterator[bool]:
    """Yield every bit of ``message`` followed by its NUL terminator.

    Text is encoded as UTF-8. A message may not contain NUL itself, since
    the receiver would take it for the end.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    if b"\0" in data:
        raise ValueError("message must not contain a NUL byte")
    for value in data + b"\0":
        yield from byte_to_bits(value)


@dataclass
class CharDecoder:
    """Reassembles bytes from single bits tagged with their sender."""

    sender: Optional[int] = field(default=None)
    current: int = field(default=0)
    bits_received: int = field(default=0)

    def _reset(self) -> None:
        self.current = 0
        self.bits_received = 0

    def feed(self, sender: int, bit: bool) -> Optional[int]:
        """Add one bit; return the byte once its eighth bit arrives."""
        if sender != self.sender:
            self._reset()
            self.sender = sender
        if bit:
            self.current |= 1 << self.bits_received
        self.bits_received += 1
        if self.bits_received < BITS_PER_BYTE:
            return None
        value = self.current
        self._reset()
        return value