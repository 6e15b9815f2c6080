"""Bit-level writing and reading on top of binary streams."""

from __future__ import annotations

from collections.abc import Iterator
from typing import BinaryIO

BLOCK_SIZE = 4096


class BitWriter:
    """Writes single bits, most significant bit first, to a binary stream.

    Completed bytes are collected and written to the stream in blocks of
    ``BLOCK_SIZE`` bytes. Call :meth:`flush` to write a partial last byte,
    padded with zero bits, along with anything still buffered.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._buffer = bytearray()
        self._byte = 0
        self._bit_pos = 7

    def write(self, bit: int) -> None:
        """Append one bit; any true value counts as 1."""
        if bit:
            self._byte |= 1 << self._bit_pos
        self._bit_pos -= 1
        if self._bit_pos < 0:
            self._buffer.append(self._byte)
            self._byte = 0
            self._bit_pos = 7
            if len(self._buffer) == BLOCK_SIZE:
                self._stream.write(bytes(self._buffer))
                self._buffer.clear()

    def flush(self) -> None:
        """Write the pending partial byte and the buffered bytes to the stream."""
        if self._bit_pos != 7:
            self._buffer.append(self._byte)
            self._byte = 0
            self._bit_pos = 7
        if self._buffer:
            self._stream.write(bytes(self._buffer))
            self._buffer.clear()


class BitReader:
    """Reads single bits, most significant bit first, from a binary stream.

    The stream is read in blocks of ``BLOCK_SIZE`` bytes, so the reader may
    consume more of the stream than the bits it has handed out.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._block = b""
        self._index = 0
        self._byte = 0
        self._bits_left = 0

    def read_bit(self) -> int:
        """Return the next bit as 0 or 1; raise EOFError when the stream ends."""
        if self._bits_left == 0:
            if self._index >= len(self._block):
                self._block = self._stream.read(BLOCK_SIZE)
                self._index = 0
                if not self._block:
                    raise EOFError("end of bit stream")
            self._byte = self._block[self._index]
            self._index += 1
            self._bits_left = 8
        bit = (self._byte >> 7) & 1
        self._byte = (self._byte << 1) & 0xFF
        self._bits_left -= 1
        return bit

    def __iter__(self) -> Iterator[int]:
        while True:
            try:
                bit = self.read_bit()
            except EOFError:
                return
            yield bit