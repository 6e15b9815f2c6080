"""Block-wise file reading with a running byte frequency table."""

from __future__ import annotations

import os
from collections import Counter
from collections.abc import Iterator

BLOCK_SIZE = 4096


class FileReader:
    """Reads a file in blocks and counts how often each byte value occurs.

    Frequencies accumulate over every pass, including passes after
    :meth:`rewind`.
    """

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = path
        self.freq = [0] * 256
        self._file = open(path, "rb")

    def read_blocks(self) -> Iterator[bytes]:
        """Yield the rest of the file in blocks of up to BLOCK_SIZE bytes."""
        while True:
            block = self._file.read(BLOCK_SIZE)
            if not block:
                return
            for symbol, count in Counter(block).items():
                self.freq[symbol] += count
            yield block

    def rewind(self) -> None:
        """Go back to the start of the file."""
        self._file.seek(0)

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "FileReader":
        return self

    def __exit__(self, *args) -> None:
        self.close()


def file_size(path: str | os.PathLike) -> int:
    """Return the size of the file at ``path`` in bytes."""
    return os.path.getsize(path)