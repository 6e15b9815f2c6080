"""Multi-file Huffman archives: writing, reading and progress output."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from typing import BinaryIO, Optional, Sequence, Union

from .bitio import BitReader, BitWriter
from .huffman import HuffmanNode, build_tree, generate_codes
from .reader import FileReader, file_size

ARCHIVE_SUFFIX = ".huf"
NAME_FIELD_SIZE = 256
MAX_ORIGINAL_SIZE = 512 * 1024 * 1024

_COUNT = struct.Struct("<i")
_ENTRY = struct.Struct(f"<{NAME_FIELD_SIZE}sQQQ")
_SIZE = struct.Struct("<Q")
_FREQ = struct.Struct("<256I")
_CHUNK = 4096

ENTRY_SIZE = _ENTRY.size

PathType = Union[str, "os.PathLike[str]"]


class ArchiveError(Exception):
    """Raised when an archive cannot be written or read."""


@dataclass
class ArchiveEntry:
    """One file's record in the archive's table of contents."""

    filename: str = ""
    offset: int = 0
    size: int = 0
    original_size: int = 0

    def pack(self) -> bytes:
        """Encode the entry; the name is cut to 255 bytes and null padded."""
        name = os.fsencode(self.filename)[: NAME_FIELD_SIZE - 1]
        return _ENTRY.pack(name, self.offset, self.size, self.original_size)

    @classmethod
    def unpack(cls, data: bytes) -> "ArchiveEntry":
        """Decode an entry from exactly ENTRY_SIZE bytes."""
        if len(data) != ENTRY_SIZE:
            raise ValueError(f"archive entry must be {ENTRY_SIZE} bytes, got {len(data)}")
        return cls._from_fields(*_ENTRY.unpack(data))

    @classmethod
    def _from_fields(cls, name: bytes, offset: int, size: int, original_size: int) -> "ArchiveEntry":
        return cls(os.fsdecode(name.split(b"\0", 1)[0]), offset, size, original_size)


def is_archive_file(filename: str) -> bool:
    """Tell whether the name carries the archive extension."""
    _, ext = os.path.splitext(os.fsdecode(filename))
    dot = os.fsdecode(filename).rfind(".")
    return dot >= 0 and os.fsdecode(filename)[dot:] == ARCHIVE_SUFFIX if not ext else ext == ARCHIVE_SUFFIX


def _code_bits(root: HuffmanNode) -> dict[int, tuple[int, ...]]:
    return {
        symbol: tuple((code.bits >> shift) & 1 for shift in range(code.length - 1, -1, -1))
        for symbol, code in generate_codes(root).items()
    }


def compress_file(archive: BinaryIO, path: PathType) -> ArchiveEntry:
    """Append one compressed file to ``archive`` and return its entry."""
    name = os.fsdecode(path)
    print(f"Compressing {name} ---> archive file")
    try:
        reader = FileReader(path)
    except OSError as exc:
        raise ArchiveError(f"Problem with open input file {name}") from exc

    with reader:
        try:
            size = file_size(path)
        except OSError as exc:
            raise ArchiveError(f"Cannot open file {name} to get size") from exc
        if size <= 0:
            raise ArchiveError(f"Cannot get file size for {name}")

        print("Building frequency table...")
        processed = 0
        for block in reader.read_blocks():
            processed += len(block)
            print_progress_bar(processed, size)

        print("Building Huffman tree...")
        try:
            tree = build_tree(reader.freq)
        except ValueError as exc:
            raise ArchiveError("Cannot build Huffman tree") from exc
        codes = _code_bits(tree)

        offset = archive.tell()
        archive.write(_SIZE.pack(size))
        archive.write(_FREQ.pack(*reader.freq))

        print("Compressing data...")
        reader.rewind()
        writer = BitWriter(archive)
        processed = 0
        for block in reader.read_blocks():
            for symbol in block:
                for bit in codes[symbol]:
                    writer.write(bit)
            processed += len(block)
            print_progress_bar(processed, size)
        writer.flush()

        entry = ArchiveEntry(name, offset, archive.tell() - offset, size)

    print("Compression completed successfully!")
    return entry


def compress_files(input_files: Sequence[PathType], archive_name: PathType) -> list[ArchiveEntry]:
    """Write an archive of ``input_files``; names ending in .huf are skipped.

    Skipped files still count in the header and keep an empty entry.
    Returns the entries in input order.
    """
    print(f"Creating archive: {os.fsdecode(archive_name)}")
    try:
        archive = open(archive_name, "wb")
    except OSError as exc:
        raise ArchiveError("Problem with opening archive") from exc

    with archive:
        if all(is_archive_file(os.fsdecode(name)) for name in input_files):
            raise ArchiveError(
                "No files to archive (all files are archives or have archive extensions)"
            )

        total = len(input_files)
        archive.write(_COUNT.pack(total))
        header_pos = archive.tell()
        archive.write(bytes(ENTRY_SIZE * total))

        entries = []
        for number, path in enumerate(input_files, 1):
            name = os.fsdecode(path)
            if is_archive_file(name):
                print(f"Skipping archive file: {name}")
                entries.append(ArchiveEntry())
                continue
            print(f"[{number}/{total}] {name}")
            try:
                entries.append(compress_file(archive, path))
            except ArchiveError:
                print("Error occurred during compression. Aborting.")
                raise

        archive.seek(header_pos)
        archive.write(b"".join(entry.pack() for entry in entries))

    print("Archive successfully created.")
    return entries


def decompress_file(
    reader: BitReader, root: Optional[HuffmanNode], out: BinaryIO, original_size: int
) -> int:
    """Decode up to ``original_size`` bytes into ``out``; return how many were written."""
    print("Decompressing file...")
    if root is None:
        raise ArchiveError("Huffman tree is empty")

    node = root
    pending = bytearray()
    written = 0
    last_percent = -1

    if original_size > 0:
        for bit in reader:
            node = node.right if bit else node.left
            if node is None:
                print("Error: Invalid Huffman tree path")
                break
            if node.is_leaf():
                pending.append(node.symbol)
                node = root
                written += 1
                if len(pending) >= _CHUNK:
                    out.write(bytes(pending))
                    pending.clear()
                percent = int(written / original_size * 100)
                if percent != last_percent:
                    print(
                        f"\rProgress: {percent}% ({written}/{original_size} bytes)",
                        end="",
                        flush=True,
                    )
                    last_percent = percent
                if written >= original_size:
                    break

    if pending:
        out.write(bytes(pending))
    print(f"\nDecompression completed successfully! Total: {written} bytes")
    return written


def _extract_entry(source: BinaryIO, entry: ArchiveEntry) -> bool:
    """Extract one entry; return False on an error that marks the archive damaged."""
    source.seek(entry.offset)

    raw = source.read(_SIZE.size)
    if len(raw) != _SIZE.size:
        print(f"Error: Cannot read original size for {entry.filename}")
        return False
    (original_size,) = _SIZE.unpack(raw)
    if original_size == 0 or original_size > MAX_ORIGINAL_SIZE:
        print(f"Error: Invalid original size ({original_size}) for {entry.filename}")
        return False

    raw = source.read(_FREQ.size)
    if len(raw) != _FREQ.size:
        print(f"Error: Cannot read frequency table for {entry.filename}")
        return False
    freq = list(_FREQ.unpack(raw))
    if sum(freq) == 0:
        print(f"Error: Corrupted frequency table for {entry.filename} (all zero)")
        return False

    try:
        tree = build_tree(freq)
    except ValueError:
        print(f"Error: Cannot build Huffman tree for {entry.filename}")
        return False

    print(f"Attempting to create file: '{entry.filename}'")
    try:
        out = open(entry.filename, "wb")
    except OSError as exc:
        print(f"Error: Cannot create output file '{entry.filename}'")
        print(f"open output: {exc.strerror}")
        return True

    with out:
        decompress_file(BitReader(source), tree, out, original_size)
    return True


def decompress_archive(archive_name: PathType) -> bool:
    """Extract every file of the archive; return True if no entry failed."""
    try:
        source = open(archive_name, "rb")
    except OSError as exc:
        raise ArchiveError(f"Cannot open archive {os.fsdecode(archive_name)}: {exc.strerror}") from exc

    with source:
        raw = source.read(_COUNT.size)
        if len(raw) != _COUNT.size:
            raise ArchiveError("Cannot read file count from archive")
        (count,) = _COUNT.unpack(raw)
        print(f"Archive contains {count} file(s)")
        if count <= 0:
            raise ArchiveError(f"Invalid file count: {count}")

        remaining = os.fstat(source.fileno()).st_size - source.tell()
        if ENTRY_SIZE * count > remaining:
            raise ArchiveError("Cannot read archive entries")
        raw = source.read(ENTRY_SIZE * count)
        if len(raw) != ENTRY_SIZE * count:
            raise ArchiveError("Cannot read archive entries")
        entries = [ArchiveEntry._from_fields(*fields) for fields in _ENTRY.iter_unpack(raw)]

        print("Entries read successfully. Starting extraction...")
        ok = True
        for number, entry in enumerate(entries, 1):
            print(f"[{number}/{count}] Extracting: {entry.filename} ({entry.original_size} bytes)")
            if not _extract_entry(source, entry):
                ok = False

    if ok:
        print("Archive extraction completed successfully.")
    else:
        print("Archive extraction completed with errors.")
    return ok


def print_progress_bar(current: int, total: int) -> None:
    """Redraw a 50-column progress bar on the current line."""
    percent = int(current / total * 100)
    filled = percent // 2
    bar = "=" * filled + " " * (50 - filled)
    print(f"\r{percent}% [{bar}] {current}/{total} bytes total", end="", flush=True)
    if current == total:
        print()


def print_stats(filename: str, original: int, compressed: int) -> None:
    """Print sizes and the compression ratio of one file."""
    ratio = compressed / original * 100
    print(f"File: {filename}")
    print(f"  Original size: {original} bytes")
    print(f"  Compressed size: {compressed} bytes")
    print(f"  Compression ratio: {ratio:.2f}%")
    print(f"  Space saved: {100.0 - ratio:.2f}%")