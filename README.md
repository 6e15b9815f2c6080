# huffarc

An archiver that packs one or more files into a single `.huf` archive using
Huffman coding, and unpacks them again. It needs nothing beyond the Python
standard library (Python 3.10 or later).

## Installation

```
pip install .
```

## Command line

Create an archive from one or more files:

```
huffarc --compress data.huf file1.txt file2.jpg
```

`--c` is accepted as a short form. Files whose name ends in `.huf` are
skipped, so an archive is never packed into another archive; a skipped file
still takes an empty slot in the archive's table. If every file given ends
in `.huf`, nothing is archived. Empty input files cannot be archived, and an
error in any file aborts the whole run.

Extract every file stored in an archive:

```
huffarc --decompress data.huf
```

`--d` is accepted as a short form. Each file is written back under the name
it was stored with (the path as it was given when compressing, cut to 255
bytes), relative to the current directory, replacing any file of that name.

Show help with:

```
huffarc --help
```

`-h` works as well. Progress bars and status lines are printed while the
archiver runs. The command exits with status 1 when its arguments are wrong
or the command is unknown; problems with the files or the archive are
printed as errors on standard error.

## Library use

```python
from huffarc.archive import compress_files, decompress_archive

entries = compress_files(["notes.txt", "image.png"], "bundle.huf")
ok = decompress_archive("bundle.huf")
```

`compress_files` returns one `ArchiveEntry` per input file, in input order,
and raises `huffarc.archive.ArchiveError` when the archive cannot be
written. `decompress_archive` raises `ArchiveError` when the archive cannot
be opened or its header is unreadable, and returns `False` if any single
entry could not be extracted.

Other parts of `huffarc.archive`:

- `compress_file(archive, path)` appends one compressed file to an open
  binary stream and returns its `ArchiveEntry`.
- `decompress_file(reader, root, out, original_size)` decodes bits from a
  `BitReader` with a Huffman tree into `out` and returns the byte count.
- `ArchiveEntry.pack()` and `ArchiveEntry.unpack(data)` encode and decode
  one table entry.
- `is_archive_file(filename)` tells whether a name ends in `.huf`.
- `print_progress_bar(current, total)` and
  `print_stats(filename, original, compressed)` print progress and sizes.

Lower-level pieces:

- `huffarc.huffman.build_tree(freq)` builds a Huffman tree from a 256-entry
  frequency table (raising `ValueError` for a wrong length or an all-zero
  table), and `huffarc.huffman.generate_codes(root)` turns it into a dict of
  symbol to `HuffmanCode`.
- `huffarc.bitio.BitWriter` and `huffarc.bitio.BitReader` write and read
  single bits, most significant bit first; `BitReader` can be iterated.
- `huffarc.reader.FileReader` reads a file in 4 KiB blocks while it counts
  byte frequencies, and `huffarc.reader.file_size(path)` gives a file's size.

## Archive format

All numbers are little-endian. An archive begins with the file count (a
32-bit signed integer), followed by a fixed-size table with one entry per
file: a 256-byte null-padded name, then offset, compressed size and original
size as 64-bit unsigned integers. Each file's data block holds the original
size (64-bit), the 256-entry frequency table (32-bit each) and then the
Huffman-coded bit stream, padded with zero bits to a whole byte. When
extracting, stored sizes of zero or above 512 MiB are treated as corrupt.

## What it does not do

The archiver has no way to list an archive's contents without extracting
it, to extract only some files, or to add files to an existing archive. It
stores no checksums, file permissions or timestamps, and does not create
missing directories when extracting.