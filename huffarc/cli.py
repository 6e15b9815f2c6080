"""Command-line interface for the Huffman archiver."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import Optional

from .archive import ArchiveError, compress_files, decompress_archive


def print_help(program_name: str) -> None:
    """Print the full help text."""
    print("Huffman Archiver - архиватор на алгоритме Хаффмана\n")
    print("Использование:")
    print(f"  {program_name} --compress <архив.huf> <файлы...>")
    print(f"  {program_name} --decompress <архив.huf>")
    print(f"  {program_name} --help\n")
    print("Примеры:")
    print(f"  {program_name} --compress data.huf file1.txt file2.jpg")
    print(f"  {program_name} --decompress data.huf")


def print_usage_error(program_name: str) -> None:
    """Print a short usage reminder to standard error."""
    err = sys.stderr
    print("Ошибка: неверные аргументы командной строки.\n", file=err)
    print("Использование:", file=err)
    print(f"  {program_name} --compress <архив.huf> <файл1> [файл2] ...", file=err)
    print(f"  {program_name} --decompress <архив.huf>", file=err)
    print(f"  {program_name} --help\n", file=err)
    print(f"Для получения подробной справки используйте: {program_name} --help", file=err)


def _program_name() -> str:
    if sys.argv and sys.argv[0]:
        return os.path.basename(sys.argv[0])
    return "huffarc"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the archiver with ``argv`` (without the program name); return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    program_name = _program_name()

    if not args:
        print_usage_error(program_name)
        return 1

    command = args[0]
    if command in ("--help", "-h"):
        print_help(program_name)
        return 0

    if command in ("--compress", "--c"):
        if len(args) < 3:
            print(
                "Ошибка: для сжатия необходимо указать имя архива и хотя бы один файл.",
                file=sys.stderr,
            )
            print_usage_error(program_name)
            return 1
        print("=HUFFMAN ARCHIVER - РЕЖИМ СЖАТИЯ=")
        try:
            compress_files(args[2:], args[1])
        except ArchiveError as exc:
            print(f"Error: {exc}", file=sys.stderr)
        return 0

    if command in ("--decompress", "--d"):
        if len(args) != 2:
            print(
                "Ошибка: для распаковки необходимо указать только имя архива.",
                file=sys.stderr,
            )
            print_usage_error(program_name)
            return 1
        print("=HUFFMAN ARCHIVER - РЕЖИМ РАСПАКОВКИ=")
        try:
            decompress_archive(args[1])
        except ArchiveError as exc:
            print(f"Error: {exc}", file=sys.stderr)
        return 0

    print(f"Ошибка: неизвестная команда '{command}'.", file=sys.stderr)
    print_usage_error(program_name)
    return 1


if __name__ == "__main__":
    sys.exit(main())