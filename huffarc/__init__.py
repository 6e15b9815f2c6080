"""Huffman-coding multi-file archiver with a command-line interface."""

__version__ = "0.1.0"
__all__ = ["archive", "bitio", "cli", "huffman", "reader"]