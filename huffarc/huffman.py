"""Huffman tree construction and code table generation."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

SYMBOL_COUNT = 256


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; inner nodes carry symbol 0."""

    symbol: int
    freq: int
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


@dataclass(frozen=True)
class HuffmanCode:
    """A code word: ``length`` bits taken from the low end of ``bits``."""

    bits: int
    length: int


def _take_smallest(leaves: deque, inner: deque) -> HuffmanNode:
    if inner and (not leaves or inner[0].freq <= leaves[0].freq):
        return inner.popleft()
    return leaves.popleft()


def build_tree(freq: Sequence[int]) -> HuffmanNode:
    """Build a Huffman tree from a table of 256 byte frequencies.

    A table with a single used symbol yields a root whose left child is that
    symbol and whose right child is a placeholder leaf of frequency zero.
    Raises ValueError if the table is not 256 entries long or is all zero.
    """
    if len(freq) != SYMBOL_COUNT:
        raise ValueError(f"frequency table must have {SYMBOL_COUNT} entries, got {len(freq)}")

    leaves = [HuffmanNode(symbol, count) for symbol, count in enumerate(freq) if count > 0]
    if not leaves:
        raise ValueError("frequency table is empty")

    if len(leaves) == 1:
        only = leaves[0]
        return HuffmanNode(0, only.freq, left=only, right=HuffmanNode(0, 0))

    leaf_queue = deque(sorted(leaves, key=lambda node: node.freq))
    inner_queue: deque = deque()

    while len(leaf_queue) + len(inner_queue) > 1:
        first = _take_smallest(leaf_queue, inner_queue)
        second = _take_smallest(leaf_queue, inner_queue)
        inner_queue.append(HuffmanNode(0, first.freq + second.freq, left=first, right=second))

    return leaf_queue[0] if leaf_queue else inner_queue[0]


def generate_codes(root: Optional[HuffmanNode]) -> dict[int, HuffmanCode]:
    """Map each leaf symbol to its code; left edges are 0, right edges 1.

    Leaves are visited left to right, so a later leaf with the same symbol
    replaces an earlier one.
    """
    table: dict[int, HuffmanCode] = {}
    if root is None:
        return table

    stack = [(root, 0, 0)]
    while stack:
        node, bits, depth = stack.pop()
        if node.is_leaf():
            table[node.symbol] = HuffmanCode(bits, depth)
            continue
        if node.right is not None:
            stack.append((node.right, (bits << 1) | 1, depth + 1))
        if node.left is not None:
            stack.append((node.left, bits << 1, depth + 1))
    return table