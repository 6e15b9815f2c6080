from collections import Counter
from fractions import Fraction

import pytest

from huffarc.huffman import HuffmanCode, HuffmanNode, build_tree, generate_codes


def _freq_from(data: bytes):
    table = [0] * 256
    for symbol, count in Counter(data).items():
        table[symbol] = count
    return table


def _code_string(code: HuffmanCode) -> str:
    return format(code.bits, "b").zfill(code.length)[-code.length:] if code.length else ""


def _decode(root, bits, count):
    out = bytearray()
    node = root
    for bit in bits:
        node = node.right if bit else node.left
        if node.is_leaf():
            out.append(node.symbol)
            node = root
            if len(out) == count:
                break
    return bytes(out)


def test_empty_table_raises():
    with pytest.raises(ValueError):
        build_tree([0] * 256)


def test_wrong_table_length_raises():
    with pytest.raises(ValueError):
        build_tree([1] * 10)


def test_is_leaf():
    leaf = HuffmanNode(7, 3)
    parent = HuffmanNode(0, 3, left=leaf)
    assert leaf.is_leaf() is True
    assert parent.is_leaf() is False


def test_single_symbol_tree_has_placeholder_leaf():
    root = build_tree(_freq_from(b"AAAA"))
    assert root.left == HuffmanNode(ord("A"), 4)
    assert root.right == HuffmanNode(0, 0)
    assert root.freq == 4


def test_single_symbol_codes():
    codes = generate_codes(build_tree(_freq_from(b"AAAA")))
    assert codes[ord("A")] == HuffmanCode(0, 1)
    assert codes[0] == HuffmanCode(1, 1)


def test_root_frequency_is_total():
    data = b"the quick brown fox jumps over the lazy dog"
    root = build_tree(_freq_from(data))
    assert root.freq == len(data)


def test_codes_cover_every_used_symbol():
    data = b"abracadabra"
    codes = generate_codes(build_tree(_freq_from(data)))
    assert set(codes) == set(data)


def test_two_symbols_get_one_bit_each():
    codes = generate_codes(build_tree(_freq_from(b"aab")))
    assert {code.length for code in codes.values()} == {1}
    assert {code.bits for code in codes.values()} == {0, 1}


def test_codes_are_prefix_free():
    data = bytes(range(40)) * 3 + b"zzzzzzzzzzzzzyyyyyxx"
    codes = [_code_string(c) for c in generate_codes(build_tree(_freq_from(data))).values()]
    for a in codes:
        for b in codes:
            if a is not b and a != b:
                assert not b.startswith(a)
    assert len(set(codes)) == len(codes)


def test_kraft_sum_is_one():
    data = b"mississippi river banks"
    codes = generate_codes(build_tree(_freq_from(data)))
    assert sum(Fraction(1, 2 ** c.length) for c in codes.values()) == 1


def test_more_frequent_symbols_get_no_longer_codes():
    freq = [0] * 256
    for index, count in enumerate([1, 2, 4, 8, 16, 32]):
        freq[index] = count
    codes = generate_codes(build_tree(freq))
    lengths = [codes[i].length for i in range(6)]
    assert lengths == sorted(lengths, reverse=True)


def test_uniform_frequencies_give_equal_lengths():
    codes = generate_codes(build_tree([1] * 256))
    assert len(codes) == 256
    assert {c.length for c in codes.values()} == {8}


def test_build_is_deterministic():
    freq = _freq_from(b"aab")
    first = generate_codes(build_tree(freq))
    second = generate_codes(build_tree(freq))
    # The rarer symbol is taken first and becomes the left (0) branch.
    assert first == {ord("b"): HuffmanCode(0, 1), ord("a"): HuffmanCode(1, 1)}
    assert second == first


@pytest.mark.parametrize(
    "data",
    [b"abracadabra", b"AAAA", bytes(range(256)), b"hello, world\n" * 20],
)
def test_encode_decode_round_trip(data):
    root = build_tree(_freq_from(data))
    codes = generate_codes(root)
    bits = [int(ch) for symbol in data for ch in _code_string(codes[symbol])]
    assert _decode(root, bits, len(data)) == data


def test_generate_codes_of_none_is_empty():
    assert generate_codes(None) == {}