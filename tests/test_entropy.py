import math

import pytest

from huffcode.entropy import (
    average_code_length,
    calculate_entropy,
    compression_stats,
    original_bits,
)
from huffcode.huffman import build_code, huffman_encode


def test_original_bits_counts_utf8_bytes():
    assert original_bits("abc") == 24
    assert original_bits("é") == 16
    assert original_bits("") == 0


def test_entropy_uniform_and_single():
    assert calculate_entropy({"a": 1, "b": 1}) == pytest.approx(1.0)
    assert calculate_entropy({"a": 1, "b": 1, "c": 1, "d": 1}) == pytest.approx(2.0)
    assert calculate_entropy({"a": 4}) == pytest.approx(0.0)
    assert calculate_entropy({}) == 0.0


def test_average_code_length():
    freq = {"a": 2, "b": 2, "c": 1}
    codes = {"b": "0", "c": "10", "a": "11"}
    assert average_code_length(freq, codes) == pytest.approx((2 * 2 + 2 * 1 + 1 * 2) / 5)
    assert average_code_length({}, {}) == 0.0


def test_huffman_code_length_is_within_one_bit_of_entropy():
    text = "this is an example of a huffman tree"
    _, codes, freq = build_code(text)
    H = calculate_entropy(freq)
    L = average_code_length(freq, codes)
    assert H <= L < H + 1


def test_compression_stats():
    text = "abc"
    _, codes, freq = build_code(text)
    encoded = huffman_encode(text, codes)
    stats = compression_stats(text, encoded, freq, codes)
    assert stats["original_bits"] == 24
    assert stats["encoded_bits"] == 5
    assert stats["ratio"] == pytest.approx(5 / 24)
    assert stats["saving"] == pytest.approx(19 / 24)
    assert stats["entropy"] == pytest.approx(math.log2(3))
    assert stats["avg_code_length"] == pytest.approx(5 / 3)
    assert stats["efficiency"] == pytest.approx(math.log2(3) / (5 / 3))


def test_compression_stats_empty_text():
    stats = compression_stats("", "", {}, {})
    assert stats["original_bits"] == 0
    assert stats["ratio"] == 0.0
    assert stats["saving"] == 0.0
    assert stats["efficiency"] == 1.0
