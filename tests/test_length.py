"""Tests for encoded length and decoded capacity arithmetic."""

from __future__ import annotations

import pytest

from z85_codec import InvalidEncodedLengthError, decoded_capacity, encoded_length


@pytest.mark.parametrize(
    "plain_len,expected",
    [(0, 0), (1, 5), (2, 5), (3, 5), (4, 10), (5, 10), (7, 10), (8, 15), (32, 45)],
)
def test_encoded_length(plain_len: int, expected: int) -> None:
    assert encoded_length(plain_len) == expected


def test_encoded_length_monotonic() -> None:
    """Grows by one block every 4 bytes, never shrinks."""
    previous = 0
    for n in range(1, 200):
        length = encoded_length(n)
        assert length >= previous
        assert length % 5 == 0
        assert length == (n + 4) // 4 * 5
        previous = length


@pytest.mark.parametrize("encoded_len,expected", [(0, 0), (5, 4), (10, 8), (45, 36)])
def test_decoded_capacity(encoded_len: int, expected: int) -> None:
    assert decoded_capacity(encoded_len) == expected


@pytest.mark.parametrize("encoded_len", [1, 4, 6, 11, 99])
def test_decoded_capacity_invalid(encoded_len: int) -> None:
    with pytest.raises(InvalidEncodedLengthError) as exc:
        decoded_capacity(encoded_len)
    assert exc.value.length == encoded_len


def test_negative_lengths() -> None:
    with pytest.raises(ValueError):
        encoded_length(-1)
    with pytest.raises(ValueError):
        decoded_capacity(-5)
