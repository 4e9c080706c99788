import itertools
import struct

from typing import Union

from .alphabet import INVALID, MAP_DECODE, MAP_ENCODE
from .error import (
    InsufficientDestinationLengthError,
    InvalidEncodedByteError,
    InvalidPostfixError,
)
from .length import decoded_capacity, encoded_length

BytesLike = Union[bytes, bytearray, memoryview]


def _as_buffer(msg: Union[str, BytesLike]) -> memoryview:
    if isinstance(msg, str):
        msg = msg.encode("utf-8")
    return memoryview(msg).cast("B")


def encode_into(
    plain: Union[str, BytesLike], dest: Union[bytearray, memoryview]
) -> int:
    """Encode `plain` into the front of `dest`, returning the number of symbols written.

    The output always ends with a marker block holding the 0-3 leftover
    bytes followed by a single 0x01, so the exact length can be recovered
    when decoding in 4-byte units.
    """
    plain = _as_buffer(plain)
    encoded_len = encoded_length(len(plain))
    if not encoded_len:
        return 0
    if len(dest) < encoded_len:
        raise InsufficientDestinationLengthError(encoded_len, len(dest))

    full = len(plain) - len(plain) % 4
    marker = (bytes(plain[full:]) + b"\x01").ljust(4, b"\x00")
    blocks = itertools.chain(
        struct.iter_unpack(">L", plain[:full]), struct.iter_unpack(">L", marker)
    )
    idx = 4
    for (val,) in blocks:
        for _ in range(4):
            dest[idx] = MAP_ENCODE[val % 85]
            idx -= 1
            val //= 85
        dest[idx] = MAP_ENCODE[val]
        idx += 9
    return encoded_len


def decode_into(
    encoded: Union[str, BytesLike], dest: Union[bytearray, memoryview]
) -> int:
    """Decode `encoded` into `dest`, returning the true decoded length.

    `dest` must hold at least `decoded_capacity(len(encoded))` bytes; only
    the returned prefix is meaningful.
    """
    encoded = _as_buffer(encoded)
    capacity = decoded_capacity(len(encoded))
    if not capacity:
        return 0
    if len(dest) < capacity:
        raise InsufficientDestinationLengthError(capacity, len(dest))

    digits = bytes(encoded).translate(MAP_DECODE)
    copy_to = 0
    for pos in range(0, len(digits), 5):
        m0, m1, m2, m3, m4 = digits[pos : pos + 5]
        if (m0 | m1 | m2 | m3 | m4) == INVALID:
            for char, digit in zip(encoded[pos : pos + 5], (m0, m1, m2, m3, m4)):
                if digit == INVALID:
                    raise InvalidEncodedByteError(char)
        val = m0 * 52200625 + m1 * 614125 + m2 * 7225 + m3 * 85 + m4
        # non-conforming input may exceed 32 bits
        struct.pack_into(">L", dest, copy_to, val & 0xFFFFFFFF)
        copy_to += 4

    # the marker scan is bounded by the capacity, not by len(dest)
    for idx in range(capacity - 1, -1, -1):
        byte = dest[idx]
        if byte == 1:
            return idx
        if byte:
            raise InvalidPostfixError(byte)
    raise InvalidPostfixError(0)


def encode(plain: Union[str, BytesLike]) -> bytes:
    plain = _as_buffer(plain)
    buf = bytearray(encoded_length(len(plain)))
    encode_into(plain, buf)
    return bytes(buf)


def decode(encoded: Union[str, BytesLike]) -> bytes:
    encoded = _as_buffer(encoded)
    buf = bytearray(decoded_capacity(len(encoded)))
    length = decode_into(encoded, buf)
    return bytes(buf[:length])


def encode_to_string(plain: Union[str, BytesLike]) -> str:
    return encode(plain).decode("ascii")


def decode_string(encoded: str) -> bytes:
    return decode(encoded)
