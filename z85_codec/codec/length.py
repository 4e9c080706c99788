from .error import InvalidEncodedLengthError


def encoded_length(plain_len: int) -> int:
    """Exact number of symbols needed to encode `plain_len` bytes.

    One trailing marker block is always included, so a multiple of 4
    still grows by a whole block.
    """
    if plain_len < 0:
        raise ValueError("length must not be negative")
    if plain_len == 0:
        return 0
    return (plain_len + 4) // 4 * 5


def decoded_capacity(encoded_len: int) -> int:
    """Buffer length certainly large enough to hold the decoded bytes.

    The true decoded length is only known after decoding and may be
    up to 4 bytes shorter.
    """
    if encoded_len < 0:
        raise ValueError("length must not be negative")
    if encoded_len == 0:
        return 0
    if encoded_len % 5 != 0:
        raise InvalidEncodedLengthError(encoded_len)
    return encoded_len // 5 * 4
