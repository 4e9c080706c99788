from typing import Optional

MAP_ENCODE = (
    b"0123456789abcdefghijklmnopqrstuvwxyzABCDEFG"
    b"HIJKLMNOPQRSTUVWXYZ.-:+=^!/*?&<>()[]{}@%$#"
)

INVALID = 0xFF

# indexed by byte value, INVALID for bytes outside the alphabet
MAP_DECODE = bytes(
    MAP_ENCODE.index(c) if c in MAP_ENCODE else INVALID for c in range(256)
)


def digit_to_symbol(digit: int) -> int:
    if not 0 <= digit < len(MAP_ENCODE):
        raise ValueError(f"digit out of range: {digit}")
    return MAP_ENCODE[digit]


def symbol_to_digit(symbol: int) -> Optional[int]:
    if not 0 <= symbol <= 0xFF:
        return None
    digit = MAP_DECODE[symbol]
    if digit == INVALID:
        return None
    return digit
