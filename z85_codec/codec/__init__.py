from .alphabet import MAP_ENCODE, digit_to_symbol, symbol_to_digit
from .error import (
    InsufficientDestinationLengthError,
    InvalidEncodedByteError,
    InvalidEncodedLengthError,
    InvalidPostfixError,
    Z85Exception,
)
from .length import decoded_capacity, encoded_length
from .z85 import (
    decode,
    decode_into,
    decode_string,
    encode,
    encode_into,
    encode_to_string,
)

__all__ = [
    "MAP_ENCODE",
    "digit_to_symbol",
    "symbol_to_digit",
    "encoded_length",
    "decoded_capacity",
    "encode",
    "encode_into",
    "encode_to_string",
    "decode",
    "decode_into",
    "decode_string",
    "Z85Exception",
    "InsufficientDestinationLengthError",
    "InvalidEncodedLengthError",
    "InvalidEncodedByteError",
    "InvalidPostfixError",
]
