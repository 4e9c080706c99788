def _describe(byte: int) -> str:
    char = chr(byte)
    if char.isprintable():
        return f"U+{byte:04X} '{char}'"
    return f"U+{byte:04X}"


class Z85Exception(Exception):
    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))


class InsufficientDestinationLengthError(Z85Exception):
    def __init__(self, want: int, got: int):
        super().__init__(want, got)
        self.want = want
        self.got = got

    def __str__(self):
        return f"z85: insufficient destination length: {self.got} < {self.want}"


class InvalidEncodedLengthError(Z85Exception, ValueError):
    def __init__(self, length: int):
        super().__init__(length)
        self.length = length

    def __str__(self):
        return f"z85: invalid encoded length: {self.length}"


class InvalidEncodedByteError(Z85Exception, ValueError):
    def __init__(self, byte: int):
        super().__init__(byte)
        self.byte = byte

    def __str__(self):
        return f"z85: invalid encoded byte: {_describe(self.byte)}"


class InvalidPostfixError(Z85Exception, ValueError):
    def __init__(self, byte: int = 0):
        super().__init__(byte)
        self.byte = byte

    def __str__(self):
        if not self.byte:
            return "z85: invalid postfix"
        return f"z85: invalid postfix: {_describe(self.byte)}"
