"""Errors raised while encoding, decoding and interpreting instruction streams."""


class HexplotError(ValueError):
    """Base class for all hexplot errors."""


class RangeError(HexplotError):
    """A value fell outside the bounds the wire format can carry."""


class MalformedHexError(HexplotError):
    """Input could not be split into valid two-character hex bytes."""


class ArityError(HexplotError):
    """A command was flushed with the wrong number of parameters."""

    def __init__(self, code: int, count: int):
        super().__init__(f"Command 0x{int(code):02X} cannot take {count} parameter(s)")
        self.code = code
        self.count = count


class UnknownCommandError(HexplotError):
    """Data could not be attached to any known command."""


class ParseError(HexplotError):
    """An instruction stream failed to parse.

    The specific failure is chained as ``__cause__``.
    """

    def __init__(self, offset: int, data: str = ""):
        super().__init__(f"Error in input data at offset {offset}")
        self.offset = offset
        self.data = data
