"""Exception hierarchy for parsing, rendering and rasterizing ANSI art.

Every error is fatal for the document being processed: no partial output
is produced. Callers handling many files catch ``AnsiError`` and skip the
offending document.
"""


class AnsiError(ValueError):
    """Base class for all ansi_raster errors."""


class ConfigError(AnsiError):
    """A setting has an invalid value."""


# Parse-time errors

class ParseError(AnsiError):
    """The byte stream could not be decoded into operations."""

    def __init__(self, message: str, position: int):
        super().__init__(f"{message} (at byte {position})")
        self.position = position


class MalformedEscapeError(ParseError):
    """ESC was not followed by '['."""

    def __init__(self, found: int, position: int):
        super().__init__(
            f"invalid escape sequence, expected 0x5b found 0x{found:02x}",
            position,
        )
        self.found = found


class TruncatedSequenceError(ParseError):
    """Input ended inside an escape sequence."""

    def __init__(self, position: int):
        super().__init__("unexpected end of input inside escape sequence", position)


class UnknownControlError(ParseError):
    """A CSI sequence ended with an unsupported final byte."""

    def __init__(self, parameters: list[int], final: int, position: int):
        params = ";".join(str(p) for p in parameters)
        shown = chr(final) if 0x20 < final < 0x7F else f"<0x{final:02x}>"
        super().__init__(f"unknown escape sequence ESC[{params}{shown}", position)
        self.parameters = list(parameters)
        self.final = final


class InvalidParameterError(ParseError):
    """A numeric parameter does not fit the integer domain."""

    def __init__(self, digits: str, position: int):
        super().__init__(f"failed to parse number {digits!r}", position)
        self.digits = digits


class ParameterRangeError(ParseError):
    """A parameter is outside the byte range its sequence allows."""

    def __init__(self, value: int, final: int, position: int):
        super().__init__(f"parameter {value} of ESC[{chr(final)} is outside 0-255", position)
        self.value = value
        self.final = final


class OperationLimitError(ParseError):
    """More operations were produced than the configured ceiling allows."""

    def __init__(self, limit: int, position: int):
        super().__init__(f"operation limit of {limit} exceeded", position)
        self.limit = limit


class InputTooLargeError(ParseError):
    """The input is larger than the configured ceiling."""

    def __init__(self, limit: int, position: int):
        super().__init__(f"input exceeds {limit} bytes", position)
        self.limit = limit


# Render-time errors

class RenderError(AnsiError):
    """An operation could not be applied to the virtual screen."""


class UnhandledClearError(RenderError):
    def __init__(self, kind: int):
        super().__init__(f"unhandled clear type {int(kind)}")
        self.kind = kind


class UnhandledRenditionError(RenderError):
    def __init__(self, code: int):
        super().__init__(f"unhandled graphics rendition {code}")
        self.code = code


class CursorStackUnderflowError(RenderError):
    def __init__(self) -> None:
        super().__init__("restore cursor position without a saved position")


class GridLimitError(RenderError):
    def __init__(self, row: int, max_rows: int):
        super().__init__(f"row {row} exceeds the limit of {max_rows} rows")
        self.row = row
        self.max_rows = max_rows


class UnhandledOperationError(RenderError):
    def __init__(self, operation: object):
        super().__init__(f"unhandled sequence {type(operation).__name__}")
        self.operation = operation


# Output errors

class FontError(AnsiError):
    """Font data could not be decoded."""


class RasterError(AnsiError):
    """A grid could not be turned into a bitmap."""
