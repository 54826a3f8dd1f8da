"""ANSI escape sequence parser producing typed terminal operations."""

import logging

from ansi_raster.codec.scanner import ByteScanner, ByteSource
from ansi_raster.core.constants import (
    DIGIT_NINE,
    DIGIT_ZERO,
    ESC,
    LEFT_BRACKET,
    MAX_CODE,
    MAX_PARAMETER,
    SEMICOLON,
    SUB,
)
from ansi_raster.core.errors import (
    InvalidParameterError,
    MalformedEscapeError,
    OperationLimitError,
    ParameterRangeError,
    TruncatedSequenceError,
    UnknownControlError,
)
from ansi_raster.core.operation import (
    Character,
    Clear,
    CursorBackward,
    CursorDown,
    CursorForward,
    CursorUp,
    MoveCursorTo,
    Operation,
    RestoreCursorPosition,
    SaveCursorPosition,
    SelectGraphicsRendition,
    clear_kind,
)

logger = logging.getLogger(__name__)

_CURSOR_MOTION = {
    ord('A'): CursorUp,
    ord('B'): CursorDown,
    ord('C'): CursorForward,
    ord('D'): CursorBackward,
}


_MAX_DIGITS = len(str(MAX_PARAMETER))


def _is_digit(byte: int) -> bool:
    return DIGIT_ZERO <= byte <= DIGIT_NINE


class AnsiParser:
    """
    Byte-level parser that turns raw CP437 ANSI data into Operations.

    Plain bytes become ``Character`` operations; ``ESC [ params final``
    sequences are decoded into cursor, clear and rendition operations.
    The stream ends at end-of-input or at the DOS EOF marker (0x1A).
    Anything else malformed raises a ``ParseError`` and no operations are
    returned.
    """

    def __init__(
        self,
        source: ByteSource | ByteScanner,
        max_operations: int | None = None,
    ):
        if isinstance(source, ByteScanner):
            self.scanner = source
        else:
            self.scanner = ByteScanner(source)
        self.max_operations = max_operations
        self._operations: list[Operation] = []

    def parse_all(self) -> list[Operation]:
        """Parse the whole input and return the operation list."""
        self._operations = []

        while True:
            byte = self.scanner.read()
            if byte is None or byte == SUB:
                break
            if byte == ESC:
                self._parse_escape()
            else:
                self._emit(Character(byte))

        logger.debug(
            "parsed %d operations from %d bytes",
            len(self._operations), self.scanner.position,
        )
        return self._operations

    def _next(self) -> int:
        """Read a byte that must exist because a sequence is in progress."""
        byte = self.scanner.read()
        if byte is None:
            raise TruncatedSequenceError(self.scanner.position)
        return byte

    def _emit(self, operation: Operation) -> None:
        if self.max_operations is not None and len(self._operations) >= self.max_operations:
            raise OperationLimitError(self.max_operations, self.scanner.position)
        self._operations.append(operation)

    def _parse_escape(self) -> None:
        byte = self._next()
        if byte != LEFT_BRACKET:
            raise MalformedEscapeError(byte, self.scanner.position - 1)

        params, final = self._collect_parameters()
        self._dispatch(params, final)

    def _collect_parameters(self) -> tuple[list[int], int]:
        """Read ';'-separated numbers up to and including the final byte."""
        params: list[int] = []
        byte = self._next()
        while True:
            if byte == SEMICOLON:
                # Empty parameter
                params.append(0)
                byte = self._next()
            elif _is_digit(byte):
                value, byte = self._read_number(byte)
                params.append(value)
                if byte == SEMICOLON:
                    byte = self._next()
            else:
                return params, byte

    def _read_number(self, byte: int) -> tuple[int, int]:
        """Read a digit run; returns the value and the byte following it."""
        start = self.scanner.position - 1
        digits = bytearray()
        while _is_digit(byte):
            # Leading zeros do not count towards the length limit
            if digits or byte != DIGIT_ZERO:
                digits.append(byte)
                if len(digits) > _MAX_DIGITS:
                    raise InvalidParameterError(digits.decode('ascii'), start)
            byte = self._next()
        text = digits.decode('ascii') or '0'
        try:
            value = int(text)
        except ValueError:
            raise InvalidParameterError(text, start) from None
        if value > MAX_PARAMETER:
            raise InvalidParameterError(text, start)
        return value, byte

    def _check_code(self, value: int, final: int) -> None:
        if value > MAX_CODE:
            raise ParameterRangeError(value, final, self.scanner.position - 1)

    def _dispatch(self, params: list[int], final: int) -> None:
        """Emit the operations selected by the final byte."""
        if final in _CURSOR_MOTION:
            # Moves the cursor n (default 1) cells in the given direction.
            n = params[0] if params else 1
            self._emit(_CURSOR_MOTION[final](n))
        elif final == ord('H'):
            # Row and column default to 1, and an explicit 0 means 1 as well,
            # so CSI ;5H is CSI 1;5H and CSI 17;H is CSI 17;1H.
            row = params[0] if len(params) > 0 else 1
            col = params[1] if len(params) > 1 else 1
            self._emit(MoveCursorTo(row=row or 1, col=col or 1))
        elif final == ord('J'):
            kind = params[0] if params else 0
            self._check_code(kind, final)
            self._emit(Clear(clear_kind(kind)))
        elif final == ord('m'):
            # CSI m is treated as CSI 0m
            for code in params or [0]:
                self._check_code(code, final)
                self._emit(SelectGraphicsRendition(code))
        elif final == ord('s'):
            self._emit(SaveCursorPosition())
        elif final == ord('u'):
            self._emit(RestoreCursorPosition())
        elif final == ord('M'):
            pass
        else:
            raise UnknownControlError(params, final, self.scanner.position - 1)


def parse(source: ByteSource | ByteScanner, max_operations: int | None = None) -> list[Operation]:
    """Parse ANSI data into a list of operations."""
    return AnsiParser(source, max_operations=max_operations).parse_all()
