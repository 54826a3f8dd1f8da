"""Byte-at-a-time reader over in-memory data or a binary stream."""

from typing import BinaryIO

from ansi_raster.core.errors import InputTooLargeError

ByteSource = bytes | bytearray | memoryview | BinaryIO


class ByteScanner:
    """
    Hands out one byte at a time and reports end-of-input as ``None``.

    Streams are read in chunks, so file objects do not need to support
    single-byte reads efficiently.
    """

    def __init__(
        self,
        source: ByteSource,
        limit: int | None = None,
        chunk_size: int = 64 * 1024,
    ):
        if isinstance(source, (bytes, bytearray, memoryview)):
            self._stream: BinaryIO | None = None
            self._buffer = bytes(source)
        else:
            self._stream = source
            self._buffer = b""
        self._index = 0
        self._offset = 0  # bytes consumed before the current buffer
        self.limit = limit
        self.chunk_size = chunk_size

    @property
    def position(self) -> int:
        """Offset of the next byte to be read."""
        return self._offset + self._index

    def read(self) -> int | None:
        """Return the next byte, or None once the input is exhausted."""
        if self._index >= len(self._buffer) and not self._fill():
            return None
        if self.limit is not None and self.position >= self.limit:
            raise InputTooLargeError(self.limit, self.position)
        byte = self._buffer[self._index]
        self._index += 1
        return byte

    def _fill(self) -> bool:
        if self._stream is None:
            return False
        chunk = self._stream.read(self.chunk_size)
        if not chunk:
            self._stream = None
            return False
        self._offset += len(self._buffer)
        self._buffer = chunk
        self._index = 0
        return True
