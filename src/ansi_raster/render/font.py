"""Fixed-width bitmap fonts indexed by CP437 glyph code.

Three on-disk layouts are recognised:

- raw VGA dumps (``.f08``, ``.f14``, ``.f16``...): 256 glyphs, 8 pixels wide,
  one byte per glyph row, height = file size / 256
- PSF1 console fonts (magic ``36 04``)
- PSF2 console fonts (magic ``72 b5 4a 86``)

Only the first 256 glyphs are kept.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from ansi_raster.core.errors import FontError

logger = logging.getLogger(__name__)

GLYPH_COUNT = 256

PSF1_MAGIC = b"\x36\x04"
PSF1_MODE_512 = 0x01
PSF2_MAGIC = b"\x72\xb5\x4a\x86"


@dataclass(frozen=True)
class BitmapFont:
    """
    Glyph bitmaps for codes 0-255.

    Each glyph is ``height`` rows of ``bytes_per_row`` bytes; within a row
    the most significant bit of the first byte is the leftmost pixel.
    """
    width: int
    height: int
    glyphs: bytes

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise FontError(f"invalid glyph size {self.width}x{self.height}")
        expected = GLYPH_COUNT * self.glyph_size
        if len(self.glyphs) != expected:
            raise FontError(
                f"{self.width}x{self.height} font needs {expected} bytes "
                f"of glyph data, got {len(self.glyphs)}"
            )

    @property
    def bytes_per_row(self) -> int:
        return (self.width + 7) // 8

    @property
    def glyph_size(self) -> int:
        return self.bytes_per_row * self.height

    def glyph_row(self, code: int, y: int) -> int:
        """Return row y of a glyph as an integer bitmask."""
        start = code * self.glyph_size + y * self.bytes_per_row
        return int.from_bytes(self.glyphs[start:start + self.bytes_per_row], 'big')

    def is_set(self, code: int, x: int, y: int) -> bool:
        """True if pixel (x, y) of the glyph is drawn in the foreground color."""
        shift = self.bytes_per_row * 8 - 1 - x
        return (self.glyph_row(code, y) >> shift) & 1 == 1

    @classmethod
    def from_bytes(cls, data: bytes) -> "BitmapFont":
        """Decode font data, detecting the layout from its header."""
        if data[:4] == PSF2_MAGIC:
            return cls._from_psf2(data)
        if data[:2] == PSF1_MAGIC:
            return cls._from_psf1(data)
        if data and len(data) % GLYPH_COUNT == 0:
            height = len(data) // GLYPH_COUNT
            logger.debug("raw 8x%d font", height)
            return cls(width=8, height=height, glyphs=bytes(data))
        raise FontError(
            f"unrecognised font data ({len(data)} bytes): "
            "expected PSF1, PSF2 or a raw 256-glyph dump"
        )

    @classmethod
    def load(cls, path: str | Path) -> "BitmapFont":
        """Load a font file from disk."""
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise FontError(f"cannot read font {path}: {exc}") from exc
        return cls.from_bytes(data)

    @classmethod
    def _from_psf1(cls, data: bytes) -> "BitmapFont":
        if len(data) < 4:
            raise FontError("truncated PSF1 header")
        mode = data[2]
        height = data[3]
        count = 512 if mode & PSF1_MODE_512 else 256
        body = data[4:4 + count * height]
        if len(body) < count * height:
            raise FontError("truncated PSF1 font")
        logger.debug("PSF1 font 8x%d, %d glyphs", height, count)
        return cls(width=8, height=height, glyphs=body[:GLYPH_COUNT * height])

    @classmethod
    def _from_psf2(cls, data: bytes) -> "BitmapFont":
        if len(data) < 32:
            raise FontError("truncated PSF2 header")

        def field(index: int) -> int:
            return int.from_bytes(data[index * 4:index * 4 + 4], 'little')

        header_size = field(2)
        count = field(4)
        glyph_size = field(5)
        height = field(6)
        width = field(7)
        if count < GLYPH_COUNT:
            raise FontError(f"PSF2 font has only {count} glyphs")
        if glyph_size != height * ((width + 7) // 8):
            raise FontError(f"PSF2 glyph size {glyph_size} does not match {width}x{height}")
        body = data[header_size:header_size + GLYPH_COUNT * glyph_size]
        if len(body) < GLYPH_COUNT * glyph_size:
            raise FontError("truncated PSF2 font")
        logger.debug("PSF2 font %dx%d, %d glyphs", width, height, count)
        return cls(width=width, height=height, glyphs=body)
