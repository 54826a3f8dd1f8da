"""Load ANSI art files."""

import logging
from pathlib import Path

from ansi_raster.codec.ansi_parser import AnsiParser
from ansi_raster.codec.scanner import ByteScanner
from ansi_raster.codec.screen import ScreenRenderer
from ansi_raster.config import Settings
from ansi_raster.core.document import AnsiDocument
from ansi_raster.core.errors import InputTooLargeError
from ansi_raster.core.operation import Operation
from ansi_raster.sauce.reader import parse_sauce_bytes, strip_sauce
from ansi_raster.sauce.record import SauceRecord

logger = logging.getLogger(__name__)


def read_file(path: str | Path, settings: Settings | None = None) -> bytes:
    """Read a file, refusing it up front if it exceeds ``max_input_bytes``."""
    path = Path(path)
    settings = settings or Settings()
    
    limit = settings.max_input_bytes
    if limit is not None and path.stat().st_size > limit:
        raise InputTooLargeError(limit, limit)
    return path.read_bytes()


def load(
    path: str | Path,
    settings: Settings | None = None,
    width: int | None = None,
) -> AnsiDocument:
    """
    Load an ANSI art file from disk.
    
    The screen width is ``width`` if given, else the SAUCE width if the
    file declares one, else ``settings.width``.
    """
    path = Path(path)
    doc = load_bytes(read_file(path, settings), width=width, settings=settings)
    doc.source_path = path
    return doc


def parse_bytes(
    data: bytes,
    settings: Settings | None = None,
) -> tuple[list[Operation], SauceRecord | None]:
    """Split off the SAUCE trailer and parse the art into operations."""
    settings = settings or Settings()
    
    sauce = parse_sauce_bytes(data)
    scanner = ByteScanner(strip_sauce(data, sauce), limit=settings.max_input_bytes)
    operations = AnsiParser(scanner, max_operations=settings.max_operations).parse_all()
    return operations, sauce


def load_bytes(
    data: bytes,
    width: int | None = None,
    settings: Settings | None = None,
) -> AnsiDocument:
    """Load ANSI art from raw bytes (SAUCE trailer allowed)."""
    settings = settings or Settings()
    
    operations, sauce = parse_bytes(data, settings)
    if width is None:
        width = (sauce.screen_width if sauce else None) or settings.width
    logger.debug("rendering %d operations at width %d", len(operations), width)
    
    grid = ScreenRenderer(width=width, max_rows=settings.max_rows).render(operations)
    return AnsiDocument(grid=grid, operations=operations, sauce=sauce)
