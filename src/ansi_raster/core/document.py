"""AnsiDocument - a decoded ANSI art file with its metadata."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from ansi_raster.core.grid import CharacterGrid
from ansi_raster.core.operation import Operation

if TYPE_CHECKING:
    from PIL import Image

    from ansi_raster.render.font import BitmapFont
    from ansi_raster.sauce.record import SauceRecord


@dataclass
class AnsiDocument:
    """
    Represents a decoded ANSI artwork.

    Combines the rendered grid, the operations it was rendered from,
    SAUCE metadata and source info into a single object.
    """
    grid: CharacterGrid = field(default_factory=CharacterGrid)
    operations: list[Operation] = field(default_factory=list)
    sauce: "SauceRecord | None" = None
    source_path: Path | None = None

    @classmethod
    def load(cls, path: str | Path) -> "AnsiDocument":
        """Load an ANSI file from disk."""
        from ansi_raster.io.reader import load
        return load(path)

    def render_to_text(self) -> str:
        """Render to plain text (no colors)."""
        from ansi_raster.render.text import TextRenderer
        return TextRenderer().render(self.grid)

    def render_to_terminal(self) -> str:
        """Render to a 16-color escape sequence string for terminals."""
        from ansi_raster.render.terminal import TerminalRenderer
        return TerminalRenderer().render(self.grid)

    def to_image(self, font: "BitmapFont", scale: int = 1) -> "Image.Image":
        """Rasterize the grid with the given bitmap font."""
        from ansi_raster.render.bitmap import Rasterizer
        return Rasterizer(font).rasterize(self.grid, scale=scale)

    def save_image(self, path: str | Path, font: "BitmapFont", scale: int = 1) -> None:
        """Rasterize and write an image file; format follows the extension."""
        from ansi_raster.io.writer import save_image
        save_image(self.grid, path, font, scale=scale)

    @property
    def title(self) -> str:
        """SAUCE title, falling back to the file name."""
        if self.sauce and self.sauce.title:
            return self.sauce.title
        if self.source_path:
            return self.source_path.stem
        return "Untitled"

    @property
    def author(self) -> str:
        """SAUCE author, or an empty string."""
        return self.sauce.author if self.sauce else ""

    @property
    def width(self) -> int:
        """Width of the rendered grid in columns."""
        return self.grid.width

    @property
    def height(self) -> int:
        """Height of the rendered grid in rows."""
        return self.grid.height
