"""Typer CLI application."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

try:
    import typer
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.table import Table
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False

from ansi_raster.config import Settings
from ansi_raster.core.errors import AnsiError

logger = logging.getLogger("ansi_raster.cli")

ANSI_SUFFIXES = (".ans", ".ANS")


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    def to_int(self) -> int:
        return getattr(logging, self.value)


def setup_logging(level: LogLevel, console: "Console") -> None:
    logging.basicConfig(
        level=level.to_int(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: uv pip install ansi-raster[cli]")

    app = typer.Typer(
        name="ansi-raster",
        help="Decode ANSI art into character grids and bitmap images.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    def fail(message: str) -> None:
        err_console.print(f"[red]{message}[/]")
        raise typer.Exit(1)

    @app.callback()
    def main_options(
        log_level: Annotated[LogLevel, typer.Option("--log-level", "-l", help="Logging verbosity")] = LogLevel.WARNING,
    ) -> None:
        setup_logging(log_level, err_console)

    @app.command()
    def render(
        source: Annotated[Path, typer.Argument(help="ANSI file, or directory of .ans files")],
        dest: Annotated[Path, typer.Argument(help="Image file, or output directory for a directory source")],
        font: Annotated[Optional[Path], typer.Option("--font", "-f", help="Bitmap font (raw VGA dump, PSF1 or PSF2)")] = None,
        width: Annotated[Optional[int], typer.Option("--width", "-w", help="Screen width (default: SAUCE width or 80)")] = None,
        scale: Annotated[Optional[int], typer.Option("--scale", "-s", help="Integer pixel scale")] = None,
    ) -> None:
        """Render ANSI art to PNG (or any format Pillow writes)."""
        import ansi_raster as ansi

        try:
            settings = Settings.from_env().replace(font_path=font, scale=scale)
        except AnsiError as exc:
            fail(str(exc))
        if settings.font_path is None:
            fail("A bitmap font is required: pass --font or set ANSI_RASTER_FONT")
        try:
            bitmap_font = ansi.BitmapFont.load(settings.font_path)
        except AnsiError as exc:
            fail(str(exc))

        def render_one(path: Path, out_path: Path) -> None:
            doc = ansi.load(path, settings=settings, width=width)
            doc.save_image(out_path, bitmap_font, scale=settings.scale)
            console.print(f"[green]Rendered {path.name}[/] → {out_path} ({doc.width}x{doc.height} cells)")

        if not source.is_dir():
            try:
                render_one(source, dest)
            except (AnsiError, OSError) as exc:
                fail(f"{source}: {exc}")
            return

        # Batch mode: a failed document is reported and skipped
        dest.mkdir(parents=True, exist_ok=True)
        files = sorted(p for p in source.iterdir() if p.suffix in ANSI_SUFFIXES)
        failures = 0
        for path in files:
            try:
                render_one(path, dest / f"{path.stem}.png")
            except (AnsiError, OSError) as exc:
                logger.error("skipping %s: %s", path.name, exc)
                failures += 1

        console.print(f"\n[bold]Rendered {len(files) - failures}/{len(files)} files[/]")
        if failures:
            raise typer.Exit(1)

    @app.command()
    def view(
        path: Annotated[Path, typer.Argument(help="ANSI file to display")],
        text: Annotated[bool, typer.Option("--text", "-t", help="Plain text without colors")] = False,
        width: Annotated[Optional[int], typer.Option("--width", "-w", help="Screen width")] = None,
    ) -> None:
        """Show ANSI artwork in the terminal."""
        import ansi_raster as ansi

        try:
            doc = ansi.load(path, settings=Settings.from_env(), width=width)
        except (AnsiError, OSError) as exc:
            fail(f"{path}: {exc}")

        print(doc.render_to_text() if text else doc.render_to_terminal())

    @app.command()
    def ops(
        path: Annotated[Path, typer.Argument(help="ANSI file to decode")],
        limit: Annotated[Optional[int], typer.Option("--limit", "-n", help="Show at most N operations")] = None,
    ) -> None:
        """List the terminal operations decoded from a file."""
        from ansi_raster.codec.cp437 import glyph_to_unicode
        from ansi_raster.core.operation import Character, SelectGraphicsRendition, describe_sgr
        from ansi_raster.io.reader import parse_bytes, read_file

        try:
            settings = Settings.from_env()
            operations, _ = parse_bytes(read_file(path, settings), settings)
        except (AnsiError, OSError) as exc:
            fail(f"{path}: {exc}")

        table = Table(title=f"{path.name}: {len(operations)} operations")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Operation")
        table.add_column("Detail")
        for index, operation in enumerate(operations[:limit]):
            detail = ""
            if isinstance(operation, Character):
                detail = repr(glyph_to_unicode(operation.code))
            elif isinstance(operation, SelectGraphicsRendition):
                detail = describe_sgr(operation.code)
            table.add_row(str(index), repr(operation), detail)
        console.print(table)

    @app.command()
    def info(
        path: Annotated[Path, typer.Argument(help="ANSI file to inspect")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show SAUCE metadata and rendered size of an ANSI file."""
        import json
        import ansi_raster as ansi

        try:
            doc = ansi.load(path, settings=Settings.from_env())
        except (AnsiError, OSError) as exc:
            fail(f"{path}: {exc}")

        sauce = doc.sauce
        if json_output:
            data = {
                "title": doc.title,
                "author": doc.author,
                "group": sauce.group if sauce else "",
                "date": sauce.date.isoformat() if sauce and sauce.date else None,
                "width": doc.width,
                "height": doc.height,
                "operations": len(doc.operations),
                "comments": sauce.comments if sauce else [],
            }
            print(json.dumps(data, indent=2))
            return

        console.print(f"[bold cyan]{path.name}[/]")
        console.print(f"  [bold]Size:[/]       {doc.width}x{doc.height}")
        console.print(f"  [bold]Operations:[/] {len(doc.operations)}")
        if not sauce:
            console.print("  [yellow]No SAUCE metadata[/]")
            return
        console.print(f"  [bold]Title:[/]      {sauce.title or '(none)'}")
        console.print(f"  [bold]Author:[/]     {sauce.author or '(none)'}")
        console.print(f"  [bold]Group:[/]      {sauce.group or '(none)'}")
        if sauce.date:
            console.print(f"  [bold]Date:[/]       {sauce.date.strftime('%Y-%m-%d')}")
        if sauce.comments:
            console.print("  [bold]Comments:[/]")
            for comment in sauce.comments:
                console.print(f"    {comment}")

    return app
