"""Console script entry point for ``ansi-raster``."""

import sys

INSTALL_HINT = "uv pip install ansi-raster[cli]"


def main() -> None:
    try:
        from ansi_raster.cli.app import create_app
        app = create_app()
    except ImportError:
        sys.exit(_fallback_main(sys.argv[1:]))
    app()


def _fallback_main(args: list[str]) -> int:
    """Explain how to get the full CLI when typer/rich are missing."""
    if args and args[0] not in ("-h", "--help"):
        print(f"ansi-raster: the '{args[0]}' command needs the CLI extras", file=sys.stderr)
        print(f"  {INSTALL_HINT}", file=sys.stderr)
        return 1

    print("ansi-raster - decode ANSI art into character grids and bitmaps")
    print()
    print(f"The command line interface needs typer and rich: {INSTALL_HINT}")
    print("The library works without them:")
    print("  import ansi_raster as ansi")
    print("  print(ansi.load('art.ans').render_to_text())")
    return 0


if __name__ == "__main__":
    main()
