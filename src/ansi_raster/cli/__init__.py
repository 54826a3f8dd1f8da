"""Command-line interface for ansi-raster."""
