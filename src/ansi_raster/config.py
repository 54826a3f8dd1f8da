"""Runtime settings for loading and rendering documents.

Settings are plain values with defaults suited to classic 80-column art.
``Settings.from_env`` lets deployments override them without code changes:

    ANSI_RASTER_WIDTH            screen width in columns
    ANSI_RASTER_MAX_ROWS         ceiling on grid height ("none" to disable)
    ANSI_RASTER_MAX_OPERATIONS   ceiling on parsed operations ("none" to disable)
    ANSI_RASTER_MAX_INPUT_BYTES  ceiling on input size ("none" to disable)
    ANSI_RASTER_FONT             path to a bitmap font (raw dump, PSF1 or PSF2)
    ANSI_RASTER_SCALE            integer pixel scale for image output
"""

import dataclasses
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from ansi_raster.core.constants import DEFAULT_MAX_ROWS, DEFAULT_WIDTH
from ansi_raster.core.errors import ConfigError

ENV_PREFIX = "ANSI_RASTER_"
DEFAULT_MAX_INPUT_BYTES = 16 * 1024 * 1024


def _int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


def _optional_int(name: str, raw: str) -> int | None:
    if raw.strip().lower() in ("", "none", "off"):
        return None
    return _int(name, raw)


@dataclass(frozen=True)
class Settings:
    width: int = DEFAULT_WIDTH
    max_rows: int | None = DEFAULT_MAX_ROWS
    max_operations: int | None = None
    max_input_bytes: int | None = DEFAULT_MAX_INPUT_BYTES
    font_path: Path | None = None
    scale: int = 1

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ConfigError(f"width must be positive, got {self.width}")
        if self.scale < 1:
            raise ConfigError(f"scale must be positive, got {self.scale}")
        for name in ("max_rows", "max_operations", "max_input_bytes"):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise ConfigError(f"{name} must be positive or None, got {value}")

    def replace(self, **changes) -> "Settings":
        """Return a copy with some fields changed; None values are ignored."""
        return dataclasses.replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from ANSI_RASTER_* environment variables."""
        if environ is None:
            environ = os.environ

        values: dict[str, object] = {}
        if (raw := environ.get(f"{ENV_PREFIX}WIDTH")) is not None:
            values["width"] = _int("WIDTH", raw)
        if (raw := environ.get(f"{ENV_PREFIX}SCALE")) is not None:
            values["scale"] = _int("SCALE", raw)
        for name in ("MAX_ROWS", "MAX_OPERATIONS", "MAX_INPUT_BYTES"):
            if (raw := environ.get(f"{ENV_PREFIX}{name}")) is not None:
                values[name.lower()] = _optional_int(name, raw)
        if raw := environ.get(f"{ENV_PREFIX}FONT"):
            values["font_path"] = Path(raw).expanduser()
        return cls(**values)
