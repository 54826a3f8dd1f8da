"""Terminal operations produced by the parser and replayed by the screen.

The set of operations is closed: ``Operation`` is the union of every
variant below, and the screen renderer handles each one explicitly.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import TypeAlias, Union


class ClearKind(IntEnum):
    """Parameter of the ED (``CSI n J``) sequence."""
    TO_END_OF_SCREEN = 0
    TO_BEGINNING_OF_SCREEN = 1
    SCREEN = 2
    SCREEN_AND_SCROLLBACK = 3


class GraphicsRendition(IntEnum):
    """SGR parameters understood by the screen renderer."""
    RESET = 0
    BOLD = 1
    BLINK_SLOW = 5
    BLINK_FAST = 6
    FOREGROUND_0 = 30
    FOREGROUND_7 = 37
    DEFAULT_FOREGROUND = 39
    BACKGROUND_0 = 40
    BACKGROUND_7 = 47


@dataclass(frozen=True, slots=True)
class Character:
    """One literal code-page byte."""
    code: int


@dataclass(frozen=True, slots=True)
class CursorUp:
    n: int = 1


@dataclass(frozen=True, slots=True)
class CursorDown:
    n: int = 1


@dataclass(frozen=True, slots=True)
class CursorForward:
    n: int = 1


@dataclass(frozen=True, slots=True)
class CursorBackward:
    n: int = 1


@dataclass(frozen=True, slots=True)
class MoveCursorTo:
    """Absolute, 1-based cursor positioning."""
    row: int = 1
    col: int = 1


@dataclass(frozen=True, slots=True)
class Clear:
    # Raw int when the parameter is not a known ClearKind
    kind: ClearKind | int = ClearKind.TO_END_OF_SCREEN


@dataclass(frozen=True, slots=True)
class SaveCursorPosition:
    pass


@dataclass(frozen=True, slots=True)
class RestoreCursorPosition:
    pass


@dataclass(frozen=True, slots=True)
class SelectGraphicsRendition:
    """A single SGR parameter, 0-255."""
    code: int = GraphicsRendition.RESET


Operation: TypeAlias = Union[
    Character,
    CursorUp,
    CursorDown,
    CursorForward,
    CursorBackward,
    MoveCursorTo,
    Clear,
    SaveCursorPosition,
    RestoreCursorPosition,
    SelectGraphicsRendition,
]


def clear_kind(value: int) -> ClearKind | int:
    """Map an ED parameter to a ClearKind, keeping unknown values as-is."""
    try:
        return ClearKind(value)
    except ValueError:
        return value


SGR_DESCRIPTIONS: dict[int, str] = {
    0: "Reset / Normal",
    1: "Bold or increased intensity",
    2: "Faint (decreased intensity)",
    3: "Italic: on",
    4: "Underline: Single",
    5: "Blink: Slow",
    6: "Blink: Rapid",
    7: "Image: Negative",
    8: "Conceal",
    9: "Crossed-out",
    10: "Primary (default) font",
    **{n: f"Alternate font {n - 10}" for n in range(11, 20)},
    20: "Fraktur",
    21: "Bold: off or Underline: Double",
    22: "Normal color or intensity",
    23: "Not italic, not Fraktur",
    24: "Underline: None",
    25: "Blink: off",
    26: "Reserved",
    27: "Image: Positive",
    28: "Reveal",
    29: "Not crossed out",
    **{30 + n: f"Set text color {n}" for n in range(8)},
    38: "Reserved for extended set foreground color",
    39: "Default text color (foreground)",
    **{40 + n: f"Set background color {n}" for n in range(8)},
    48: "Reserved for extended set background color",
    49: "Default background color",
    51: "Framed",
    52: "Encircled",
    53: "Overlined",
    54: "Not framed or encircled",
    55: "Not overlined",
    **{90 + n: f"Set foreground text color, high intensity {n}" for n in range(8)},
    **{100 + n: f"Set background color, high intensity {n}" for n in range(8)},
}


def describe_sgr(code: int) -> str:
    """Human-readable name of an SGR parameter."""
    return SGR_DESCRIPTIONS.get(code, "Unknown")
