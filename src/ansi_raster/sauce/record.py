"""SAUCE metadata record."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum


class DataType(IntEnum):
    NONE = 0
    CHARACTER = 1
    BITMAP = 2
    VECTOR = 3
    AUDIO = 4
    BINARYTEXT = 5
    XBIN = 6
    ARCHIVE = 7
    EXECUTABLE = 8


class FileType(IntEnum):
    """File types defined for CHARACTER data; other data types use raw ints."""
    ASCII = 0
    ANSI = 1
    ANSIMATION = 2
    RIP = 3
    PCBOARD = 4
    AVATAR = 5
    HTML = 6
    SOURCE = 7
    TUNDRA = 8


@dataclass(slots=True)
class SauceRecord:
    """
    Metadata trailer of a BBS art file.

    SAUCE (Standard Architecture for Universal Comment Extensions) stores
    128 bytes after the DOS EOF marker, optionally preceded by a block of
    64-byte comment lines. For character data ``tinfo[0]`` and ``tinfo[1]``
    hold the intended width and height and ``font_name`` the font the art
    was drawn with. See https://www.acid.org/info/sauce/sauce.htm
    """
    title: str = ""
    author: str = ""
    group: str = ""
    date: datetime | None = None
    file_size: int = 0
    data_type: DataType = DataType.CHARACTER
    file_type: FileType | int = FileType.ANSI
    tinfo: tuple[int, int, int, int] = (0, 0, 0, 0)
    flags: int = 0
    font_name: str = ""
    comments: list[str] = field(default_factory=list)

    @property
    def width(self) -> int:
        return self.tinfo[0]

    @property
    def height(self) -> int:
        return self.tinfo[1]

    @property
    def screen_width(self) -> int | None:
        """Column count to render with, if the record declares one."""
        if self.data_type == DataType.CHARACTER and self.width > 0:
            return self.width
        return None

    def __str__(self) -> str:
        fields = [
            ("Title", self.title),
            ("Author", self.author),
            ("Group", self.group),
            ("Date", self.date.strftime('%Y-%m-%d') if self.date else ""),
            ("Width", self.width or ""),
            ("Height", self.height or ""),
        ]
        lines = [f"{name}: {value}" for name, value in fields if value]
        return "\n".join(lines) or "(No SAUCE metadata)"
