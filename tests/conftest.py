"""Pytest configuration: synthetic fonts, SAUCE trailers and external art files."""

import os
from pathlib import Path
from typing import Callable, Optional

import pytest

from ansi_raster.render.font import BitmapFont


def get_test_art_dir() -> Optional[Path]:
    """
    Get external art directory from the environment.

    Set ANSI_RASTER_TEST_DIR to a directory of .ans files to enable the
    external tests.
    """
    if env_path := os.environ.get("ANSI_RASTER_TEST_DIR"):
        path = Path(env_path).expanduser()
        if path.exists():
            return path
    return None


@pytest.fixture(scope="session")
def test_art_dir() -> Path:
    """Fixture providing external art directory, skips if unavailable."""
    art_dir = get_test_art_dir()
    if art_dir is None:
        pytest.skip("External art directory not found. Set ANSI_RASTER_TEST_DIR")
    return art_dir


@pytest.fixture(scope="session")
def sample_ans_files(test_art_dir: Path) -> list[Path]:
    """Get list of .ans files for testing."""
    files = list(test_art_dir.glob("*.ans")) + list(test_art_dir.glob("*.ANS"))
    if not files:
        pytest.skip(f"No .ans files found in {test_art_dir}")
    # Limit to avoid very slow tests
    return sorted(files)[:50]


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Parametrize ``ans_file`` over the external art directory."""
    if "ans_file" in metafunc.fixturenames:
        art_dir = get_test_art_dir()
        files = sorted(art_dir.glob("*.ans"))[:50] if art_dir else []
        metafunc.parametrize("ans_file", files, ids=lambda p: p.name)


def code_font_bytes(height: int = 16) -> bytes:
    """Raw 8xN font where every row of glyph c is the byte c.

    Glyph 0 is blank, glyph 255 is solid and glyph 0x80 lights only the
    leftmost column, which makes pixel checks easy to reason about.
    """
    return bytes(code for code in range(256) for _ in range(height))


@pytest.fixture
def code_font() -> BitmapFont:
    return BitmapFont.from_bytes(code_font_bytes())


@pytest.fixture
def font_file(tmp_path: Path) -> Path:
    path = tmp_path / "test.f16"
    path.write_bytes(code_font_bytes())
    return path


def build_sauce(
    title: str = "",
    author: str = "",
    group: str = "",
    width: int = 0,
    height: int = 0,
    date: bytes = b"19960301",
    data_type: int = 1,
    file_type: int = 1,
    comments: tuple[str, ...] = (),
) -> bytes:
    """Build an EOF marker, optional comment block and SAUCE trailer."""
    block = bytearray(b"\x1a")
    if comments:
        block.extend(b"COMNT")
        for comment in comments:
            block.extend(comment.encode("cp437").ljust(64, b" "))
    trailer = bytearray(b"SAUCE00")
    trailer.extend(title.encode("cp437").ljust(35, b" "))
    trailer.extend(author.encode("cp437").ljust(20, b" "))
    trailer.extend(group.encode("cp437").ljust(20, b" "))
    trailer.extend(date)
    trailer.extend((0).to_bytes(4, "little"))
    trailer.append(data_type)
    trailer.append(file_type)
    trailer.extend(width.to_bytes(2, "little"))
    trailer.extend(height.to_bytes(2, "little"))
    trailer.extend(bytes(4))
    trailer.append(len(comments))
    trailer.append(0)
    trailer.extend(bytes(22))
    assert len(trailer) == 128
    return bytes(block + trailer)


@pytest.fixture
def sauce_builder() -> Callable[..., bytes]:
    return build_sauce


@pytest.fixture(scope="session")
def single_ans_file(sample_ans_files: list[Path]) -> Path:
    """First external .ans file, for quick tests."""
    return sample_ans_files[0]
