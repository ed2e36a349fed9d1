"""Shared test fixtures."""

from __future__ import annotations

import struct
import zlib
from pathlib import Path

import pytest
from PIL import Image


# Sample vector drawables

# android: prefix used without an xmlns:android declaration
RED_LINE_XML = (
    '<vector android:width="24dp" android:height="24dp">'
    '<path android:pathData="M0 0L24 24" android:fillColor="#FF0000"/>'
    "</vector>"
)

RED_SQUARE_XML = '''<?xml version="1.0" encoding="utf-8"?>
<!-- Filled square, 4px inset -->
<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:width="24dp"
    android:height="24dp"
    android:viewportWidth="24"
    android:viewportHeight="24">
    <path
        android:fillColor="#FF0000"
        android:pathData="M4,4
            H20 V20
            H4 Z"/>
</vector>
'''

UNFILLED_SQUARE_XML = '''<?xml version="1.0" encoding="utf-8"?>
<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:width="24dp"
    android:height="24dp">
    <path android:pathData="M4 4H20V20H4Z"/>
</vector>
'''

WIDE_XML = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:width="48dp"
    android:height="32dp">
    <path android:fillColor="#0000FF" android:pathData="M0 0H48V32H0Z"/>
</vector>
'''

TWO_PATHS_XML = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:width="24dp" android:height="24dp">
    <path android:fillColor="#00FF00" android:pathData="M0 0H12V12H0Z"/>
    <path android:fillColor="#0000FF" android:pathData="M12 12H24V24H12Z"/>
</vector>
'''

NO_PATH_XML = '''<?xml version="1.0" encoding="utf-8"?>
<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:width="24dp" android:height="24dp">
    <group android:name="empty"/>
</vector>
'''

GARBAGE_TEXT = "this is \x01 not <<xml at all"


def filled_canvas_xml(size: int, color: str) -> str:
    """Drawable whose single path covers the whole size x size canvas."""
    return (
        '<vector xmlns:android="http://schemas.android.com/apk/res/android" '
        f'android:width="{size}dp" android:height="{size}dp">'
        f'<path android:fillColor="{color}" android:pathData="M0 0H{size}V{size}H0Z"/>'
        "</vector>"
    )


def write_png(path: Path, size: tuple[int, int], color: tuple[int, int, int, int]) -> Path:
    Image.new("RGBA", size, color).save(path, format="PNG")
    return path


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", zlib.crc32(kind + data))


def write_png_header(path: Path, width: int, height: int) -> Path:
    """Tiny PNG whose IHDR claims width x height; the pixel data is empty."""
    ihdr = struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0)
    path.write_bytes(
        b"\x89PNG\r\n\x1a\n"
        + _png_chunk(b"IHDR", ihdr)
        + _png_chunk(b"IDAT", zlib.compress(b""))
        + _png_chunk(b"IEND", b"")
    )
    return path


@pytest.fixture
def red_square_file(tmp_path: Path) -> Path:
    path = tmp_path / "ic_square.xml"
    path.write_text(RED_SQUARE_XML, encoding="utf-8")
    return path


@pytest.fixture
def red_line_file(tmp_path: Path) -> Path:
    path = tmp_path / "ic_line.xml"
    path.write_text(RED_LINE_XML, encoding="utf-8")
    return path


@pytest.fixture
def wide_file(tmp_path: Path) -> Path:
    path = tmp_path / "ic_wide.xml"
    path.write_text(WIDE_XML, encoding="utf-8")
    return path


@pytest.fixture
def no_path_file(tmp_path: Path) -> Path:
    path = tmp_path / "ic_empty.xml"
    path.write_text(NO_PATH_XML, encoding="utf-8")
    return path


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    return write_png(tmp_path / "ic_launcher.png", (10, 6), (0, 128, 255, 255))
