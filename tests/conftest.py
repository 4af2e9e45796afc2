from __future__ import annotations

import struct

import pytest


def build_bmp(
    width: int,
    height: int,
    bits: int,
    pixels: bytes,
    palette: list[tuple[int, int, int, int]] | None = None,
    *,
    compression: int = 0,
    signature: bytes = b"BM",
) -> bytes:
    """Assemble a BITMAPINFOHEADER bitmap by hand."""

    palette = palette or []
    table = bytes(c for colour in palette for c in colour)
    offset = 14 + 40 + len(table)
    file_header = struct.pack("<2sIII", signature, offset + len(pixels), 0, offset)
    info_header = struct.pack(
        "<IiiHHIIiiII",
        40,
        width,
        height,
        1,
        bits,
        compression,
        len(pixels),
        2835,
        2835,
        len(palette),
        0,
    )
    return file_header + info_header + table + pixels


@pytest.fixture
def true_colour_bytes() -> bytes:
    """3x2 24-bit image with distinct pixels and non-zero padding."""

    rows = []
    for y in range(2):
        row = bytearray()
        for x in range(3):
            row += bytes((10 * x + y, 100 + x, 200 + y))
        row += b"\xaa\xbb\xcc"
        rows.append(bytes(row))
    return build_bmp(3, 2, 24, b"".join(rows))


@pytest.fixture
def indexed_bytes() -> bytes:
    """5x3 8-bit image with a four-entry palette."""

    palette = [(0, 0, 0, 0), (255, 0, 0, 0), (0, 255, 0, 0), (0, 0, 255, 0)]
    rows = []
    for y in range(3):
        row = bytes((x + y) % 4 for x in range(5)) + b"\x00\x00\x00"
        rows.append(row)
    return build_bmp(5, 3, 8, b"".join(rows), palette)


@pytest.fixture
def make_bmp():
    return build_bmp
