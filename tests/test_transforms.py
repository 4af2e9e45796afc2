from __future__ import annotations

import numpy as np
import pytest

from bumpy import BitmapDocument, PixelBuffer, ShortPixelBuffer, UnsupportedBitDepth
from bumpy.report import to_rgb_array


def _gradient(width: int, height: int) -> BitmapDocument:
    """24-bit document with distinct pixels and zero padding."""

    doc = BitmapDocument.create(width, height)
    grid = (np.arange(width * height * 3) % 251).astype(np.uint8).reshape(height, width, 3)
    doc.pixel_data = PixelBuffer.from_grid(grid)
    return doc


def _grid(doc: BitmapDocument) -> np.ndarray:
    info = doc.info_header
    return doc.pixel_data.grid(info.width, info.rows, info.bytes_per_pixel)


def test_rotate_90_swaps_dimensions_and_rebuilds_stride(true_colour_bytes: bytes):
    doc = BitmapDocument.decode(true_colour_bytes)
    doc.rotate_90()
    assert (doc.width, doc.height) == (2, 3)
    assert doc.stride == 8
    assert len(doc.pixel_bytes) == 24
    # first destination row is the last source column, source rows in order
    assert doc.pixel_bytes[:8] == bytes([20, 102, 200, 21, 102, 201, 0, 0])
    assert doc.header.file_size == 54 + 24
    assert doc.info_header.image_size == 24


def test_rotate_90_is_clockwise_on_screen():
    doc = _gradient(4, 3)
    before = to_rgb_array(doc)
    doc.rotate_90()
    np.testing.assert_array_equal(to_rgb_array(doc), np.rot90(before, k=-1))


def test_rotate_90_top_down_is_clockwise_on_screen(make_bmp):
    grid = (np.arange(2 * 3 * 3) * 7 % 256).astype(np.uint8).reshape(2, 3, 3)
    doc = BitmapDocument.decode(make_bmp(3, -2, 24, PixelBuffer.from_grid(grid).data))
    before = to_rgb_array(doc)
    doc.rotate_90()
    assert (doc.width, doc.height) == (2, -3)
    np.testing.assert_array_equal(to_rgb_array(doc), np.rot90(before, k=-1))


def test_four_rotations_restore_the_original():
    doc = _gradient(5, 3)
    original = doc.copy()
    for _ in range(4):
        doc.rotate_90()
    assert doc == original


def test_rotate_180_matches_two_quarter_turns():
    doc = _gradient(5, 3)
    twice = doc.copy().rotate_90().rotate_90()
    doc.rotate_180()
    assert (doc.width, doc.height) == (5, 3)
    assert doc.pixel_bytes == twice.pixel_bytes


def test_rotate_180_moves_each_pixel_to_the_opposite_corner():
    doc = _gradient(5, 3)
    before = _grid(doc)
    after = _grid(doc.rotate_180())
    for y in range(3):
        for x in range(5):
            np.testing.assert_array_equal(after[3 - 1 - y, 5 - 1 - x], before[y, x])


def test_rotate_270_matches_three_quarter_turns():
    doc = _gradient(6, 2)
    thrice = doc.copy().rotate_90().rotate_90().rotate_90()
    doc.rotate_270()
    assert (doc.width, doc.height) == (2, 6)
    assert doc.pixel_bytes == thrice.pixel_bytes
    assert doc.rotate_90() == _gradient(6, 2)


def test_rotate_indexed_image(indexed_bytes: bytes):
    doc = BitmapDocument.decode(indexed_bytes)
    doc.rotate_90()
    assert (doc.width, doc.height) == (3, 5)
    assert doc.stride == 4
    # last source column (x=4) across rows 0..2: (4+y) % 4
    assert doc.pixel_bytes[:4] == bytes([0, 1, 2, 0])
    assert len(doc.palette) == 4


def test_flip_reverses_rows_and_zeroes_padding(true_colour_bytes: bytes):
    doc = BitmapDocument.decode(true_colour_bytes)
    doc.flip_horizontal()
    assert (doc.width, doc.height, doc.stride) == (3, 2, 12)
    assert doc.pixel_bytes[:12] == bytes([20, 102, 200, 10, 101, 200, 0, 100, 200, 0, 0, 0])


def test_flip_is_an_involution(true_colour_bytes: bytes):
    doc = BitmapDocument.decode(true_colour_bytes)
    once = doc.copy().flip_horizontal()
    twice = once.copy().flip_horizontal()
    expected = bytearray(true_colour_bytes[54:])
    expected[9:12] = expected[21:24] = b"\x00\x00\x00"
    assert twice.pixel_bytes == bytes(expected)
    assert once.pixel_bytes[9:12] == once.pixel_bytes[21:24] == b"\x00\x00\x00"


def test_greyscale_uses_luma_weights():
    doc = BitmapDocument.create(3, 2).to_greyscale()
    # stored as B=100, G=50, R=25: 0.299 * 25 + 0.587 * 50 + 0.114 * 100 = 48.225
    row = bytes([48] * 9 + [0, 0, 0])
    assert doc.pixel_bytes == row * 2


def test_greyscale_rounds_to_nearest(make_bmp):
    # 0.587 * 255 + 0.114 * 1 = 149.799; 0.299 * 5 = 1.495; 0.114 * 5 + 0.299 * 3 = 1.467
    pixels = bytes([1, 255, 0, 0, 0, 5, 5, 0, 3, 0, 0, 0])
    doc = BitmapDocument.decode(make_bmp(3, 1, 24, pixels)).to_greyscale()
    assert doc.pixel_bytes == bytes([150] * 3 + [1] * 3 + [1] * 3 + [0, 0, 0])


def test_greyscale_keeps_padding(true_colour_bytes: bytes):
    doc = BitmapDocument.decode(true_colour_bytes).to_greyscale()
    assert doc.pixel_bytes[9:12] == b"\xaa\xbb\xcc"
    assert doc.pixel_bytes[21:24] == b"\xaa\xbb\xcc"


def test_greyscale_is_idempotent():
    once = _gradient(7, 4).to_greyscale()
    twice = once.copy().to_greyscale()
    assert twice.pixel_bytes == once.pixel_bytes


def test_greyscale_rejects_indexed_images(indexed_bytes: bytes):
    doc = BitmapDocument.decode(indexed_bytes)
    before = doc.copy()
    with pytest.raises(UnsupportedBitDepth) as excinfo:
        doc.to_greyscale()
    assert excinfo.value.bits == 8
    assert doc == before


def test_transforms_refuse_short_buffers(true_colour_bytes: bytes):
    doc = BitmapDocument.decode(true_colour_bytes[:-4])
    before = doc.copy()
    with pytest.raises(ShortPixelBuffer):
        doc.rotate_90()
    with pytest.raises(ShortPixelBuffer):
        doc.flip_horizontal()
    assert doc == before


def test_transformed_document_round_trips():
    doc = _gradient(5, 3).rotate_90().flip_horizontal()
    assert BitmapDocument.decode(doc.encode()) == doc
