"""Geometric and colour transforms over row-padded pixel data.

Every function here is pure: it reads a :class:`PixelBuffer` together with
the :class:`InfoHeader` describing it and returns a new buffer plus the
resulting dimensions. Callers decide when to commit the result.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

import numpy as np

from .errors import UnsupportedBitDepth
from .info_header import SUPPORTED_BITS, InfoHeader, PixelFormat
from .pixels import PixelBuffer

# ITU-R BT.601 luma weights
LUMA_RED = 0.299
LUMA_GREEN = 0.587
LUMA_BLUE = 0.114


@dataclass(frozen=True)
class Transformed:
    pixels: PixelBuffer
    width: int
    height: int

    def apply_to(self, info: InfoHeader) -> InfoHeader:
        """Info header carrying the new dimensions."""

        image_size = len(self.pixels) if info.image_size else 0
        return replace(info, width=self.width, height=self.height, image_size=image_size)


def _require(info: InfoHeader, operation: str, allowed: Iterable[int] = SUPPORTED_BITS) -> None:
    if info.bits_per_pixel not in tuple(allowed):
        raise UnsupportedBitDepth(info.bits_per_pixel, operation)


def _grid(pixels: PixelBuffer, info: InfoHeader) -> np.ndarray:
    return pixels.grid(info.width, info.rows, info.bytes_per_pixel)


def rotate_90_clockwise(pixels: PixelBuffer, info: InfoHeader) -> Transformed:
    """Rotate a quarter turn clockwise.

    Destination row ``r`` holds original column ``width - 1 - r`` read from the
    original rows in storage order. The destination stride is derived from the
    old height, so padding is rebuilt rather than carried over.
    """

    _require(info, "rotate")
    grid = _grid(pixels, info)
    if info.top_down:
        rotated = grid[::-1].transpose(1, 0, 2)
        height = -info.width
    else:
        rotated = grid[:, ::-1].transpose(1, 0, 2)
        height = info.width
    return Transformed(PixelBuffer.from_grid(rotated), info.rows, height)


def _quarter_turns(pixels: PixelBuffer, info: InfoHeader, turns: int) -> Transformed:
    result = Transformed(pixels, info.width, info.height)
    for _ in range(turns):
        result = rotate_90_clockwise(result.pixels, result.apply_to(info))
    return result


def rotate_180(pixels: PixelBuffer, info: InfoHeader) -> Transformed:
    return _quarter_turns(pixels, info, 2)


def rotate_270(pixels: PixelBuffer, info: InfoHeader) -> Transformed:
    return _quarter_turns(pixels, info, 3)


def flip_horizontal(pixels: PixelBuffer, info: InfoHeader) -> Transformed:
    """Mirror each row; padding in the output is always zero."""

    _require(info, "flip")
    grid = _grid(pixels, info)
    return Transformed(PixelBuffer.from_grid(grid[:, ::-1]), info.width, info.height)


def greyscale(pixels: PixelBuffer, info: InfoHeader) -> Transformed:
    """Replace every BGR triple with its rounded luma.

    Indexed images would need their palette remapped instead, so only 24-bit
    data is accepted. Padding and any bytes past the last row are kept as is.
    """

    _require(info, "greyscale", (PixelFormat.TRUE_COLOR_24.value,))
    width, rows = info.width, info.rows
    lines = pixels.scanlines(info.stride, rows)
    bgr = lines[:, : width * 3].reshape(rows, width, 3).astype(np.float64)
    blue, green, red = bgr[..., 0], bgr[..., 1], bgr[..., 2]
    luma = LUMA_RED * red + LUMA_GREEN * green + LUMA_BLUE * blue
    # round half away from zero, not numpy's half-to-even
    grey = np.clip(np.floor(luma + 0.5), 0, 255).astype(np.uint8)
    lines[:, : width * 3] = np.repeat(grey[..., np.newaxis], 3, axis=2).reshape(rows, width * 3)
    tail = pixels.data[lines.size :]
    return Transformed(PixelBuffer(lines.tobytes() + tail), info.width, info.height)
