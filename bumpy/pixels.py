"""Raw, row-padded pixel storage."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .errors import ShortPixelBuffer
from .info_header import stride
from .stream import ByteSink, ByteSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PixelBuffer:
    """Scanlines exactly as stored in the file, padding included.

    The bytes are immutable, so documents never share writable pixel memory.
    """

    data: bytes = b""

    @classmethod
    def decode(cls, source: ByteSource, data_offset: int) -> "PixelBuffer":
        source.seek(data_offset)
        data = source.read_to_end()
        logger.debug("Read %d bytes of pixel data from offset %d", len(data), data_offset)
        return cls(data)

    @classmethod
    def create(cls, width: int, height: int, fill: Sequence[int]) -> "PixelBuffer":
        """Solid 24-bit rows of ``fill`` (three bytes in storage order)."""

        padding = stride(width, 3) - width * 3
        row = bytes(fill) * width + b"\x00" * padding
        return cls(row * height)

    @classmethod
    def from_grid(cls, grid: np.ndarray) -> "PixelBuffer":
        """Pack a ``(rows, width, bytes_per_pixel)`` array, zero-padding every row."""

        rows, width, bpp = grid.shape
        lines = np.zeros((rows, stride(width, bpp)), dtype=np.uint8)
        lines[:, : width * bpp] = grid.reshape(rows, width * bpp)
        return cls(lines.tobytes())

    def encode(self, sink: ByteSink) -> None:
        sink.write(self.data)
        logger.debug("Wrote %d bytes of pixel data", len(self.data))

    def shortfall(self, expected: int) -> Optional[ShortPixelBuffer]:
        """Describe how far the buffer falls short of ``expected`` bytes, if at all."""

        if len(self.data) >= expected:
            return None
        return ShortPixelBuffer(expected, len(self.data))

    def scanlines(self, row_stride: int, rows: int) -> np.ndarray:
        """Writable ``(rows, row_stride)`` copy of the rows; trailing bytes are ignored."""

        expected = row_stride * rows
        short = self.shortfall(expected)
        if short is not None:
            raise short
        if expected == 0:
            return np.zeros((rows, row_stride), dtype=np.uint8)
        return np.frombuffer(self.data, dtype=np.uint8, count=expected).reshape(rows, row_stride).copy()

    def grid(self, width: int, rows: int, bytes_per_pixel: int) -> np.ndarray:
        """Pixels as a ``(rows, width, bytes_per_pixel)`` array without padding."""

        lines = self.scanlines(stride(width, bytes_per_pixel), rows)
        return lines[:, : width * bytes_per_pixel].reshape(rows, width, bytes_per_pixel)

    def __len__(self) -> int:
        return len(self.data)
