"""The 40-byte BITMAPINFOHEADER."""

from __future__ import annotations

import enum
import logging
import struct
from dataclasses import dataclass

from .errors import (
    InvalidDimensions,
    UnsupportedBitDepth,
    UnsupportedCompression,
    UnsupportedHeader,
)
from .header import FILE_HEADER_SIZE
from .stream import ByteSink, ByteSource

logger = logging.getLogger(__name__)

INFO_HEADER_SIZE = 40
COMPRESSION_NONE = 0

_FIELDS = struct.Struct("<IiiHHIIiiII")


class PixelFormat(enum.Enum):
    INDEXED_8 = 8
    TRUE_COLOR_24 = 24


SUPPORTED_BITS = tuple(fmt.value for fmt in PixelFormat)


def stride(width: int, bytes_per_pixel: int) -> int:
    """Bytes per scanline, rounded up to a multiple of four."""

    return (width * bytes_per_pixel + 3) // 4 * 4


@dataclass
class InfoHeader:
    size: int = INFO_HEADER_SIZE
    width: int = 0
    height: int = 0
    planes: int = 1
    bits_per_pixel: int = 24
    compression: int = COMPRESSION_NONE
    image_size: int = 0
    x_pixels_per_meter: int = 0
    y_pixels_per_meter: int = 0
    colours_used: int = 0
    important_colours: int = 0

    @classmethod
    def new(
        cls,
        width: int,
        height: int,
        bits_per_pixel: int = 24,
        *,
        x_pixels_per_meter: int = 0,
        y_pixels_per_meter: int = 0,
    ) -> "InfoHeader":
        if width < 0 or height < 0:
            raise InvalidDimensions(width, height)
        if bits_per_pixel not in SUPPORTED_BITS:
            raise UnsupportedBitDepth(bits_per_pixel)
        return cls(
            width=width,
            height=height,
            bits_per_pixel=bits_per_pixel,
            x_pixels_per_meter=x_pixels_per_meter,
            y_pixels_per_meter=y_pixels_per_meter,
        )

    @classmethod
    def decode(cls, source: ByteSource) -> "InfoHeader":
        source.seek(FILE_HEADER_SIZE)
        header = cls(*_FIELDS.unpack(source.read_exact(_FIELDS.size, "info header")))
        if header.size != INFO_HEADER_SIZE:
            raise UnsupportedHeader(header.size)
        if header.bits_per_pixel not in SUPPORTED_BITS:
            raise UnsupportedBitDepth(header.bits_per_pixel)
        if header.compression != COMPRESSION_NONE:
            raise UnsupportedCompression(header.compression)
        if header.width < 0:
            raise InvalidDimensions(header.width, header.height)
        logger.debug(
            "Info header: %dx%d, %d bpp, %d colours",
            header.width,
            header.height,
            header.bits_per_pixel,
            header.colours_used,
        )
        return header

    def encode(self, sink: ByteSink) -> None:
        sink.write(
            _FIELDS.pack(
                self.size,
                self.width,
                self.height,
                self.planes,
                self.bits_per_pixel,
                self.compression,
                self.image_size,
                self.x_pixels_per_meter,
                self.y_pixels_per_meter,
                self.colours_used,
                self.important_colours,
            )
        )
        logger.debug("Wrote info header")

    @property
    def pixel_format(self) -> PixelFormat:
        return PixelFormat(self.bits_per_pixel)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def rows(self) -> int:
        """Number of scanlines; a negative height marks top-down storage."""

        return abs(self.height)

    @property
    def top_down(self) -> bool:
        return self.height < 0

    @property
    def stride(self) -> int:
        return stride(self.width, self.bytes_per_pixel)

    @property
    def pixel_size(self) -> int:
        """Bytes the pixel region needs for the current dimensions."""

        return self.stride * self.rows
