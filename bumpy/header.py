"""The 14-byte bitmap file header."""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass

from .errors import BadSignature
from .stream import ByteSink, ByteSource

logger = logging.getLogger(__name__)

SIGNATURE = b"BM"
FILE_HEADER_SIZE = 14
HEADERS_SIZE = 54  # file header + 40-byte info header

_FIELDS = struct.Struct("<III")  # file size, reserved, data offset


@dataclass
class FileHeader:
    signature: bytes = SIGNATURE
    file_size: int = 0
    reserved: int = 0
    data_offset: int = HEADERS_SIZE

    @classmethod
    def new(cls, palette_size: int, pixel_size: int) -> "FileHeader":
        """Header for a freshly synthesised document."""

        return cls(
            file_size=file_size(palette_size, pixel_size),
            data_offset=HEADERS_SIZE + palette_size,
        )

    @classmethod
    def decode(cls, source: ByteSource) -> "FileHeader":
        signature = source.read_exact(2, "file header")
        if signature != SIGNATURE:
            raise BadSignature(signature)
        size, reserved, offset = _FIELDS.unpack(
            source.read_exact(_FIELDS.size, "file header")
        )
        logger.debug("File header: size=%d data_offset=%d", size, offset)
        return cls(signature, size, reserved, offset)

    def encode(self, sink: ByteSink, palette_size: int, pixel_size: int) -> None:
        """Write the header with the size and offset recomputed from the given sections.

        Sections are written back to back, so the pixel data always starts
        directly after the palette in the output.
        """

        size = file_size(palette_size, pixel_size)
        sink.write(self.signature)
        sink.write(_FIELDS.pack(size, self.reserved, HEADERS_SIZE + palette_size))
        logger.debug("Wrote file header (%d bytes total)", size)

    def refresh(self, palette_size: int, pixel_size: int) -> None:
        """Bring the stored size and offset in line with the current sections."""

        self.file_size = file_size(palette_size, pixel_size)
        self.data_offset = HEADERS_SIZE + palette_size


def file_size(palette_size: int, pixel_size: int) -> int:
    return HEADERS_SIZE + palette_size + pixel_size
