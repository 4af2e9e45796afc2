"""Exceptions raised while decoding, encoding or transforming bitmaps."""

from __future__ import annotations


class BmpError(Exception):
    """Base class for all bitmap errors."""


class BadSignature(BmpError):
    def __init__(self, signature: bytes) -> None:
        super().__init__(f"Not a BMP file: expected signature b'BM', got {signature!r}")
        self.signature = signature


class TruncatedHeader(BmpError):
    """The stream ended before a fixed-size section was fully read."""

    def __init__(self, section: str, expected: int, actual: int) -> None:
        super().__init__(
            f"Unexpected end of stream in {section}: needed {expected} bytes, got {actual}"
        )
        self.section = section
        self.expected = expected
        self.actual = actual


class UnsupportedBitDepth(BmpError):
    def __init__(self, bits: int, operation: str | None = None) -> None:
        if operation is None:
            message = f"Unsupported bits per pixel: {bits} (expected 8 or 24)"
        else:
            message = f"{operation} does not support {bits}-bit images"
        super().__init__(message)
        self.bits = bits
        self.operation = operation


class UnsupportedCompression(BmpError):
    def __init__(self, compression: int) -> None:
        super().__init__(f"Unsupported compression: {compression} (only uncompressed is supported)")
        self.compression = compression


class InvalidDimensions(BmpError):
    def __init__(self, width: int, height: int) -> None:
        super().__init__(f"Invalid image dimensions: {width}x{height}")
        self.width = width
        self.height = height


class ShortPixelBuffer(BmpError):
    """Fewer pixel bytes are present than ``stride * rows`` requires.

    Lenient decoding keeps the document and exposes an instance of this class
    on :attr:`BitmapDocument.short_pixel_buffer`; transforms raise it because
    they need every row.
    """

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Pixel buffer holds {actual} bytes but {expected} are required"
        )
        self.expected = expected
        self.actual = actual

    @property
    def missing(self) -> int:
        return self.expected - self.actual


class UnsupportedHeader(BmpError):
    """The info header is not the 40-byte BITMAPINFOHEADER."""

    def __init__(self, size: int) -> None:
        super().__init__(f"Unsupported info header size: {size} (only 40 is supported)")
        self.size = size
