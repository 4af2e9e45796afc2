"""Codec and transform engine for uncompressed 8-bit and 24-bit BMP files."""

from .document import BitmapDocument
from .errors import (
    BadSignature,
    BmpError,
    InvalidDimensions,
    ShortPixelBuffer,
    TruncatedHeader,
    UnsupportedBitDepth,
    UnsupportedCompression,
    UnsupportedHeader,
)
from .header import FileHeader
from .info_header import InfoHeader, PixelFormat, stride
from .palette import Palette
from .parameters import BitmapOptions, load_options
from .pixels import PixelBuffer

__all__ = [
    "BitmapDocument",
    "BitmapOptions",
    "load_options",
    "FileHeader",
    "InfoHeader",
    "PixelFormat",
    "Palette",
    "PixelBuffer",
    "stride",
    "BmpError",
    "BadSignature",
    "TruncatedHeader",
    "UnsupportedBitDepth",
    "UnsupportedCompression",
    "UnsupportedHeader",
    "InvalidDimensions",
    "ShortPixelBuffer",
]
