"""Top-level bitmap document: decode, create, transform and encode."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Optional

from . import transforms
from .errors import ShortPixelBuffer
from .header import FileHeader
from .info_header import InfoHeader, PixelFormat
from .palette import Palette
from .parameters import DEFAULT_OPTIONS, BitmapOptions
from .pixels import PixelBuffer
from .stream import Source, Target, open_sink, open_source

logger = logging.getLogger(__name__)

Transform = Callable[[PixelBuffer, InfoHeader], transforms.Transformed]


@dataclass
class BitmapDocument:
    """An 8-bit indexed or 24-bit true-colour bitmap held in memory.

    Documents are plain values: :meth:`copy` duplicates every section, and
    transforms either replace the pixel data and dimensions together or leave
    the document untouched.
    """

    header: FileHeader
    info_header: InfoHeader
    palette: Palette
    pixel_data: PixelBuffer
    # excluded from equality; pixel_data already carries the shortfall
    short_pixel_buffer: Optional[ShortPixelBuffer] = field(default=None, compare=False)

    @classmethod
    def decode(cls, data: Source, options: Optional[BitmapOptions] = None) -> "BitmapDocument":
        """Build a document from bytes, a path or a binary file object.

        Raises a :class:`~bumpy.errors.BmpError` subclass on malformed input,
        or ``OSError`` from the underlying stream. A pixel region shorter than
        the dimensions require is recorded on ``short_pixel_buffer`` unless
        ``options.strict_pixel_length`` is set, in which case it is raised.
        """

        options = options or DEFAULT_OPTIONS
        with open_source(data) as source:
            header = FileHeader.decode(source)
            info_header = InfoHeader.decode(source)
            palette = Palette.decode(source, info_header)
            pixel_data = PixelBuffer.decode(source, header.data_offset)

        short = pixel_data.shortfall(info_header.pixel_size)
        if short is not None:
            if options.strict_pixel_length:
                raise short
            logger.warning("%s; keeping the partial pixel data", short)
        return cls(header, info_header, palette, pixel_data, short)

    @classmethod
    def create(cls, width: int, height: int, options: Optional[BitmapOptions] = None) -> "BitmapDocument":
        """Blank 24-bit document filled with ``options.fill_colour``."""

        options = options or DEFAULT_OPTIONS
        info_header = InfoHeader.new(
            width,
            height,
            x_pixels_per_meter=options.x_pixels_per_meter,
            y_pixels_per_meter=options.y_pixels_per_meter,
        )
        pixel_data = PixelBuffer.create(width, height, options.fill_colour)
        header = FileHeader.new(0, len(pixel_data))
        return cls(header, info_header, Palette(), pixel_data)

    def encode(self) -> bytes:
        buffer = io.BytesIO()
        self.save(buffer)
        return buffer.getvalue()

    def save(self, target: Target) -> None:
        """Write header, info header, palette and pixels to a path or file object."""

        with open_sink(target) as sink:
            self.header.encode(sink, self.palette.nbytes, len(self.pixel_data))
            self.info_header.encode(sink)
            self.palette.encode(sink)
            self.pixel_data.encode(sink)

    def copy(self) -> "BitmapDocument":
        return BitmapDocument(
            header=replace(self.header),
            info_header=replace(self.info_header),
            palette=self.palette.copy(),
            pixel_data=PixelBuffer(bytes(self.pixel_data.data)),
            short_pixel_buffer=self.short_pixel_buffer,
        )

    def __copy__(self) -> "BitmapDocument":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "BitmapDocument":
        return self.copy()

    # ---------- Transforms ----------

    def _apply(self, transform: Transform) -> "BitmapDocument":
        result = transform(self.pixel_data, self.info_header)
        info_header = result.apply_to(self.info_header)
        self.info_header = info_header
        self.pixel_data = result.pixels
        self.header.refresh(self.palette.nbytes, len(result.pixels))
        return self

    def rotate_90(self) -> "BitmapDocument":
        return self._apply(transforms.rotate_90_clockwise)

    def rotate_180(self) -> "BitmapDocument":
        return self._apply(transforms.rotate_180)

    def rotate_270(self) -> "BitmapDocument":
        return self._apply(transforms.rotate_270)

    def flip_horizontal(self) -> "BitmapDocument":
        return self._apply(transforms.flip_horizontal)

    def to_greyscale(self) -> "BitmapDocument":
        return self._apply(transforms.greyscale)

    # ---------- Read-only accessors ----------

    @property
    def width(self) -> int:
        return self.info_header.width

    @property
    def height(self) -> int:
        return self.info_header.height

    @property
    def bits_per_pixel(self) -> int:
        return self.info_header.bits_per_pixel

    @property
    def pixel_format(self) -> PixelFormat:
        return self.info_header.pixel_format

    @property
    def stride(self) -> int:
        return self.info_header.stride

    @property
    def pixel_bytes(self) -> bytes:
        return self.pixel_data.data
