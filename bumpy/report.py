"""Human-readable dumps and previews of a document.

Nothing here touches the codecs; it only reads the document's fields.
"""

from __future__ import annotations

from typing import List

import numpy as np

from .document import BitmapDocument
from .info_header import PixelFormat


def describe(doc: BitmapDocument, with_palette: bool = False, with_pixels: bool = False) -> str:
    header = doc.header
    info = doc.info_header
    lines: List[str] = [
        "BMP Header:",
        f"Signature: {header.signature.decode('latin-1')}",
        f"File size: {header.file_size}",
        f"Reserved: {header.reserved}",
        f"Data offset: {header.data_offset}",
        "",
        "BMP Info Header:",
        f"Size: {info.size}",
        f"Width: {info.width}",
        f"Height: {info.height}",
        f"Planes: {info.planes}",
        f"Bits per pixel: {info.bits_per_pixel}",
        f"Compression: {info.compression}",
        f"Image size: {info.image_size}",
        f"X pixels per meter: {info.x_pixels_per_meter}",
        f"Y pixels per meter: {info.y_pixels_per_meter}",
        f"Colours used: {info.colours_used}",
        f"Important colours: {info.important_colours}",
        f"Stride: {doc.stride}",
    ]
    if doc.short_pixel_buffer is not None:
        lines.append(f"Warning: {doc.short_pixel_buffer}")

    if with_palette:
        lines += ["", "BMP Colour Table:"]
        lines += [f"Colour {i}: {colour}" for i, colour in enumerate(doc.palette)]

    if with_pixels:
        lines += ["", "BMP Pixel Data:"]
        data = doc.pixel_bytes
        row_stride = doc.stride or len(data)
        for start in range(0, len(data), max(row_stride, 1)):
            lines.append(data[start : start + row_stride].hex(" "))
    return "\n".join(lines)


def to_rgb_array(doc: BitmapDocument) -> np.ndarray:
    """``(height, width, 3)`` RGB array with the top row first."""

    info = doc.info_header
    grid = doc.pixel_data.grid(info.width, info.rows, info.bytes_per_pixel)
    if info.pixel_format is PixelFormat.INDEXED_8:
        lut = np.zeros((256, 3), dtype=np.uint8)
        for i, (blue, green, red, _alpha) in enumerate(doc.palette.colours[:256]):
            lut[i] = (red, green, blue)
        rgb = lut[grid[..., 0]]
    else:
        rgb = grid[..., ::-1]
    if not info.top_down:
        rgb = rgb[::-1]
    return np.ascontiguousarray(rgb)


def to_image(doc: BitmapDocument) -> "Image.Image":
    """Render the document as a Pillow RGB image."""

    from PIL import Image

    return Image.fromarray(to_rgb_array(doc))
