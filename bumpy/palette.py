"""Colour table for 8-bit indexed bitmaps."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from .header import HEADERS_SIZE
from .info_header import InfoHeader, PixelFormat
from .stream import ByteSink, ByteSource

logger = logging.getLogger(__name__)

# (blue, green, red, alpha), the order the entries are stored on disk
Colour = Tuple[int, int, int, int]


@dataclass
class Palette:
    colours: List[Colour] = field(default_factory=list)

    @classmethod
    def decode(cls, source: ByteSource, info_header: InfoHeader) -> "Palette":
        """Read ``colours_used`` quads starting right after the two headers.

        24-bit images carry no palette and yield an empty one. An 8-bit file
        with ``colours_used == 0`` (implicitly 256 entries) also yields an
        empty palette, so the table is not written back on encode.
        """

        if info_header.pixel_format is not PixelFormat.INDEXED_8:
            return cls()

        count = info_header.colours_used
        source.seek(HEADERS_SIZE)
        raw = source.read_exact(count * 4, "colour table")
        colours = [tuple(raw[i : i + 4]) for i in range(0, len(raw), 4)]
        logger.debug("Read %d palette entries", len(colours))
        return cls(colours)

    def encode(self, sink: ByteSink) -> None:
        if not self.colours:
            return
        sink.write(bytes(channel for colour in self.colours for channel in colour))
        logger.debug("Wrote %d palette entries", len(self.colours))

    @property
    def nbytes(self) -> int:
        return len(self.colours) * 4

    def copy(self) -> "Palette":
        return Palette(list(self.colours))

    def __len__(self) -> int:
        return len(self.colours)

    def __iter__(self) -> Iterator[Colour]:
        return iter(self.colours)

    def __getitem__(self, index: int) -> Colour:
        return self.colours[index]
