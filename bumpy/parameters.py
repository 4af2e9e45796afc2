"""Settings for decoding and synthesising bitmaps."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Tuple

# Stored byte order; shows as a muted orange
DEFAULT_FILL = (100, 50, 25)


@dataclass(frozen=True)
class BitmapOptions:
    """Container for decode and create settings.

    ``strict_pixel_length`` turns a short pixel buffer into a decode error
    instead of a flag on the document.
    """

    strict_pixel_length: bool = False
    fill_colour: Tuple[int, int, int] = DEFAULT_FILL
    x_pixels_per_meter: int = 0
    y_pixels_per_meter: int = 0

    def __post_init__(self) -> None:
        fill = tuple(int(v) for v in self.fill_colour)
        if len(fill) != 3 or any(not 0 <= v <= 255 for v in fill):
            raise ValueError(f"fill_colour must be three byte values, got {self.fill_colour!r}")
        object.__setattr__(self, "fill_colour", fill)


DEFAULT_OPTIONS = BitmapOptions()


def load_options(path: Path | None) -> BitmapOptions:
    """Read option overrides from a JSON object; ``None`` gives the defaults."""

    if path is None:
        return DEFAULT_OPTIONS
    with Path(path).open("r", encoding="utf-8") as fp:
        data = json.load(fp)
    known = {f.name for f in fields(BitmapOptions)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown option(s): {', '.join(unknown)}")
    return BitmapOptions(**data)
