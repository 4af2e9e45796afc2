from __future__ import annotations

import json
from pathlib import Path

import pytest

from bumpy.parameters import DEFAULT_FILL, BitmapOptions, load_options


def test_defaults_without_path():
    options = load_options(None)
    assert options.fill_colour == DEFAULT_FILL
    assert options.strict_pixel_length is False


def test_load_options_from_json(tmp_path: Path):
    path = tmp_path / "options.json"
    path.write_text(json.dumps({"strict_pixel_length": True, "fill_colour": [9, 8, 7]}))
    options = load_options(path)
    assert options.strict_pixel_length is True
    assert options.fill_colour == (9, 8, 7)


def test_unknown_keys_are_rejected(tmp_path: Path):
    path = tmp_path / "options.json"
    path.write_text(json.dumps({"fill": [1, 2, 3]}))
    with pytest.raises(ValueError):
        load_options(path)


@pytest.mark.parametrize("fill", [(1, 2), (0, 0, 256), (-1, 0, 0)])
def test_fill_colour_must_be_three_bytes(fill):
    with pytest.raises(ValueError):
        BitmapOptions(fill_colour=fill)
