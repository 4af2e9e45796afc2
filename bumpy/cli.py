"""Command line interface for bumpy."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Tuple

from .document import BitmapDocument
from .errors import BmpError
from .parameters import load_options
from .report import describe


def _size(value: str) -> Tuple[int, int]:
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {value!r}")
    return width, height


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect and transform uncompressed BMP files")
    parser.add_argument("input", type=Path, nargs="?", help="Path to the input BMP file")
    parser.add_argument("output", type=Path, nargs="?", help="Where to write the result")
    parser.add_argument(
        "--new",
        type=_size,
        default=None,
        metavar="WxH",
        help="Start from a blank 24-bit image instead of reading INPUT",
    )
    parser.add_argument("--rotate", type=int, choices=(90, 180, 270), help="Clockwise rotation in degrees")
    parser.add_argument("--flip", action="store_true", help="Mirror the image horizontally")
    parser.add_argument("--greyscale", action="store_true", help="Convert a 24-bit image to grey")
    parser.add_argument("--describe", action="store_true", help="Print the header fields")
    parser.add_argument("--palette", action="store_true", help="Include the colour table with --describe")
    parser.add_argument(
        "--options",
        type=Path,
        default=None,
        help="Optional JSON file overriding the default decode/create options",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def run(args: argparse.Namespace) -> BitmapDocument:
    options = load_options(args.options)
    if args.new is not None:
        doc = BitmapDocument.create(*args.new, options=options)
    else:
        doc = BitmapDocument.decode(args.input, options=options)

    if args.rotate == 90:
        doc.rotate_90()
    elif args.rotate == 180:
        doc.rotate_180()
    elif args.rotate == 270:
        doc.rotate_270()
    if args.flip:
        doc.flip_horizontal()
    if args.greyscale:
        doc.to_greyscale()
    return doc


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.new is not None and args.output is not None:
        parser.error("--new takes only an output path, not an input file")
    if args.new is not None:
        # a single positional is the output when creating
        args.input, args.output = None, args.input
    if args.new is None and args.input is None:
        parser.error("an input file is required unless --new is given")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        doc = run(args)
    except BmpError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.describe:
        print(describe(doc, with_palette=args.palette))
    if args.output is not None:
        doc.save(args.output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
