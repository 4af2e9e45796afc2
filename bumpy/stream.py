"""Byte stream primitives used by the codecs.

The codecs only need four operations: read an exact number of bytes, seek to
an absolute offset, read to the end of the stream and write sequentially.
Anything that behaves like a binary file object can back them.
"""

from __future__ import annotations

import io
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Union

from .errors import TruncatedHeader

Source = Union[bytes, bytearray, memoryview, str, Path, BinaryIO]
Target = Union[str, Path, BinaryIO]


class ByteSource:
    """Sequential reader over a binary file object."""

    def __init__(self, fh: BinaryIO) -> None:
        self._fh = fh

    def read_exact(self, count: int, section: str) -> bytes:
        data = self._fh.read(count)
        if len(data) < count:
            raise TruncatedHeader(section, count, len(data))
        return data

    def seek(self, offset: int) -> None:
        self._fh.seek(offset, io.SEEK_SET)

    def read_to_end(self) -> bytes:
        return self._fh.read()


class ByteSink:
    """Sequential writer over a binary file object."""

    def __init__(self, fh: BinaryIO) -> None:
        self._fh = fh

    def write(self, data: bytes) -> None:
        self._fh.write(data)


@contextmanager
def open_source(source: Source) -> Iterator[ByteSource]:
    """Yield a :class:`ByteSource` for bytes, a path or an open file.

    Files opened here are closed on exit; file objects passed in by the caller
    are left open.
    """

    if isinstance(source, (bytes, bytearray, memoryview)):
        with io.BytesIO(bytes(source)) as fh:
            yield ByteSource(fh)
    elif isinstance(source, (str, Path)):
        with Path(source).open("rb") as fh:
            yield ByteSource(fh)
    else:
        yield ByteSource(source)


@contextmanager
def open_sink(target: Target) -> Iterator[ByteSink]:
    """Yield a :class:`ByteSink` for a path or a writable file object."""

    if isinstance(target, (str, Path)):
        with Path(target).open("wb") as fh:
            yield ByteSink(fh)
    else:
        yield ByteSink(target)
