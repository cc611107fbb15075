# -*- encoding: utf-8 -*-
# @File   : sources.py
# @Time   : 2024/11/03 00:12:40
# @Author : Kariko Lin

"""Where the conf bytes come from.

The parser only wants `bytes`; decoding happens lazily per value,
with a codec decided once per load by `guess_codec()`.
"""

import logging
from codecs import lookup
from os import PathLike, fspath

import chardet

from .abstract import SourceHandler
from .conf.consts import (
    BOM_FREE_CODECS,
    CODEC_CONFIDENCE,
    DEFAULT_CODEC,
    FALLBACK_CODEC
)
from .conf.model import ConfReadError


class FileSource(SourceHandler[bytes]):
    def __init__(self, filename: str | PathLike[str]) -> None:
        self._fn = fspath(filename)

    def read(self) -> bytes:
        try:
            with open(self._fn, 'rb') as fp:
                return fp.read()
        except OSError as e:
            raise ConfReadError(f'unable to read "{self._fn}": {e}') from e

    def __str__(self) -> str:
        return self._fn


class BytesSource(SourceHandler[bytes]):
    """In-memory conf. `str` content gets encoded with `encoding`."""

    def __init__(
        self, data: bytes | bytearray | memoryview | str,
        encoding: str = DEFAULT_CODEC
    ) -> None:
        if isinstance(data, str):
            data = data.encode(encoding)
        self._data = bytes(data)

    def read(self) -> bytes:
        return self._data

    def __str__(self) -> str:
        return f'<{len(self._data)} bytes in memory>'


type SourceLike = (
    SourceHandler[bytes] | bytes | bytearray | memoryview
    | str | PathLike[str]
)


def as_source(
    source: SourceLike, encoding: str | None = None
) -> SourceHandler[bytes]:
    """Wrap `source` into a handler.

    Raw bytes are taken as the conf content itself,
    `str` and path-likes as a file name.
    """
    if isinstance(source, SourceHandler):
        return source
    if isinstance(source, (bytes, bytearray, memoryview)):
        return BytesSource(source, encoding or DEFAULT_CODEC)
    return FileSource(source)


def guess_codec(
    raw: bytes,
    encoding: str | None = None,
    confidence: float = CODEC_CONFIDENCE
) -> str:
    """Pick the codec used to decode keys, values and section names.

    `encoding` wins if given, else ask `chardet`.
    BOM-writing codecs are swapped for their BOM-less twin,
    so encoded lookup keys compare equal to the buffer.
    If the buffer doesn't decode with it, fall back to latin-1.
    """
    codec = encoding
    if codec is None:
        guess = chardet.detect(raw)
        if (
            guess is None or guess['encoding'] is None
            or guess['confidence'] < confidence
        ):
            codec = DEFAULT_CODEC
        else:
            codec = guess['encoding']

    try:
        codec = BOM_FREE_CODECS.get(lookup(codec).name, codec)
        raw.decode(codec)
    except (UnicodeDecodeError, LookupError) as e:
        logging.warning(
            f'conf does not decode as {codec} ({e}), '
            f'falling back to {FALLBACK_CODEC}.')
        codec = FALLBACK_CODEC
    return codec
