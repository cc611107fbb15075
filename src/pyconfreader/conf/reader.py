# -*- encoding: utf-8 -*-
# @File   : reader.py
# @Time   : 2024/11/03 01:02:26
# @Author : Kariko Lin

"""The conf object most callers want.

    ```python
    conf = Confreader('app.conf')
    if conf.errno != ConfStatus.OK:
        print(conf.errno.name, conf.errline)
    port = conf.get_int('port', 'db', 5432)
    ```

Accessors never raise: they hand back the value (or the given default)
and leave what happened in `self.errno`.
"""

import logging
from re import compile as regex
from threading import Lock
from typing import Callable

from ..sources import SourceLike, as_source, guess_codec
from .consts import (
    CODEC_CONFIDENCE,
    DEFAULT_CODEC,
    FALSE_WORDS,
    TRUE_WORDS,
    ConfStatus
)
from .model import ConfError, ConfSyntaxError, ConfTable, Span
from .parser import parse

_INT = regex(rb'-?[0-9]+')
# a digit or `-` first, then digits and dots only;
# the number is then read from the prefix like strtod.
_DOUBLE_SCAN = regex(rb'[-0-9][0-9.]*')
_DOUBLE = regex(rb'-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)')


def to_int(raw: bytes) -> int | None:
    if _INT.fullmatch(raw) is None:
        return None
    return int(raw.decode('ascii'))


def to_double(raw: bytes) -> float | None:
    if _DOUBLE_SCAN.fullmatch(raw) is None:
        return None
    # `1.2.3` reads as 1.2, `-` and `-.` as 0.0.
    if (number := _DOUBLE.match(raw)) is None:
        return 0.0
    return float(number.group().decode('ascii'))


def to_bool(raw: bytes) -> bool | None:
    word = raw.lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    return None


class Confreader:
    """A loaded (or empty) conf, plus the last operation status.

    Load once, read as much as you like, `clear()` before loading again.
    Reading from several threads is fine once loaded;
    `errno` is then just whatever the last call left there.
    """

    def __init__(
        self,
        source: SourceLike | None = None,
        encoding: str | None = None,
        *,
        confidence: float = CODEC_CONFIDENCE
    ) -> None:
        self._hint = encoding
        self._confidence = confidence
        self._codec = DEFAULT_CODEC
        self._table: ConfTable | None = None
        self._lock = Lock()
        self.errno = ConfStatus.OK
        # 1-based, 0 unless the last load hit a syntax error.
        self.errline = 0
        if source is not None:
            self.load(source)

    @property
    def loaded(self) -> bool:
        return self._table is not None

    @property
    def table(self) -> ConfTable:
        return ConfTable.empty() if self._table is None else self._table

    @property
    def encoding(self) -> str:
        """Codec used for keys and values of the current load."""
        return self._codec

    def load(self, source: SourceLike) -> bool:
        """Read and parse `source`. `True` if loaded.

        On failure nothing changes but `errno` (and `errline`).
        """
        self.errline = 0
        if not self._lock.acquire(blocking=False):
            logging.warning('another load is in progress, rejected.')
            self.errno = ConfStatus.BUSY
            return False
        try:
            if self._table is not None:
                logging.warning('conf already loaded, clear() it first.')
                self.errno = ConfStatus.BUSY
                return False

            handler = as_source(source, self._hint)
            try:
                table = parse(handler.read())
            except ConfSyntaxError as e:
                logging.warning(f'{handler}: {e}')
                self.errline = e.lineno
                self.errno = e.status
                return False
            except ConfError as e:
                logging.warning(str(e))
                self.errno = e.status
                return False
            except MemoryError:
                logging.warning(f'{handler}: out of memory while parsing.')
                self.errno = ConfStatus.NO_MEMORY
                return False

            self._codec = guess_codec(
                table.buffer, self._hint, self._confidence)
            self._table = table
            self._note_shadowed(handler)
            self.errno = ConfStatus.OK
            return True
        finally:
            self._lock.release()

    def clear(self) -> None:
        """Drop the loaded conf. Values read before stay as they were.

        Rejected with BUSY while a load is in progress.
        """
        if not self._lock.acquire(blocking=False):
            logging.warning('a load is in progress, clear() rejected.')
            self.errno = ConfStatus.BUSY
            return
        try:
            self._table = None
            self._codec = DEFAULT_CODEC
            self.errline = 0
            self.errno = ConfStatus.OK
        finally:
            self._lock.release()

    def _note_shadowed(self, handler: object) -> None:
        seen: set[bytes] = set()
        for name in self.table.section_names():
            if name is None:
                continue
            if name.lower() in seen:
                logging.debug(
                    f'{handler}: [{self._decode_raw(name)}] declared again, '
                    'lookups use the first one.')
            seen.add(name.lower())

    def _decode_raw(self, raw: bytes) -> str:
        return raw.decode(self._codec, errors='replace')

    def _encode(self, text: str) -> bytes | None:
        try:
            return text.encode(self._codec)
        except UnicodeEncodeError:
            return None

    def _locate(
        self, table: ConfTable | None, section: str | None
    ) -> int | None:
        """Index of the section to look into, `None` if there's none."""
        if table is None:
            return None
        if section is None:
            return 0
        name = self._encode(section)
        if name is None:
            return None
        name = name.lower()
        for i, sect in enumerate(table.sections):
            if sect.name is None:
                continue
            if table.text(sect.name).lower() == name:
                return i
        return None

    def _find(
        self, key: str, section: str | None
    ) -> tuple[ConfTable, Span] | None:
        """The value span of `key`, with the table it points into."""
        table = self._table
        idx = self._locate(table, section)
        target = self._encode(key)
        if table is None or idx is None or target is None:
            return None
        target = target.lower()
        for i in table.section_params(idx):
            if table.text(i.key).lower() == target:
                return table, i.value
        return None

    def find(self, key: str, section: str | None = None) -> str | None:
        """Value of the first `key` in `section` (or the implicit one)."""
        found = self._find(key, section)
        if found is None:
            self.errno = ConfStatus.NO_PARAM
            return None
        self.errno = ConfStatus.OK
        return self._decode_raw(found[0].text(found[1]))

    def find_bytes(
        self, key: str, section: str | None = None
    ) -> memoryview | None:
        """Like `find()`, but a view into the raw conf buffer."""
        found = self._find(key, section)
        if found is None:
            self.errno = ConfStatus.NO_PARAM
            return None
        self.errno = ConfStatus.OK
        return found[0].view(found[1])

    def has_section(self, name: str) -> bool:
        if self._locate(self._table, name) is None:
            self.errno = ConfStatus.NO_SECTION
            return False
        self.errno = ConfStatus.OK
        return True

    def has(self, key: str, section: str | None = None) -> bool:
        return self.find(key, section) is not None

    def _get[T](
        self, key: str, section: str | None, default: T,
        convert: Callable[[bytes], T | None]
    ) -> T:
        found = self._find(key, section)
        if found is None:
            self.errno = ConfStatus.NO_PARAM
            return default
        ret = convert(found[0].text(found[1]))
        if ret is None:
            self.errno = ConfStatus.INVALID_VALUE
            return default
        self.errno = ConfStatus.OK
        return ret

    def get_char(
        self, key: str, section: str | None = None, default: str = ''
    ) -> str:
        # values are never empty once loaded.
        return self._get(
            key, section, default, lambda x: self._decode_raw(x)[0])

    def get_string(
        self, key: str, section: str | None = None,
        default: str | None = None
    ) -> str | None:
        return self._get(key, section, default, self._decode_raw)

    def get_int(
        self, key: str, section: str | None = None, default: int = 0
    ) -> int:
        return self._get(key, section, default, to_int)

    def get_double(
        self, key: str, section: str | None = None, default: float = 0.0
    ) -> float:
        return self._get(key, section, default, to_double)

    def get_bool(
        self, key: str, section: str | None = None, default: bool = False
    ) -> bool:
        return self._get(key, section, default, to_bool)

    @property
    def sections(self) -> list[str | None]:
        """Section names in declaration order, `None` for the implicit one."""
        return [
            None if i is None else self._decode_raw(i)
            for i in self.table.section_names()
        ]

    def items(self, section: str | None = None) -> list[tuple[str, str]]:
        """Every `(key, value)` of a section, duplicates included."""
        table = self._table
        idx = self._locate(table, section)
        if table is None or idx is None:
            self.errno = (
                ConfStatus.NO_PARAM if table is None
                else ConfStatus.NO_SECTION)
            return []
        self.errno = ConfStatus.OK
        return [
            (
                self._decode_raw(table.text(i.key)),
                self._decode_raw(table.text(i.value))
            )
            for i in table.section_params(idx)
        ]

    def keys(self, section: str | None = None) -> list[str]:
        return [k for k, _ in self.items(section)]

    def __repr__(self) -> str:
        table = self.table
        return '<Confreader { .sects = %d, .params = %d, .errno = %s }>' % (
            len(table.sections) - 1, len(table.params), self.errno.name)
