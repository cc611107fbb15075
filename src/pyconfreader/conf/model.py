# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/02 21:52:37
# @Author : Kariko Lin

"""Parsed table of a conf file.

Nothing here copies the source: keys, values and section names are
`Span`s, i.e. half-open `[start, end)` offsets into `ConfTable.buffer`.
"""

from dataclasses import dataclass
from typing import Iterator, NamedTuple

from .consts import ConfStatus


class ConfError(Exception):
    """Base of everything raised while loading a conf source."""
    status = ConfStatus.SYNTAX_ERROR


class ConfSyntaxError(ConfError):
    status = ConfStatus.SYNTAX_ERROR

    def __init__(self, lineno: int, reason: str) -> None:
        super().__init__(f'line {lineno}: {reason}')
        self.lineno = lineno
        self.reason = reason


class ConfReadError(ConfError):
    """The source could not supply its bytes."""
    status = ConfStatus.READ_FAILED


class Span(NamedTuple):
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


class Line(NamedTuple):
    """A scanned line, leading blanks and line terminator excluded."""
    lineno: int  # 1-based
    span: Span


class ConfParam(NamedTuple):
    key: Span
    value: Span


@dataclass(frozen=True)
class ConfSection:
    # None only for the implicit section 0.
    name: Span | None
    first: int = 0
    size: int = 0

    @property
    def stop(self) -> int:
        return self.first + self.size


@dataclass(frozen=True)
class ConfTable:
    """Source buffer plus the section and parameter index into it.

    `params` is flat and in declaration order;
    each section owns `params[first:first + size]`.
    """
    buffer: bytes
    sections: tuple[ConfSection, ...]
    params: tuple[ConfParam, ...]

    @classmethod
    def empty(cls) -> 'ConfTable':
        return cls(b'', (ConfSection(None),), ())

    def text(self, span: Span) -> bytes:
        return self.buffer[span.start:span.end]

    def view(self, span: Span) -> memoryview:
        return memoryview(self.buffer)[span.start:span.end]

    def section_params(self, index: int) -> tuple[ConfParam, ...]:
        sect = self.sections[index]
        return self.params[sect.first:sect.stop]

    def section_names(self) -> Iterator[bytes | None]:
        for i in self.sections:
            yield None if i.name is None else self.text(i.name)
