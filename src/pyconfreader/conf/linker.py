# -*- encoding: utf-8 -*-
# @File   : linker.py
# @Time   : 2024/11/02 23:05:51
# @Author : Kariko Lin

"""Second pass: turn classified lines into sections and parameters.

Storage is sized by `classifier.count_entries()` beforehand
and only filled by index here.

Parameter lines look like

    ```
    key = value  # comment
    key=value;not a comment
    ```

i.e. a comment mark only starts a comment
when there is a space or tab right before it.
"""

from typing import Sequence

from .classifier import classify
from .consts import (
    BLANKS,
    COMMENT_MARKS,
    KEY_DELIMITERS,
    SECTION_CLOSE,
    LineKind
)
from .model import ConfParam, ConfSection, ConfSyntaxError, Line, Span


def _link_header(buf: bytes, line: Line) -> Span:
    start, end = line.span
    close = buf.find(SECTION_CLOSE, start + 1, end)
    if close == -1:
        raise ConfSyntaxError(line.lineno, 'section header is not closed')

    i = close + 1
    while i < end and buf[i] in BLANKS:
        i += 1
    if i < end and buf[i] not in COMMENT_MARKS:
        raise ConfSyntaxError(
            line.lineno, 'unexpected characters after section header')
    return Span(start + 1, close)


def _link_param(buf: bytes, line: Line) -> ConfParam:
    start, end = line.span
    i = start
    while i < end and buf[i] not in KEY_DELIMITERS:
        i += 1
    if i == end:
        raise ConfSyntaxError(line.lineno, 'parameter has no delimiter')
    key = Span(start, i)

    # `key = value`, `key=value`, `key value`, even `key == value`.
    while i < end and buf[i] in KEY_DELIMITERS:
        i += 1
    if i == end or buf[i] in COMMENT_MARKS:
        raise ConfSyntaxError(line.lineno, 'parameter has no value')

    vstart = vend = i
    while vend < end:
        if buf[vend] in COMMENT_MARKS and buf[vend - 1] in BLANKS:
            break
        vend += 1
    while buf[vend - 1] in BLANKS:
        vend -= 1
    return ConfParam(key, Span(vstart, vend))


def link(
    buf: bytes, lines: Sequence[Line], nsects: int, nparams: int
) -> tuple[tuple[ConfSection, ...], tuple[ConfParam, ...]]:
    """Build the section and parameter tables.

    May raise `ConfSyntaxError` at the first malformed line;
    nothing built so far is returned in that case.
    """
    names: list[Span | None] = [None] * nsects
    firsts = [0] * nsects
    sizes = [0] * nsects
    params: list[ConfParam | None] = [None] * nparams

    sect, param = 0, 0
    for i in lines:
        match classify(buf, i):
            case LineKind.SECTION:
                sect += 1
                names[sect] = _link_header(buf, i)
                firsts[sect] = param
            case LineKind.PARAM:
                params[param] = _link_param(buf, i)
                sizes[sect] += 1
                param += 1

    return (
        tuple(ConfSection(*i) for i in zip(names, firsts, sizes)),
        tuple(params)  # type: ignore[arg-type]
    )
