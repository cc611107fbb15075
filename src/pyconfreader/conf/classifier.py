# -*- encoding: utf-8 -*-
# @File   : classifier.py
# @Time   : 2024/11/02 22:31:09
# @Author : Kariko Lin

from typing import Iterable

from .consts import COMMENT_MARKS, SECTION_OPEN, LineKind
from .model import Line


def classify(buf: bytes, line: Line) -> LineKind:
    """Tell what a scanned line is by its first (non-blank) byte."""
    start, end = line.span
    if start == end:
        return LineKind.BLANK
    head = buf[start]
    if head in COMMENT_MARKS:
        return LineKind.COMMENT
    if head == SECTION_OPEN:
        return LineKind.SECTION
    return LineKind.PARAM


def count_entries(buf: bytes, lines: Iterable[Line]) -> tuple[int, int]:
    """Count `(sections, params)` so storage can be sized up front.

    The section count includes the implicit section 0.
    """
    sections, params = 1, 0
    for i in lines:
        match classify(buf, i):
            case LineKind.SECTION:
                sections += 1
            case LineKind.PARAM:
                params += 1
    return sections, params
