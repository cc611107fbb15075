# -*- encoding: utf-8 -*-
# @File   : scanner.py
# @Time   : 2024/11/02 22:10:45
# @Author : Kariko Lin

from .consts import BLANKS, CR, LF
from .model import ConfSyntaxError, Line, Span


def terminate(raw: bytes) -> bytes:
    """Make sure the last line ends with a line feed, too.

    An empty source stays empty (and so has no lines at all).
    """
    if not raw or raw[-1] == LF:
        return bytes(raw)
    return bytes(raw) + b'\n'


def scan_lines(buf: bytes) -> list[Line]:
    """Split a `terminate()`d buffer into lines.

    Each span starts after the leading spaces/tabs
    and stops before the CR LF (or bare LF).
    As many lines as LF bytes are returned.
    """
    lines: list[Line] = []
    pos, size, lineno = 0, len(buf), 0
    while pos < size:
        lineno += 1
        start = pos
        while buf[start] in BLANKS:
            start += 1
        end = buf.index(LF, start)
        cr = buf.find(CR, start, end)
        if cr != -1:
            # CR is only allowed right before LF.
            if cr != end - 1:
                raise ConfSyntaxError(
                    lineno, 'carriage return not followed by line feed')
            end = cr
        lines.append(Line(lineno, Span(start, end)))
        pos = end + 1 if buf[end] == LF else end + 2
    return lines
