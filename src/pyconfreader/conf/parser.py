# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/02 23:40:18
# @Author : Kariko Lin

import logging

from .classifier import count_entries
from .consts import UTF8_BOM
from .linker import link
from .model import ConfTable
from .scanner import scan_lines, terminate


def parse(raw: bytes | bytearray) -> ConfTable:
    """Parse conf bytes into a `ConfTable`.

    Raises `ConfSyntaxError` (with the 1-based line) on malformed input.
    An empty source is fine and gives just the empty implicit section.
    A leading UTF-8 BOM is not part of the first line.
    """
    raw = raw.removeprefix(UTF8_BOM)
    if not raw:
        return ConfTable.empty()
    buf = terminate(raw)
    lines = scan_lines(buf)
    nsects, nparams = count_entries(buf, lines)
    sections, params = link(buf, lines, nsects, nparams)
    logging.debug(
        f'parsed {len(lines)} lines: '
        f'{nsects - 1} sections, {nparams} params.')
    return ConfTable(buf, sections, params)
