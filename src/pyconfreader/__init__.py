# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 20:01:52
# @Author : Kariko Lin

import logging

from .conf import (
    ConfError,
    Confreader,
    ConfReadError,
    ConfStatus,
    ConfSyntaxError,
    ConfTable,
    parse
)
from .sources import BytesSource, FileSource, guess_codec

__all__ = [
    'Confreader', 'ConfStatus', 'ConfTable', 'parse',
    'ConfError', 'ConfSyntaxError', 'ConfReadError',
    'BytesSource', 'FileSource', 'guess_codec'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
