# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/11/02 21:40:12
# @Author : Kariko Lin

from codecs import BOM_UTF8
from enum import Enum


class ConfStatus(int, Enum):
    """Side-channel status kept in `Confreader.errno`."""
    OK = 0
    READ_FAILED = 1
    SYNTAX_ERROR = 2
    NO_SECTION = 3
    NO_PARAM = 4
    INVALID_VALUE = 5
    BUSY = 6  # already loaded, or a load is in progress
    NO_MEMORY = 7


class LineKind(int, Enum):
    BLANK = 0
    COMMENT = 1
    SECTION = 2
    PARAM = 3


LF = 0x0A
CR = 0x0D
SPACE = 0x20
TAB = 0x09
EQUALS = ord('=')
SECTION_OPEN = ord('[')
SECTION_CLOSE = ord(']')

BLANKS = frozenset((SPACE, TAB))
COMMENT_MARKS = frozenset((ord('#'), ord(';')))
# key ends on any of these.
KEY_DELIMITERS = frozenset((EQUALS, SPACE, TAB))

UTF8_BOM = BOM_UTF8

TRUE_WORDS = (b'yes', b'true', b'1')
FALSE_WORDS = (b'no', b'false', b'0')

# chardet results under this confidence are not trusted.
CODEC_CONFIDENCE = 0.8
DEFAULT_CODEC = 'utf-8'
# decodes anything.
FALLBACK_CODEC = 'latin-1'
# these prepend a BOM on every encode(), keys included.
BOM_FREE_CODECS = {'utf-8-sig': 'utf-8'}
