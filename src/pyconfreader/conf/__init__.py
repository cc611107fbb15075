# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 21:38:02
# @Author : Kariko Lin

from .consts import ConfStatus, LineKind
from .model import (
    ConfError,
    ConfParam,
    ConfReadError,
    ConfSection,
    ConfSyntaxError,
    ConfTable,
    Span
)
from .parser import parse
from .reader import Confreader
