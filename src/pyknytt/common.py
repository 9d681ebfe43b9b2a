# -*- encoding: utf-8 -*-
# @File   : common.py
# @Time   : 2024/10/14 02:10:55
# @Author : Kariko Lin

import re
from typing import Iterator

from .ini.model import IniDocument, IniSection

__all__ = ['ScreenCoord', 'parse_xy', 'screen_sections']

type ScreenCoord = tuple[int, int]

# sections are case-insensitive, so `[X1000Y1000]` is a screen as well.
_SCREEN_KEY = re.compile(r'x([+-]?[0-9]+)y([+-]?[0-9]+)', re.I)


def parse_xy(key: str) -> ScreenCoord | None:
    """`'x1000y999'` -> `(1000, 999)`, anything else -> `None`."""
    if (m := _SCREEN_KEY.fullmatch(key)) is None:
        return None
    return int(m[1]), int(m[2])


def screen_sections(
    doc: IniDocument
) -> Iterator[tuple[ScreenCoord, IniSection]]:
    for sect in doc.values():
        if (xy := parse_xy(sect.key)) is not None:
            yield xy, sect
