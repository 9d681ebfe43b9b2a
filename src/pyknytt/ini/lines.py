# -*- encoding: utf-8 -*-
# @File   : lines.py
# @Time   : 2024/10/12 22:05:51
# @Author : Kariko Lin

"""Splitting and classifying `World.ini` lines.

There is no grammar to speak of. The game accepts about anything,
so do we:

    ```ini
    ; comment, also `# comment`
    [Section]       ; -> header, key "Section"
    [Section] junk  ; -> ignored, current section unchanged
    [Section        ; -> ignored, too
    Key = a = b     ; -> "Key": "a = b"
    stray text      ; -> ignored
    ```
"""

import re
from enum import Enum
from typing import Iterator, NamedTuple

__all__ = ['LineKind', 'IniLine', 'split_lines', 'classify', 'iter_lines']

# `str.splitlines()` also breaks at \x0b, \x0c, \x1c ... which the game doesn't.
_NEWLINE = re.compile(r'\r\n|\r|\n')
WHITESPACE = ' \t\x0b\x0c'


class LineKind(Enum):
    SECTION = 'section'
    PROPERTY = 'property'
    COMMENT = 'comment'
    IGNORABLE = 'ignorable'


class IniLine(NamedTuple):
    kind: LineKind
    # section key for SECTION; property key and value for PROPERTY.
    key: str = ''
    value: str = ''


_COMMENT = IniLine(LineKind.COMMENT)
_IGNORABLE = IniLine(LineKind.IGNORABLE)


def split_lines(text: str) -> list[str]:
    return _NEWLINE.split(text)


def classify(line: str) -> IniLine:
    trimmed = line.strip(WHITESPACE)
    if not trimmed:
        return _IGNORABLE
    match trimmed[0]:
        case ';' | '#':
            return _COMMENT
        case '[':
            # `[` alone isn't closed by itself.
            if len(trimmed) > 1 and trimmed[-1] == ']':
                return IniLine(LineKind.SECTION, trimmed[1:-1])
            return _IGNORABLE
    if '=' not in trimmed:
        return _IGNORABLE
    key, val = trimmed.split('=', 1)
    return IniLine(
        LineKind.PROPERTY, key.strip(WHITESPACE), val.strip(WHITESPACE))


def iter_lines(text: str) -> Iterator[IniLine]:
    for i in split_lines(text):
        yield classify(i)
