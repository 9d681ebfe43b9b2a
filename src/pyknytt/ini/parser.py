# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/12 23:12:44
# @Author : Kariko Lin

"""Reading and writing `World.ini`.

Reading never fails. Malformed lines, duplicated sections and keys
are what real levels look like, and the game copes with all of them:
- `[A]` after `[a]` continues the same section;
- the last `Key=` in a section wins, but stays where the first one was;
- whatever isn't a header, a comment or a `Key=Value` is skipped.

Writing has no escaping (the format knows none),
thus a value like `[x]` won't read back the same. That's on the caller.
"""

import logging
from os import PathLike
from os.path import join

from ..abstract import FileHandler
from .codec import decode, encode
from .lines import LineKind, iter_lines
from .model import IniDocument

__all__ = [
    'parse', 'serialize', 'get_property', 'set_property',
    'WorldIniParser', 'load_ini'
]

_logger = logging.getLogger(__name__)

NEWLINE = '\r\n'


def parse(data: bytes | bytearray | memoryview | str) -> IniDocument:
    """Build a document from raw `World.ini` bytes (or decoded text)."""
    text = data if isinstance(data, str) else decode(data)
    ret = IniDocument()
    this_sect = ret.header
    for lineno, i in enumerate(iter_lines(text), 1):
        match i.kind:
            case LineKind.SECTION:
                this_sect = ret.append_section(i.key)
            case LineKind.PROPERTY:
                this_sect[i.key] = i.value
            case LineKind.IGNORABLE if _logger.isEnabledFor(logging.DEBUG):
                _logger.debug('Line %d skipped in %r.', lineno, this_sect)
    return ret


def to_text(doc: IniDocument) -> str:
    lines: list[str] = []
    for sect in doc.values():
        # the header goes without a declaration.
        if sect.key != '':
            lines.append(f'[{sect.key}]')
        lines.extend(f'{k}={v}' for k, v in sect.items())
    return ''.join(f'{i}{NEWLINE}' for i in lines)


def serialize(doc: IniDocument, errors: str = 'strict') -> bytes:
    """Dump as Windows-1252 bytes.

    May raise `UnrepresentableCharacter` unless `errors` says otherwise.
    """
    return encode(to_text(doc), errors)


def get_property(doc: IniDocument, section: str, key: str) -> str | None:
    return doc.get_property(section, key)


def set_property(
    doc: IniDocument, section: str, key: str, value: str
) -> None:
    doc.set_property(section, key, value)


class WorldIniParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str], errors: str = 'strict'
    ) -> None:
        super().__init__(filename)
        self._errors = errors

    def read(self) -> IniDocument:
        with open(self._fn, 'rb') as fp:
            raw = fp.read()
        ret = parse(raw)
        _logger.info('Read %d section(s) from %s.', len(ret), self._fn)
        return ret

    def write(self, instance: IniDocument) -> None:
        """Save to the file.

        Encoding comes first, so an unencodable document never leaves
        a half-written file behind.
        """
        raw = serialize(instance, self._errors)
        with open(self._fn, 'wb') as fp:
            fp.write(raw)
        _logger.info('Wrote %d section(s) to %s.', len(instance), self._fn)

    def __str__(self) -> str:
        return 'World.ini: ' + super().__str__()


def load_ini(world_dir: str | PathLike[str]) -> IniDocument:
    """Read the `World.ini` of the level in `world_dir`."""
    return WorldIniParser(join(world_dir, 'World.ini')).read()
