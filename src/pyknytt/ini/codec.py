# -*- encoding: utf-8 -*-
# @File   : codec.py
# @Time   : 2024/10/12 21:40:18
# @Author : Kariko Lin

"""Windows-1252, as Knytt Stories reads and writes its `World.ini`.

Python's own `cp1252` leaves five bytes undefined and fails on them.
The game doesn't care, so neither do we: those five map to the C1 control
of the same value (what browsers call "windows-1252"),
and decoding becomes a total function.
"""

import codecs

__all__ = ['DECODING_TABLE', 'UnrepresentableCharacter', 'decode', 'encode']


class UnrepresentableCharacter(ValueError):
    """A character has no byte in the Windows-1252 table.

    Only raised while encoding; decoding has no error states.
    """
    def __init__(self, text: str, position: int) -> None:
        self.text = text
        self.position = position
        self.char = text[position]
        super().__init__(
            f'U+{ord(self.char):04X} ({self.char!r}) at position {position} '
            'cannot be encoded as Windows-1252.')


# 00H - 7FH and A0H - FFH are the identical Latin-1 code points.
DECODING_TABLE = (
    ''.join(map(chr, range(0x00, 0x80)))
    # 80H - 87H
    + '€\x81‚ƒ„…†‡'
    # 88H - 8FH
    + 'ˆ‰Š‹Œ\x8dŽ\x8f'
    # 90H - 97H
    + '\x90‘’“”•–—'
    # 98H - 9FH
    + '˜™š›œ\x9džŸ'
    + ''.join(map(chr, range(0xa0, 0x100)))
)

ENCODING_TABLE = codecs.charmap_build(DECODING_TABLE)


def decode(data: bytes | bytearray | memoryview) -> str:
    return codecs.charmap_decode(bytes(data), 'strict', DECODING_TABLE)[0]


def encode(text: str, errors: str = 'strict') -> bytes:
    """Encode `text` back to Windows-1252.

    `errors` works like in `str.encode()`, e.g. `'replace'` writes `?`
    for whatever has no byte. The default `'strict'` raises
    `UnrepresentableCharacter` instead of `UnicodeEncodeError`.
    """
    try:
        return codecs.charmap_encode(text, errors, ENCODING_TABLE)[0]
    except UnicodeEncodeError as e:
        raise UnrepresentableCharacter(text, e.start) from e
