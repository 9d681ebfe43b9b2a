# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 22:31:07
# @Author : Kariko Lin

"""
`World.ini` structure: ordered sections of ordered key-value pairs.

Keys (of sections and of pairs) are case-insensitive but case-preserving,
and the first casing seen is the one that sticks.
Values are kept as they are.
"""

import warnings
from collections.abc import Mapping, MutableMapping
from string import ascii_lowercase, ascii_uppercase
from typing import Iterator

__all__ = ['normalize', 'IniSection', 'IniDocument']

# the game folds ASCII only, `[ÄRGER]` and `[ärger]` are different sections.
_ASCII_LOWER = str.maketrans(ascii_uppercase, ascii_lowercase)


def normalize(key: str) -> str:
    """The form keys are compared (never displayed) by."""
    _check_str('Key', key)
    return key.translate(_ASCII_LOWER)


def _check_str(what: str, obj: object) -> None:
    if not isinstance(obj, str):
        raise TypeError(f'{what} must be str, not {type(obj).__name__}.')


class IniSection(MutableMapping[str, str]):
    """An INI section, or rather, every `[Section]` of the same name
    merged into one dict.

    Setting an existing key (in any casing) overwrites the value in place,
    so the pair keeps both its position and its original casing.
    """

    def __init__(
        self, section_name: str, /,
        pairs_to_import: Mapping[str, str] | None = None
    ) -> None:
        _check_str('Section key', section_name)
        self._key = section_name
        self.__data: dict[str, str] = {}
        # to maintain original keys for saving files
        self.__keyproxy: dict[str, str] = {}
        if pairs_to_import:
            self.update(pairs_to_import)

    @property
    def key(self) -> str:
        return self._key

    def _set_key(self, key: str) -> None:
        """for IniDocument.rename_section()."""
        _check_str('Section key', key)
        self._key = key

    def __getitem__(self, key: str) -> str:
        return self.__data[normalize(key)]

    def __setitem__(self, key: str, value: str) -> None:
        _check_str('Property key', key)
        _check_str('Property value', value)
        norm = normalize(key)
        self.__keyproxy.setdefault(norm, key)
        self.__data[norm] = value

    def __delitem__(self, key: str) -> None:
        norm = normalize(key)
        del self.__data[norm]
        del self.__keyproxy[norm]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize(key) in self.__data

    def __iter__(self) -> Iterator[str]:
        return iter(self.__keyproxy.values())

    def __len__(self) -> int:
        return len(self.__data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniSection):
            return NotImplemented
        return list(self.__data.items()) == list(other.__data.items())

    def __str__(self) -> str:
        return f'[{self._key}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._key, len(self.__data))

    def clear(self) -> None:
        self.__data.clear()
        self.__keyproxy.clear()

    def rename(self, old: str, new: str) -> None:
        """Rename a key, keeping its position and value.

        A different pair already stored under `new` gets dropped first.
        Nothing happens if `old` isn't there.
        """
        _check_str('Property key', new)
        src, dst = normalize(old), normalize(new)
        if src not in self.__data:
            return
        if src != dst and dst in self.__data:
            warnings.warn(
                f'{self} already has "{self.__keyproxy[dst]}", '
                f'which is replaced by "{old}" now.')
            del self[new]
        self.__data = {
            (dst if k == src else k): v for k, v in self.__data.items()}
        self.__keyproxy = {
            (dst if k == src else k): (new if k == src else v)
            for k, v in self.__keyproxy.items()}

    def to_dict(self) -> dict[str, str]:
        """Plain copy with the stored casing of keys."""
        return dict(zip(self.__keyproxy.values(), self.__data.values()))


class IniDocument(MutableMapping[str, IniSection]):
    """A whole `World.ini`.

        ```ini
        Key=Value      ; before any header: see `self.header`.
        [World]
        Name=Hello
        [world]
        Name=World     ; same section as above, `Name` is now "World".
        ```

    The header (top-level section) is keyed `""` and is always the first
    one. `[]` in a file leads back to it.
    """

    def __init__(self) -> None:
        self.__sections: dict[str, IniSection] = {'': IniSection('')}

    @property
    def header(self) -> IniSection:
        """Pairs placed before any section declaration."""
        return self.__sections['']

    def __getitem__(self, key: str) -> IniSection:
        return self.__sections[normalize(key)]

    def __setitem__(
        self,
        key: str,
        value: IniSection | Mapping[str, str]
    ) -> None:
        # shouldn't keep ptr to external dict in key setting operation.
        pairs = list(value.items())
        section = self.append_section(key)
        section.clear()
        section.update(pairs)

    def __delitem__(self, key: str) -> None:
        norm = normalize(key)
        if norm not in self.__sections:
            raise KeyError(key)
        self.remove_section(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize(key) in self.__sections

    def __iter__(self) -> Iterator[str]:
        return (i.key for i in self.__sections.values())

    def __len__(self) -> int:
        return len(self.__sections)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniDocument):
            return NotImplemented
        return (
            list(self.__sections.keys()) == list(other.__sections.keys())
            and all(
                i == j for i, j in zip(
                    self.__sections.values(), other.__sections.values())))

    def __repr__(self) -> str:
        return '<IniDocument { .sections = %d }>' % len(self.__sections)

    def clear(self) -> None:
        self.header.clear()
        self.__sections = {'': self.header}

    def pop(self, key: str, *default: object) -> object:
        """Like `dict.pop()`. Popping the header returns a copy of it
        and leaves the header itself empty."""
        norm = normalize(key)
        if norm == '':
            ret = IniSection('', self.header)
            self.header.clear()
            return ret
        if norm in self.__sections:
            return self.__sections.pop(norm)
        if default:
            return default[0]
        raise KeyError(key)

    def popitem(self) -> tuple[str, IniSection]:
        """Pop the last section. The header is never popped."""
        if len(self.__sections) == 1:
            raise KeyError('popitem(): only the header is left')
        _, ret = self.__sections.popitem()
        return ret.key, ret

    def has_section(self, key: str) -> bool:
        return key in self

    def get_section(self, key: str) -> IniSection | None:
        return self.__sections.get(normalize(key))

    def append_section(self, key: str) -> IniSection:
        """Get the section, or add an empty one at the end."""
        _check_str('Section key', key)
        norm = normalize(key)
        if norm not in self.__sections:
            self.__sections[norm] = IniSection(key)
        return self.__sections[norm]

    def remove_section(self, key: str) -> None:
        """Drop the section if any. The header is emptied instead."""
        norm = normalize(key)
        if norm == '':
            self.header.clear()
        else:
            self.__sections.pop(norm, None)

    def rename_section(self, old: str, new: str) -> None:
        """Rename a section, keeping its position and pairs.

        A different section already named `new` gets dropped first.
        The header can neither be renamed nor be the target.
        """
        _check_str('Section key', new)
        src, dst = normalize(old), normalize(new)
        if '' in (src, dst):
            raise KeyError('The top-level section cannot be renamed.')
        if src not in self.__sections:
            return
        if src != dst and dst in self.__sections:
            warnings.warn(
                f'{self.__sections[dst]} already exists '
                f'and is replaced by [{old}] now.')
            del self.__sections[dst]
        self.__sections[src]._set_key(new)
        self.__sections = {
            (dst if k == src else k): v for k, v in self.__sections.items()}

    def has_property(self, section: str, key: str) -> bool:
        sect = self.get_section(section)
        return sect is not None and key in sect

    def get_property(self, section: str, key: str) -> str | None:
        sect = self.get_section(section)
        return None if sect is None else sect.get(key)

    def set_property(self, section: str, key: str, value: str) -> None:
        """Same rule as reading a file: last one wins."""
        self.append_section(section)[key] = value

    def remove_property(self, section: str, key: str) -> None:
        if (sect := self.get_section(section)) is not None:
            sect.pop(key, None)

    def rename_property(self, section: str, old: str, new: str) -> None:
        if (sect := self.get_section(section)) is not None:
            sect.rename(old, new)
