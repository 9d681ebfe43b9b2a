# -*- encoding: utf-8 -*-
# @File   : formats.py
# @Time   : 2024/10/14 00:48:36
# @Author : Kariko Lin

"""`World.ini` as JSON or YAML, mostly for diffing and hand-editing.

Both share one shape:

    ```yaml
    protocol: 1
    sections:
      '':          # pairs before any section
        Key: Value
      World:
        Name: Hello
    ```
"""

import json
import logging
from os import PathLike
from typing import Any, TypedDict

import yaml

from ..abstract import FileHandler
from .model import IniDocument

__all__ = ['IniJsonParser', 'IniYamlParser']

_logger = logging.getLogger(__name__)


class _IniTree(TypedDict, total=False):
    protocol: int
    sections: dict[str, dict[str, str]]


# should keep this base class for better type hinting.
class IniTreeParser(FileHandler[IniDocument]):
    PROTOCOL = 1

    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @classmethod
    def to_tree(cls, doc: IniDocument) -> _IniTree:
        return _IniTree(
            protocol=cls.PROTOCOL,
            sections={sect.key: sect.to_dict() for sect in doc.values()})

    @staticmethod
    def __to_str(val: Any) -> str:
        # hand-edited YAML may turn `True`, `1`, or blanks into non-str.
        return '' if val is None else str(val)

    @classmethod
    def from_tree(cls, tree: _IniTree) -> IniDocument:
        if (proto := tree.get('protocol', cls.PROTOCOL)) != cls.PROTOCOL:
            _logger.warning('Unknown protocol %r, reading anyway.', proto)
        ret = IniDocument()
        for k, v in (tree.get('sections') or {}).items():
            sect = ret.append_section(cls.__to_str(k))
            for pk, pv in (v or {}).items():
                sect[cls.__to_str(pk)] = cls.__to_str(pv)
        return ret


class IniJsonParser(IniTreeParser):
    def read(self) -> IniDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            src: _IniTree = json.load(fp)
        return self.from_tree(src)

    def write(self, instance: IniDocument, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            json.dump(
                self.to_tree(instance), fp, ensure_ascii=False, indent=indent)


class IniYamlParser(IniTreeParser):
    def read(self) -> IniDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            src: _IniTree = yaml.safe_load(fp) or {}
        return self.from_tree(src)

    def write(self, instance: IniDocument, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.safe_dump(
                dict(self.to_tree(instance)), fp,
                allow_unicode=True, sort_keys=False, indent=indent)
