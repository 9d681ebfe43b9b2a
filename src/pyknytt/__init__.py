# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:36:45
# @Author : Kariko Lin

import logging

from .common import parse_xy, screen_sections
from .ini import (
    IniDocument,
    IniJsonParser,
    IniSection,
    IniYamlParser,
    UnrepresentableCharacter,
    WorldIniParser,
    decode,
    encode,
    get_property,
    load_ini,
    parse,
    serialize,
    set_property
)

__all__ = [
    'IniDocument', 'IniSection',
    'parse', 'serialize', 'get_property', 'set_property',
    'WorldIniParser', 'load_ini', 'IniJsonParser', 'IniYamlParser',
    'UnrepresentableCharacter', 'decode', 'encode',
    'parse_xy', 'screen_sections'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
