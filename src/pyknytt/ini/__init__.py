# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:38:02
# @Author : Kariko Lin

from .codec import UnrepresentableCharacter, decode, encode
from .formats import IniJsonParser, IniYamlParser
from .lines import IniLine, LineKind
from .model import IniDocument, IniSection
from .parser import (
    WorldIniParser,
    get_property,
    load_ini,
    parse,
    serialize,
    set_property
)
