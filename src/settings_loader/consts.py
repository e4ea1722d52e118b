# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/21 22:08:41
# @Author : Kariko Lin

from enum import Enum


SETTINGS_LOADER_XMLNS = 'http://github.com/superruzafa/settings-loader'


class NodeKind(str, Enum):
    """Local names of the scope elements in `SETTINGS_LOADER_XMLNS`."""
    CONCRETE = 'settings'  # merged AND emitted
    ABSTRACT = 'abstract'  # merged only


ARRAY_SENTINEL = '<array>'
OBJECT_SENTINEL = '<object>'


class Diagnostic(str, Enum):
    CYCLIC_RECURSION = 'Cyclic recursion: %s'
    UNDEFINED_KEY = 'Undefined key: "%s"'
    ARRAY_INTERPOLATION = 'Array interpolation: "%s"'
    OBJECT_INTERPOLATION = 'Object interpolation: "%s"'
