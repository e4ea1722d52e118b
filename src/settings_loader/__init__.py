# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/22 02:03:17
# @Author : Kariko Lin

import logging

from .abstract import DocumentNode, Loader
from .consts import SETTINGS_LOADER_XMLNS, NodeKind
from .context import Interpolator, InterpolationWarning, merge
from .walker import ScopeWalker
from .dom import (
    DomNode, InvalidSettingsDocument, XmlLoader, XmlFileLoader
)

__all__ = [
    'DocumentNode', 'Loader', 'SETTINGS_LOADER_XMLNS', 'NodeKind',
    'Interpolator', 'InterpolationWarning', 'merge', 'ScopeWalker',
    'DomNode', 'InvalidSettingsDocument', 'XmlLoader', 'XmlFileLoader'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
