# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/22 01:58:30
# @Author : Kariko Lin

from .model import DomNode
from .parser import (
    InvalidSettingsDocument,
    XmlLoader,
    XmlFileLoader,
    parse_document
)
