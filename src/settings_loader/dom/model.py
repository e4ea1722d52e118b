# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/22 00:47:06
# @Author : Kariko Lin

# minidom (rather than ElementTree) since ElementTree forgets prefixes,
# and "unprefixed" is exactly what local context extraction asks for.

from xml.dom import Node, XMLNS_NAMESPACE
from xml.dom.minidom import Attr, Document, Element

from ..abstract import DocumentNode


class DomNode(DocumentNode):
    """`DocumentNode` view over a namespace-aware minidom node."""

    def __init__(self, node: Document | Element | Attr) -> None:
        self._node = node

    @property
    def local_name(self) -> str:
        # the document node has no local name
        return getattr(self._node, 'localName', None) or ''

    @property
    def qualified_name(self) -> str:
        return self._node.nodeName

    @property
    def namespace_uri(self) -> str | None:
        return self._node.namespaceURI

    @property
    def text(self) -> str:
        if self._node.nodeType == Node.ATTRIBUTE_NODE:
            return self._node.value
        return self.__collect_text(self._node)

    @staticmethod
    def __collect_text(node: Node) -> str:
        # same as DOM `textContent`: every descendant text, unstripped.
        ret = ''
        for i in node.childNodes:
            if i.nodeType in (Node.TEXT_NODE, Node.CDATA_SECTION_NODE):
                ret += i.data
            elif i.nodeType == Node.ELEMENT_NODE:
                ret += DomNode.__collect_text(i)
        return ret

    def children(self) -> list['DomNode']:
        if self._node.nodeType == Node.ATTRIBUTE_NODE:
            return []
        return [
            DomNode(i) for i in self._node.childNodes
            if i.nodeType == Node.ELEMENT_NODE
        ]

    def attributes(self) -> list['DomNode']:
        attrs = getattr(self._node, 'attributes', None)
        if not attrs:  # Document has None, also skips empty maps
            return []
        ret = []
        for idx in range(attrs.length):
            i = attrs.item(idx)
            # `xmlns` and `xmlns:p` are declarations, not settings.
            if i.namespaceURI == XMLNS_NAMESPACE:
                continue
            ret.append(DomNode(i))
        return ret

    def __repr__(self) -> str:
        return '<%s %r>' % (type(self).__name__, self.qualified_name)
