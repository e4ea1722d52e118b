# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/10/21 22:15:03
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from typing import Any, Generic, Sequence, TypeVar

T = TypeVar('T')


class DocumentNode(metaclass=ABCMeta):
    """What `ScopeWalker` needs from a parsed document tree.

    A node is either the document itself, an element or an attribute.
    Only the document and elements are expected to have children/attributes.
    """

    @property
    @abstractmethod
    def local_name(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def qualified_name(self) -> str:
        """Name as written in the document, prefix included."""
        raise NotImplementedError

    @property
    @abstractmethod
    def namespace_uri(self) -> str | None:
        raise NotImplementedError

    @property
    @abstractmethod
    def text(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def children(self) -> Sequence['DocumentNode']:
        raise NotImplementedError

    @abstractmethod
    def attributes(self) -> Sequence['DocumentNode']:
        """Attribute nodes, without namespace declarations."""
        raise NotImplementedError

    def query(
        self, namespace: str, *local_names: str
    ) -> list['DocumentNode']:
        """Direct children in `namespace` named one of `local_names`."""
        return [
            i for i in self.children()
            if i.namespace_uri == namespace and i.local_name in local_names
        ]

    def default_namespace_members(self) -> list['DocumentNode']:
        """Unprefixed attributes, then unprefixed child elements.

        "Unprefixed" means the qualified name equals the local name,
        so elements living under a default `xmlns="..."` still count.
        """
        return [
            i for i in (*self.attributes(), *self.children())
            if i.qualified_name == i.local_name
        ]


class Loader(metaclass=ABCMeta):
    @abstractmethod
    def load(self) -> bool:
        """(Re)load settings. Returns whether loading succeeded."""
        raise NotImplementedError

    @abstractmethod
    def get_settings(self) -> list[dict[str, Any]]:
        """Settings computed by the latest `load()`."""
        raise NotImplementedError


class FileHandler(Generic[T], metaclass=ABCMeta):
    def __init__(self, filename: str) -> None:
        self._fn = filename

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
