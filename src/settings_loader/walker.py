# -*- encoding: utf-8 -*-
# @File   : walker.py
# @Time   : 2024/10/22 00:12:38
# @Author : Kariko Lin

"""
Turns nested `settings`/`abstract` scopes into flat contexts.

```xml
<s:abstract xmlns:s="http://github.com/superruzafa/settings-loader"
            key2="value2">
    <key1>foo1</key1>
    <s:settings>  <!-- emits {key1: value1, key2: value2} -->
        <key1>value1</key1>
    </s:settings>
</s:abstract>
```
"""

from typing import Mapping

from .abstract import DocumentNode
from .consts import SETTINGS_LOADER_XMLNS, NodeKind
from .context import (
    Context, ContextValue, Interpolator, from_pairs, merge
)


class ScopeWalker:
    def __init__(self, interpolator: Interpolator | None = None) -> None:
        self.interpolator = (
            Interpolator() if interpolator is None else interpolator)

    def walk(self, root: DocumentNode) -> list[Context]:
        """Contexts of all concrete scopes under `root`, in pre-order."""
        settings: list[Context] = []
        self.walk_children(root, {}, settings)
        return settings

    def walk_children(
        self, node: DocumentNode,
        context: Mapping[str, ContextValue],
        settings: list[Context]
    ) -> None:
        for i in node.query(
                SETTINGS_LOADER_XMLNS, NodeKind.CONCRETE, NodeKind.ABSTRACT):
            self.visit(i, context, settings)

    def visit(
        self, node: DocumentNode,
        inherited: Mapping[str, ContextValue],
        settings: list[Context]
    ) -> None:
        context = merge(inherited, self.extract_local_context(node))
        if node.local_name == NodeKind.CONCRETE:
            settings.append(self.interpolator.interpolate(context))
        # descendants inherit the raw context, not the interpolated one.
        self.walk_children(node, context, settings)

    @staticmethod
    def extract_local_context(node: DocumentNode) -> Context:
        return from_pairs(
            (i.local_name, i.text) for i in node.default_namespace_members())
