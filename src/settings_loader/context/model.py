# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/21 22:31:17
# @Author : Kariko Lin

"""
Flat key-value scopes ("contexts").

Everything read from a document is `str`, and a key repeated within
one node becomes a `list[str]`. Hand-made contexts may carry anything else,
which is why values get classified before being consumed.
"""

from collections.abc import Iterable, Mapping, Set
from enum import Enum, auto
from typing import Any, TypeAlias

ContextValue: TypeAlias = str | list[str] | Any
Context: TypeAlias = dict[str, ContextValue]


class ValueKind(Enum):
    SCALAR = auto()
    SEQUENCE = auto()
    OBJECT = auto()


def kind_of(value: ContextValue) -> ValueKind:
    match value:
        case str() | int() | float():
            return ValueKind.SCALAR
        # collections of any shape, mappings included
        case list() | tuple() | Mapping() | Set():
            return ValueKind.SEQUENCE
        case _:
            return ValueKind.OBJECT


def accumulate(context: Context, key: str, value: str) -> None:
    """Put `value` under `key`, turning a repeated key into a list.

    Only for a context under construction (lists here are owned by it).
    """
    if key not in context:
        context[key] = value
        return
    match existing := context[key]:
        case list():
            context[key] = [*existing, value]
        case _:
            context[key] = [existing, value]


def from_pairs(pairs: Iterable[tuple[str, str]]) -> Context:
    ret: Context = {}
    for k, v in pairs:
        accumulate(ret, k, v)
    return ret


def merge(inherited: Mapping[str, ContextValue],
          local: Mapping[str, ContextValue]) -> Context:
    """New context where keys of `local` replace those of `inherited`.

    Replacement is whole: a scalar never gets appended to an inherited list.
    An overridden key keeps its position, new keys go to the end.
    """
    ret: Context = dict(inherited)
    ret.update(local)
    return ret
