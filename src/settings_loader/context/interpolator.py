# -*- encoding: utf-8 -*-
# @File   : interpolator.py
# @Time   : 2024/10/21 23:02:55
# @Author : Kariko Lin

from re import compile as regex
from typing import Callable, Mapping, TypeAlias
from warnings import warn

from ..consts import ARRAY_SENTINEL, OBJECT_SENTINEL, Diagnostic
from .model import Context, ContextValue, ValueKind, kind_of

Reporter: TypeAlias = Callable[[str], None]

# Matches things like {{whatever}}, {{ what}ever }}, {{what}e}v}e}r }}...
# group 1 is the referenced key.
PLACEHOLDER = regex(r'\{\{\s*((?:(?!\}\})\S)+)\s*\}\}')


class InterpolationWarning(UserWarning):
    """Non-fatal problem met while resolving placeholders."""
    pass


def warn_reporter(message: str) -> None:
    warn(message, InterpolationWarning, stacklevel=2)


class Interpolator:
    """Replaces `{{ key }}` in string values with the value of `key`
    in the same context.

    Problems (undefined keys, cycles, non-scalar targets) never raise.
    They are sent to `report` and the placeholder becomes an empty string
    or a sentinel text.
    """

    def __init__(self, report: Reporter | None = None) -> None:
        self._report = warn_reporter if report is None else report

    def interpolate(self, context: Mapping[str, ContextValue]) -> Context:
        solved: Context = {}
        stack: list[str] = []
        # keys in mapping order, each resolved depth-first.
        # cyclic warnings and partial texts depend on this order.
        return {k: self._resolve(k, context, solved, stack) for k in context}

    def _resolve(
        self, key: str,
        context: Mapping[str, ContextValue],
        solved: Context, stack: list[str]
    ) -> ContextValue:
        if key in solved:
            return solved[key]

        if key in stack:
            self._report(
                Diagnostic.CYCLIC_RECURSION.value % ' -> '.join([*stack, key]))
            solved[key] = ''
            return ''

        if context.get(key) is None:
            self._report(Diagnostic.UNDEFINED_KEY.value % key)
            solved[key] = ''
            return ''

        value = context[key]
        if not isinstance(value, str):
            solved[key] = value
            return value

        stack.append(key)
        solved[key] = PLACEHOLDER.sub(
            lambda m: self._substitute(m[1], context, solved, stack), value)
        stack.pop()
        return solved[key]

    def _substitute(
        self, key: str,
        context: Mapping[str, ContextValue],
        solved: Context, stack: list[str]
    ) -> str:
        value = self._resolve(key, context, solved, stack)
        match kind_of(value):
            case ValueKind.SCALAR:
                return str(value)
            case ValueKind.SEQUENCE:
                self._report(Diagnostic.ARRAY_INTERPOLATION.value % key)
                return ARRAY_SENTINEL
            case ValueKind.OBJECT:
                self._report(Diagnostic.OBJECT_INTERPOLATION.value % key)
                return OBJECT_SENTINEL
