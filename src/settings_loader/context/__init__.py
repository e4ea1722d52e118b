# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/21 23:40:12
# @Author : Kariko Lin

from .model import (
    Context,
    ContextValue,
    ValueKind,
    kind_of,
    accumulate,
    from_pairs,
    merge
)
from .interpolator import (
    Interpolator,
    InterpolationWarning,
    Reporter,
    PLACEHOLDER,
    warn_reporter
)
