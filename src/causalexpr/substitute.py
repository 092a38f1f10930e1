# -------------------------------------
# ordered substitution
# -------------------------------------
"""
Apply several pattern -> replacement rewrites, one after the other.

Each rewrite sees the text produced by the previous one, so the order
of the pairs matters:

    >>> gsub_many("ab", ["a", "b"], ["b", "c"])
    'cc'
"""
from __future__ import annotations

import re
from typing import List, Sequence, Union

from .errors import ArityMismatch

__all__ = ["gsub_many"]

Text = Union[str, Sequence[str]]


def _sub(pattern: str, replacement: str, s: str, fixed: bool, flags: int) -> str:
    if fixed:
        return s.replace(pattern, replacement)
    return re.sub(pattern, replacement, s, flags=flags)


def gsub_many(
    x: Text,
    pattern_vector: Sequence[str],
    replacement_vector: Sequence[str],
    *,
    fixed: bool = False,
    flags: int = 0,
) -> Union[str, List[str]]:
    """
    Substitute pattern_vector[i] by replacement_vector[i], in order.

    `x` may be a single string or a sequence of strings; a string comes
    back as a string, a sequence as a new list. With fixed=True patterns
    and replacements are taken literally, otherwise they follow `re.sub`.
    """
    if len(pattern_vector) != len(replacement_vector):
        raise ArityMismatch("pattern and replacement vectors must be the same length")

    single = isinstance(x, str)
    out = [x] if single else list(x)
    for pattern, replacement in zip(pattern_vector, replacement_vector):
        out = [_sub(pattern, replacement, s, fixed, flags) for s in out]
    return out[0] if single else out
