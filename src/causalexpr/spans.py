# -------------------------------------
# span extraction
# -------------------------------------
"""
Find substrings bounded by a left pattern and a right marker.

This is a shallow heuristic, not a bracket matcher:
  - every match of `right` closes a span
  - a run of immediately adjacent `right` matches (eg. "[[") counts once
  - each span opens at the *closest preceding* match of `left`
  - a `right` with no preceding `left` produces no span

    >>> st_within("(XX[Y=0] == 1) > (XX[Y=1] == 0)")
    ['XX', 'XX']
    >>> st_within("(a[b]) > (c[d])", left=r"\\(", right=r"\\)", rm_left=1)
    ['a[b]', 'c[d]']
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

__all__ = [
    "BoundaryMatch",
    "DEFAULT_LEFT",
    "DEFAULT_RIGHT",
    "find_spans",
    "st_within",
]

# punctuation other than "_", or a word boundary
DEFAULT_LEFT = r"[!-/:-@\[-\^`{-~]|\b"
DEFAULT_RIGHT = r"\["


@dataclass(frozen=True)
class BoundaryMatch:
    start: int  # 0-based, inclusive
    end: int    # 0-based, exclusive

    def text(self, x: str) -> str:
        return x[self.start:self.end]


def _positions(pattern: str, x: str) -> List[int]:
    return [m.start() for m in re.finditer(pattern, x)]


def _drop_consecutive(stops: List[int]) -> List[int]:
    # only the first of a run of adjacent boundaries is kept (eg. '[[')
    out: List[int] = []
    for i, s in enumerate(stops):
        if i > 0 and s - stops[i - 1] == 1:
            continue
        out.append(s)
    return out


def find_spans(
    x: str,
    left: str = DEFAULT_LEFT,
    right: str = DEFAULT_RIGHT,
    rm_left: int = 0,
    rm_right: int = -1,
) -> List[BoundaryMatch]:
    """
    Locate bounded spans in `x`.

    Offsets follow the boundary positions: a span runs from the left
    match position + rm_left to the right match position + rm_right,
    both inclusive. With the defaults the left boundary itself is kept
    and the right marker is dropped.

    Spans that would overlap an earlier span are discarded, as are
    spans left inverted by trimming. Empty spans (eg. "()") are kept.
    """
    if not isinstance(x, str):
        raise TypeError("`x` must be a string.")

    puncts = _positions(left, x)
    stops = _drop_consecutive(_positions(right, x))

    out: List[BoundaryMatch] = []
    last_end = 0
    for s in stops:
        before = [p for p in puncts if p < s]
        if not before:
            continue
        start = max(before) + rm_left
        end = s + rm_right + 1
        if start < last_end or start > end:
            continue
        start = max(start, 0)
        end = min(end, len(x))
        out.append(BoundaryMatch(start, end))
        last_end = end
    return out


def st_within(
    x: str,
    left: str = DEFAULT_LEFT,
    right: str = DEFAULT_RIGHT,
    rm_left: int = 0,
    rm_right: int = -1,
) -> List[str]:
    """
    Return the substrings enclosed by `left` and `right`.

    By default returns the names of the variables indexed by square
    brackets. An empty list means no valid span was found; callers
    treat that as "operate on the whole input".
    """
    return [m.text(x) for m in find_spans(x, left, right, rm_left, rm_right)]
