# -------------------------------------
# wildcard expansion
# -------------------------------------
"""
Expand causal queries containing the wildcard '.'.

`var=.` stands for both var=0 and var=1. Parentheses choose the scope of
the expansion:

    (Y[X=1, M=.] > Y[X=1, M=.])      global: versions of the whole
                                     statement are joined
    (Y[X=1, M=.]) > (Y[X=1, M=.])    local: versions of each part
                                     are joined

Without parentheses the whole expression is one span. Pipeline:
  - find_spans(...)   parenthesised spans (shallow, see spans.py)
  - skeleton          the expression with each span swapped for a token
  - expand_span(...)  2^m variants for the m distinct wildcard variables
  - gsub_many(...)    tokens swapped back for the joined variants, or
                      one output per combination when join_by is None
"""
from __future__ import annotations

import re
from itertools import product
from typing import List, Optional, Sequence, Union

from . import expr_state as state
from .perm import perm
from .spans import BoundaryMatch, find_spans
from .substitute import gsub_many

__all__ = [
    "wildcard_vars",
    "expand_span",
    "expand_wildcard",
]

_ASSIGN_RE = re.compile(r"(\w+)\s*=\s*$")

_UNSET = object()


# ============================================================
# Single span
# ============================================================

def wildcard_vars(span: str, wildcard: str = state.WILDCARD) -> List[str]:
    """Distinct variables assigned the wildcard in `span`, by first appearance."""
    pieces = span.split(wildcard)
    names = []
    for piece in pieces[:-1]:
        m = _ASSIGN_RE.search(piece)
        if m and m.group(1) not in names:
            names.append(m.group(1))
    return names


def expand_span(span: str, wildcard: str = state.WILDCARD) -> List[str]:
    """
    Return every version of `span` with its wildcards set to 0/1.

    Each distinct variable takes one value per version, however often it
    appears. The first variable varies fastest. A span with no `var=.`
    comes back unchanged, as a single version.
    """
    names = wildcard_vars(span, wildcard)
    if not names:
        return [span]

    pieces = span.split(wildcard)
    # piece i is followed by a wildcard iff it ends in an assignment
    head = pieces[:-1]
    is_assign = [_ASSIGN_RE.search(p) is not None for p in head]
    patterns = [rf"(?<!\w){re.escape(n)}\s*=\s*$" for n in names]

    out: List[str] = []
    for row in perm([1] * len(names)):
        subbed = gsub_many(head, patterns, [f"{n}={int(v)}" for n, v in zip(names, row)])
        parts = [p if a else p + wildcard for p, a in zip(subbed, is_assign)]
        out.append("".join(parts) + pieces[-1])
    return out


# ============================================================
# Skeleton
# ============================================================

def _splice(x: str, matches: Sequence[BoundaryMatch], tokens: Sequence[str]) -> str:
    parts = []
    pos = 0
    for m, tok in zip(matches, tokens):
        parts.append(x[pos:m.start])
        parts.append(tok)
        pos = m.end
    parts.append(x[pos:])
    return "".join(parts)


# ============================================================
# Full expression
# ============================================================

def expand_wildcard(
    to_expand: str,
    join_by: Optional[str] = _UNSET,
    verbose: Optional[bool] = None,
) -> Union[str, List[str]]:
    """
    Expand a statement containing wildcards.

    join_by: connective placed between the versions of each span
             (default from expr_state, initially '|'). With None, one
             statement is returned per combination of span versions.
    verbose: print the result (and the global-expansion notice).

    Returns a single string when joining, else a list of strings.
    """
    if join_by is _UNSET:
        join_by = state.get_join_by()
    if verbose is None:
        verbose = state.get_verbose()

    matches = find_spans(to_expand, left=r"\(", right=r"\)", rm_left=1)
    if matches:
        orig = [m.text(to_expand) for m in matches]
        tokens = state.placeholders(to_expand, len(orig))
        skeleton = _splice(to_expand, matches, tokens)
    else:
        if verbose:
            print("No parentheses indicated. Global expansion assumed. See expand_wildcard.")
        orig = [to_expand]
        tokens = state.placeholders(to_expand, 1)
        skeleton = tokens[0]

    expanded_types = [expand_span(o) for o in orig]

    if join_by is not None:
        sep = f" {join_by} "
        oper = [sep.join(versions) for versions in expanded_types]
        out = gsub_many(skeleton, tokens, oper, fixed=True)
    else:
        out = [gsub_many(skeleton, tokens, list(picks), fixed=True)
               for picks in product(*expanded_types)]

    if verbose:
        print("Generated expanded expression:")
        for line in ([out] if isinstance(out, str) else out):
            print(line)
    return out
