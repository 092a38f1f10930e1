# -------------------------------------
# nodal type interpretation
# -------------------------------------
"""
Interpret digit positions of nodal types, or find the positions that
correspond to given parent values.

A node X with k parents has nodal types written as X followed by 2^k
digits. Digit position p (1-based) is row p of perm([1] * k), with one
column per parent in the order the model lists them. For the model
R -> X <- Z:

    >>> parents = {"R": [], "Z": [], "X": ["R", "Z"]}
    >>> interpret_type(parents, position={"X": [2]})["X"][0].interpretation
    'X | R = 1 & Z = 0'
    >>> interpret_type(parents, condition="X | Z=0 & R=1")["X"][0].display
    'X*[*]**'
"""
from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

import numpy as np

from .errors import ConflictingArguments, PositionOutOfRange, UnknownNode
from .perm import perm

__all__ = [
    "Interpretation",
    "ConditionQuery",
    "ByPosition",
    "ByCondition",
    "Query",
    "nodal_table",
    "clean_condition",
    "parse_condition",
    "interpret",
    "interpret_type",
]

ParentMap = Mapping[str, Sequence[str]]
Positions = Union[int, Iterable[int], None]

_TERM_SPLIT_RE = re.compile(r"[&|]")
_SPACE_RE = re.compile(r"\s+")


def _terms(text: str) -> frozenset[str]:
    """Split on '&' and '|', drop whitespace inside each term."""
    out = (_SPACE_RE.sub("", t) for t in _TERM_SPLIT_RE.split(text))
    return frozenset(t for t in out if t)


# ============================================================
# Records
# ============================================================

@dataclass(frozen=True)
class Interpretation:
    node: str
    position: Optional[int]  # None for root nodes
    display: str             # eg. "X*[*]**"
    interpretation: str      # eg. "X | R = 1 & Z = 0"
    constraints: frozenset = field(default_factory=frozenset)  # {(parent, value)}

    @property
    def terms(self) -> frozenset[str]:
        return _terms(self.interpretation)


@dataclass(frozen=True)
class ConditionQuery:
    node: str
    constraints: frozenset  # {(parent, value)}

    @property
    def terms(self) -> frozenset[str]:
        pairs = {f"{p}={v}" if v else p for p, v in self.constraints}
        return frozenset(({self.node} if self.node else set()) | pairs)


@dataclass(frozen=True)
class ByPosition:
    positions: Mapping[str, Positions]


@dataclass(frozen=True)
class ByCondition:
    conditions: tuple[str, ...]


Query = Union[ByPosition, ByCondition]


# ============================================================
# Conditions
# ============================================================

def clean_condition(condition: str) -> str:
    """Return `condition` with uniform spacing: 'X | Z = 0 & R = 1'."""
    compact = _SPACE_RE.sub("", condition)
    return re.sub(r"([|&=])", r" \1 ", compact).strip()


def parse_condition(condition: str) -> ConditionQuery:
    """
    Parse 'X | Z=0 & R=1' into node 'X' and {('Z', '0'), ('R', '1')}.

    Without a "|" there is no node: "Z=0 & R=1" is just the constraints,
    matched against every node. A lone term without "=" ("X") is the node.
    Whitespace is ignored.
    """
    compact = _SPACE_RE.sub("", condition)
    if "|" in compact:
        node, _, rest = compact.partition("|")
    elif "=" in compact:
        node, rest = "", compact
    else:
        node, rest = compact, ""
    constraints = set()
    for term in _TERM_SPLIT_RE.split(rest):
        if not term:
            continue
        name, _, value = term.partition("=")
        constraints.add((name, value))
    return ConditionQuery(node, frozenset(constraints))


# ============================================================
# Interpretation
# ============================================================

def nodal_table(n_parents: int) -> np.ndarray:
    """Parent-value combinations for a node with n_parents binary parents."""
    return perm([1] * n_parents)


def _display(node: str, s: int, n: int) -> str:
    return node + "*" * (s - 1) + "[*]" + "*" * (n - s)


def _as_positions(positions: Positions) -> Optional[List[int]]:
    if positions is None:
        return None
    if isinstance(positions, (int, np.integer)):
        return [int(positions)]
    return [int(p) for p in positions]


def _interpret_root(node: str) -> List[Interpretation]:
    return [
        Interpretation(node, None, f"{node}{v}", f"{node} = {v}")
        for v in (0, 1)
    ]


def _interpret_node(node: str, node_parents: Sequence[str], positions: Optional[List[int]]) -> List[Interpretation]:
    if not node_parents:
        return _interpret_root(node)

    table = nodal_table(len(node_parents))
    n = table.shape[0]
    if positions is None:
        positions = list(range(1, n + 1))
    for s in positions:
        if not 1 <= s <= n:
            raise PositionOutOfRange(node, s, n)

    out: List[Interpretation] = []
    for s in positions:
        values = [str(int(v)) for v in table[s - 1]]
        pairs = list(zip(node_parents, values))
        text = f"{node} | " + " & ".join(f"{p} = {v}" for p, v in pairs)
        out.append(Interpretation(node, s, _display(node, s, n), text, frozenset(pairs)))
    return out


def interpret(parents: ParentMap, query: Optional[Query] = None) -> Dict[str, List[Interpretation]]:
    """
    Interpret nodal type digits for the nodes of a model.

    parents: node name -> ordered parent names, for every node.
    query:
      - None: every position of every node
      - ByPosition({node: positions}): only the given nodes/positions;
        positions may be an int, an iterable of ints, or None for all
      - ByCondition(conditions): every record whose terms include all
        terms of at least one condition; nodes left empty are dropped

    Returns node -> list of Interpretation, in request order.
    """
    parents = {node: tuple(ps) for node, ps in parents.items()}

    if isinstance(query, ByPosition):
        unknown = [node for node in query.positions if node not in parents]
        if unknown:
            raise UnknownNode(unknown)
        request = {node: _as_positions(p) for node, p in query.positions.items()}
    else:
        request = {node: None for node in parents}

    result = {
        node: _interpret_node(node, parents[node], positions)
        for node, positions in request.items()
    }

    if isinstance(query, ByCondition):
        wanted = [parse_condition(c).terms for c in query.conditions]
        filtered = {}
        for node, records in result.items():
            keep = [r for r in records if any(w <= r.terms for w in wanted)]
            if keep:
                filtered[node] = keep
        result = filtered

    return result


def interpret_type(
    parents: ParentMap,
    condition: Union[str, Iterable[str], None] = None,
    position: Optional[Mapping[str, Positions]] = None,
) -> Dict[str, List[Interpretation]]:
    """
    Interpret positions of digits in nodal types, or find the positions
    matching one or more conditions. At most one of `condition` and
    `position` may be given; with neither, all positions are returned.
    """
    if condition is not None and position is not None:
        raise ConflictingArguments("Must specify either `condition` or `position`, but not both.")

    query: Optional[Query] = None
    if condition is not None:
        conditions = (condition,) if isinstance(condition, str) else tuple(condition)
        query = ByCondition(conditions)
    elif position is not None:
        query = ByPosition(dict(position))
    return interpret(parents, query)
