"""
causalexpr: string-level expression engine for causal queries.

- st_within / find_spans   bounded span extraction
- gsub_many                ordered multi-pattern substitution
- perm                     digit permutation grids
- interpret_type           nodal type digit interpretation
- expand_wildcard          wildcard expansion of queries
"""

from .errors import (
    ExpressionError,
    ArityMismatch,
    ConflictingArguments,
    UnknownNode,
    PositionOutOfRange,
)
from .spans import BoundaryMatch, find_spans, st_within
from .substitute import gsub_many
from .perm import perm
from .interpret import (
    Interpretation,
    ConditionQuery,
    ByPosition,
    ByCondition,
    clean_condition,
    parse_condition,
    interpret,
    interpret_type,
)
from .wildcard import expand_span, expand_wildcard
from .nodes import includes_var, var_in_query

__all__ = [
    "ExpressionError",
    "ArityMismatch",
    "ConflictingArguments",
    "UnknownNode",
    "PositionOutOfRange",
    "BoundaryMatch",
    "find_spans",
    "st_within",
    "gsub_many",
    "perm",
    "Interpretation",
    "ConditionQuery",
    "ByPosition",
    "ByCondition",
    "clean_condition",
    "parse_condition",
    "interpret",
    "interpret_type",
    "expand_span",
    "expand_wildcard",
    "includes_var",
    "var_in_query",
]
