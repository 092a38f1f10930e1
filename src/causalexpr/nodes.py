# -------------------------------------
# nodes mentioned in a query
# -------------------------------------
"""
Which model nodes a query string refers to.

Names match as whole words only, so "X" is not found in "XY[Z=1]".
"""
from __future__ import annotations

import re
from typing import Iterable, List

__all__ = ["includes_var", "var_in_query"]


def includes_var(var: str, query: str) -> bool:
    """True if `var` appears in `query` as a whole word."""
    return re.search(rf"\b{re.escape(var)}\b", query) is not None


def var_in_query(nodes: Iterable[str], query: str) -> List[str]:
    """The nodes (in the given order) that appear in `query`."""
    return [v for v in nodes if includes_var(v, query)]
