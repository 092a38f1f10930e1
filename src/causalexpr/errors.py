# -------------------------------------
# errors
# -------------------------------------
"""
Typed errors raised by the expression engine.

All of them are ValueErrors so callers that only care about
"bad input" can catch one thing.
"""

__all__ = [
    "ExpressionError",
    "ArityMismatch",
    "ConflictingArguments",
    "UnknownNode",
    "PositionOutOfRange",
]


class ExpressionError(ValueError):
    pass


class ArityMismatch(ExpressionError):
    """Pattern and replacement vectors differ in length."""


class ConflictingArguments(ExpressionError):
    """Both `condition` and `position` were given."""


class UnknownNode(ExpressionError):
    """One or more requested nodes are not in the parent mapping."""

    def __init__(self, nodes):
        self.nodes = list(nodes)
        names = ", ".join(repr(n) for n in self.nodes)
        super().__init__(f"One or more names in `position` not found in model: {names}")


class PositionOutOfRange(ExpressionError):
    """A digit position falls outside 1..2^k for its node."""

    def __init__(self, node: str, position: int, n_positions: int):
        self.node = node
        self.position = position
        self.n_positions = n_positions
        super().__init__(
            f"position {position} out of range for node {node!r} "
            f"(valid positions are 1..{n_positions})"
        )
