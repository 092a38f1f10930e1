# -------------------------------------
# expression engine shared state
# -------------------------------------
"""
Shared defaults for the expression engine:
- WILDCARD: the "both values" marker inside `var=.`
- JOIN_BY: default connective used to join expanded variants
- VERBOSE: whether expansions are echoed to stdout
- PLACEHOLDER: template for the span placeholders in a skeleton

Per-call arguments always take precedence over these.
"""

WILDCARD = "."

# ============================================================
# Join operator
# ============================================================

JOIN_BY: str | None = "|"


def set_join_by(op: str | None) -> None:
    """Set the default join operator (None selects cartesian mode)."""
    global JOIN_BY
    JOIN_BY = op


def get_join_by() -> str | None:
    """Return the default join operator."""
    return JOIN_BY


# ============================================================
# Verbosity
# ============================================================

VERBOSE = False


def set_verbose(flag: bool) -> None:
    """Turn echoing of expanded expressions on or off."""
    global VERBOSE
    VERBOSE = bool(flag)


def get_verbose() -> bool:
    """Return the default verbosity."""
    return VERBOSE


# ============================================================
# Placeholders
# ============================================================

SENTINEL = "\x00"
PLACEHOLDER = "{s}expand{i}{s}"


def placeholders(text: str, n: int) -> list[str]:
    """
    Return n placeholder tokens that cannot occur in `text`.

    The sentinel is lengthened until it is absent from `text`, and every
    token is closed by the sentinel too, so "expand1" is never a prefix
    of "expand10".
    """
    s = SENTINEL
    while s in text:
        s += SENTINEL
    return [PLACEHOLDER.format(s=s, i=i) for i in range(1, n + 1)]
