"""Mathematical notation for the set operations.

Symbols such as ``∪`` are not valid Python identifiers, so they are kept
in a lookup table instead of being bound as names.

Example::

    >>> from antiset.notation import lookup
    >>> lookup("∪")({1}, {2}) == {1, 2}
    True
"""
from typing import Any, Dict

from antiset.algebra import (difference, intersection, symmetric_difference,
                             union)
from antiset.complement import EMPTY, UNIVERSE, complement, contains
from antiset.predicates import (proper_subset, proper_superset, subset,
                                superset)

__all__ = ["SYMBOLS", "lookup"]

SYMBOLS: Dict[str, Any] = {
    "∁": complement,
    "∪": union,
    "∩": intersection,
    "∖": difference,
    "⊖": symmetric_difference,
    "△": symmetric_difference,
    "∅": EMPTY,
    "⊆": subset,
    "⊇": superset,
    "⊂": proper_subset,
    "⊃": proper_superset,
    "∋": contains,
    "U": UNIVERSE,
}


def lookup(symbol: str) -> Any:
    """Returns the operation or constant written as `symbol`."""
    try:
        return SYMBOLS[symbol]
    except KeyError:
        raise KeyError(f"unknown set notation symbol: {symbol!r}") from None
