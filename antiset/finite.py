"""Helpers on ordinary finite sets.

These complement the operations that ``frozenset`` already provides and are
the only place where the algebra touches finite sets directly.
"""
from collections.abc import Set as AbstractSet
from typing import FrozenSet, Union

from antiset.anti_set import AntiSet
from antiset.errors import InvalidSetError

__all__ = ["as_finite", "coerce", "finite_intersect", "finite_disjoint"]


def as_finite(value: AbstractSet) -> FrozenSet:
    """Freezes the finite set `value`; frozensets are returned as they
    are. Raises `InvalidSetError` for anything else, anti-sets included."""
    if isinstance(value, frozenset):
        return value
    if isinstance(value, AbstractSet) and not isinstance(value, AntiSet):
        return frozenset(value)
    raise InvalidSetError(value, "a finite set")


def coerce(value) -> Union[FrozenSet, AntiSet]:
    """Brings an operand to one of the two set representations."""
    if isinstance(value, AntiSet):
        return value
    return as_finite(value)


def finite_intersect(set1: FrozenSet, set2: FrozenSet) -> bool:
    """Does `set1` share at least one element with `set2`?

    The smaller set is iterated and every element is looked up in the
    larger one.

    Example::

        >>> finite_intersect(frozenset([1, 2]), frozenset([2, 3, 4]))
        True
    """
    if len(set1) < len(set2):
        smaller, larger = set1, set2
    else:
        smaller, larger = set2, set1
    return any(element in larger for element in smaller)


def finite_disjoint(set1: FrozenSet, set2: FrozenSet) -> bool:
    """Are no elements of `set1` in `set2`?"""
    return not finite_intersect(set1, set2)
