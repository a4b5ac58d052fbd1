from collections.abc import Set as AbstractSet
from enum import Enum

from antiset.anti_set import AntiSet
from antiset.errors import InvalidSetError


class SetKind(Enum):
    """The two representations a set value can have."""
    FINITE: str = "FINITE"
    ANTI: str = "ANTI"


class SetPair(Enum):
    """Combination of representations of the two operands of a binary
    set operation. Every operation and table-based predicate is defined
    once for each member of this enum.
    """
    FINITE_FINITE: str = "FINITE_FINITE"
    FINITE_ANTI: str = "FINITE_ANTI"
    ANTI_FINITE: str = "ANTI_FINITE"
    ANTI_ANTI: str = "ANTI_ANTI"


_PAIRS = {
    (SetKind.FINITE, SetKind.FINITE): SetPair.FINITE_FINITE,
    (SetKind.FINITE, SetKind.ANTI): SetPair.FINITE_ANTI,
    (SetKind.ANTI, SetKind.FINITE): SetPair.ANTI_FINITE,
    (SetKind.ANTI, SetKind.ANTI): SetPair.ANTI_ANTI,
}


def kind_of(value) -> SetKind:
    """Returns the representation of `value`.

    Raises `InvalidSetError` when `value` is neither an `AntiSet` nor a
    finite set (any `collections.abc.Set`).
    """
    if isinstance(value, AntiSet):
        return SetKind.ANTI
    if isinstance(value, AbstractSet):
        return SetKind.FINITE
    raise InvalidSetError(value)


def classify(set1, set2) -> SetPair:
    """Tells which of the four operand combinations `set1` and `set2` form.

    Only the type of each operand is inspected, no element is touched.

    Example::

        >>> classify({1}, AntiSet({2}))
        <SetPair.FINITE_ANTI: 'FINITE_ANTI'>
    """
    return _PAIRS[kind_of(set1), kind_of(set2)]
