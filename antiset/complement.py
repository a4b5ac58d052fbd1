from collections.abc import Set as AbstractSet
from typing import Any, Callable

from antiset.anti_set import AntiSet
from antiset.errors import InvalidSetError
from antiset.finite import as_finite

__all__ = ["EMPTY", "UNIVERSE", "NegatedPredicate", "complement", "contains"]


class NegatedPredicate:
    """Predicate that holds exactly where `predicate` does not.

    Lets a predicate act as a set for membership tests only; it takes no
    part in unions, intersections or differences.

    Example::

        >>> is_odd = NegatedPredicate(lambda x: x % 2 == 0)
        >>> 3 in is_odd
        True
        >>> is_odd(4)
        False
    """

    __slots__ = ("predicate", )

    def __init__(self, predicate: Callable[[Any], Any]):
        self.predicate = predicate

    def __call__(self, what: Any) -> bool:
        return not self.predicate(what)

    def __contains__(self, what: Any) -> bool:
        return self(what)

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, NegatedPredicate) and \
            self.predicate == other.predicate

    def __hash__(self) -> int:
        return hash((NegatedPredicate, self.predicate))

    def __repr__(self) -> str:
        return "%s(%r)" % (self.__class__.__name__, self.predicate)


def complement(value):
    """Returns the complement of `value` with respect to the universe.

    - a finite set ``S`` gives ``AntiSet(S)``
    - ``AntiSet(S)`` gives back the frozenset ``S``
    - a predicate gives the negated predicate, and negating a
      `NegatedPredicate` gives back the original predicate

    ``complement(complement(x)) == x`` holds for every accepted value.
    """
    if isinstance(value, AntiSet):
        return value.excluded
    if isinstance(value, AbstractSet):
        return AntiSet(as_finite(value))
    if isinstance(value, NegatedPredicate):
        return value.predicate
    if callable(value):
        return NegatedPredicate(value)
    raise InvalidSetError(value, "a set, an AntiSet or a predicate")


def contains(value, element: Any) -> bool:
    """Tells whether `element` is a member of the set or predicate
    `value`."""
    if isinstance(value, (AntiSet, NegatedPredicate)):
        return element in value
    if isinstance(value, AbstractSet):
        try:
            return element in value
        except TypeError:
            # unhashable values can never be members of a finite set
            return False
    if callable(value):
        return bool(value(element))
    raise InvalidSetError(value, "a set, an AntiSet or a predicate")


EMPTY = frozenset()
UNIVERSE = complement(EMPTY)
