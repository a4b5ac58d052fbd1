from collections.abc import Set as AbstractSet
from typing import Any, FrozenSet, Iterable

from antiset.errors import InvalidSetError, UnsupportedOperationError


class AntiSet:
    """This object behaves more or less like a set, with one exception,
    the elements it knows about. An `AntiSet` stores the elements which are
    *not* in the set; everything else in the universe is contained in it.
    The semantics of the operators are the same as for frozensets and any
    combination of finite sets and anti-sets may be mixed.

    Usage example::

        >>> s = AntiSet()
        >>> "abc" in s
        True
        >>> s = s.remove("abc")
        >>> s
        #-{'abc'}
        >>> "abc" in s
        False

    Anti-sets are immutable: `add` and `remove` return new values. They
    cannot be iterated or counted, both raise `UnsupportedOperationError`.
    """

    __slots__ = ("_excluded", )

    def __init__(self, excluded: Iterable = ()):
        """Constructs an anti-set that contains everything except the
        members of the given iterable."""
        if isinstance(excluded, AntiSet):
            raise InvalidSetError(excluded, "a finite collection")
        self._excluded: FrozenSet = frozenset(excluded)

    @property
    def excluded(self) -> FrozenSet:
        """The finite set of elements missing from this anti-set"""
        return self._excluded

    def add(self, element: Any) -> "AntiSet":
        """Returns a new anti-set that also contains `element`.

        Example::

            >>> AntiSet([1, 2]).add(2)
            #-{1}
        """
        return AntiSet(self._excluded - {element})

    def remove(self, element: Any) -> "AntiSet":
        """Returns a new anti-set that no longer contains `element`.

        Example::

            >>> AntiSet([1]).remove(2)
            #-{1 2}
        """
        return AntiSet(self._excluded | {element})

    def __contains__(self, what: Any) -> bool:
        try:
            return what not in self._excluded
        except TypeError:
            # unhashable values can never be excluded
            return True

    def __call__(self, what: Any) -> Any:
        """Filter form of membership: returns `what` if it belongs to the
        anti-set and ``None`` otherwise."""
        return what if what in self else None

    def __iter__(self):
        raise UnsupportedOperationError("iterate over")

    def __len__(self):
        raise UnsupportedOperationError("count")

    def __bool__(self) -> bool:
        return True

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, AntiSet) and \
            self._excluded == other._excluded

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash((AntiSet, self._excluded))

    def __repr__(self) -> str:
        try:
            elements = sorted(self._excluded)
        except TypeError:
            elements = list(self._excluded)
        return "#-{%s}" % " ".join(repr(x) for x in elements)

    __str__ = __repr__

    # Named methods mirroring the frozenset API

    def union(self, *others):
        from antiset.algebra import union
        return union(self, *others)

    def intersection(self, *others):
        from antiset.algebra import intersection
        return intersection(self, *others)

    def difference(self, *others):
        from antiset.algebra import difference
        return difference(self, *others)

    def symmetric_difference(self, other):
        from antiset.algebra import symmetric_difference
        return symmetric_difference(self, other)

    def issubset(self, other) -> bool:
        from antiset.predicates import subset
        return subset(self, other)

    def issuperset(self, other) -> bool:
        from antiset.predicates import superset
        return superset(self, other)

    def isdisjoint(self, other) -> bool:
        from antiset.predicates import disjoint
        return disjoint(self, other)

    # Operators; anything that is not a set gives NotImplemented

    @staticmethod
    def _is_set(obj) -> bool:
        return isinstance(obj, (AbstractSet, AntiSet))

    def __or__(self, other):
        if not self._is_set(other):
            return NotImplemented
        return self.union(other)

    def __ror__(self, other):
        if not self._is_set(other):
            return NotImplemented
        from antiset.algebra import union
        return union(other, self)

    def __and__(self, other):
        if not self._is_set(other):
            return NotImplemented
        return self.intersection(other)

    def __rand__(self, other):
        if not self._is_set(other):
            return NotImplemented
        from antiset.algebra import intersection
        return intersection(other, self)

    def __sub__(self, other):
        if not self._is_set(other):
            return NotImplemented
        return self.difference(other)

    def __rsub__(self, other):
        if not self._is_set(other):
            return NotImplemented
        from antiset.algebra import difference
        return difference(other, self)

    def __xor__(self, other):
        if not self._is_set(other):
            return NotImplemented
        return self.symmetric_difference(other)

    def __rxor__(self, other):
        if not self._is_set(other):
            return NotImplemented
        from antiset.algebra import symmetric_difference
        return symmetric_difference(other, self)

    def __le__(self, other):
        if not self._is_set(other):
            return NotImplemented
        return self.issubset(other)

    def __lt__(self, other):
        if not self._is_set(other):
            return NotImplemented
        from antiset.predicates import proper_subset
        return proper_subset(self, other)

    def __ge__(self, other):
        if not self._is_set(other):
            return NotImplemented
        return self.issuperset(other)

    def __gt__(self, other):
        if not self._is_set(other):
            return NotImplemented
        from antiset.predicates import proper_superset
        return proper_superset(self, other)
