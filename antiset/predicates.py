"""Set predicates over finite sets and anti-sets.

`intersect` and `subset` are defined by one entry per `SetPair`; the other
predicates are built on top of them.

Two entries cannot be computed from finitely many elements and follow from
the assumption that the universe is unbounded:

- two anti-sets always intersect, since each one misses only finitely many
  elements of the universe;
- an anti-set is never a subset of a finite set.

Both are wrong for a finite universe, which is not supported.
"""
from antiset.complement import complement
from antiset.finite import coerce, finite_intersect
from antiset.set_kind import SetPair, classify

__all__ = ["intersect", "disjoint", "subset", "superset",
           "proper_subset", "proper_superset",
           "INTERSECT_TABLE", "SUBSET_TABLE"]


INTERSECT_TABLE = {
    SetPair.FINITE_FINITE: finite_intersect,
    SetPair.FINITE_ANTI: lambda a, b: not subset(a, complement(b)),
    SetPair.ANTI_FINITE: lambda a, b: not subset(b, complement(a)),
    SetPair.ANTI_ANTI: lambda a, b: True,
}

SUBSET_TABLE = {
    SetPair.FINITE_FINITE: lambda a, b: a <= b,
    SetPair.FINITE_ANTI: lambda a, b: not intersect(a, complement(b)),
    SetPair.ANTI_FINITE: lambda a, b: False,
    SetPair.ANTI_ANTI: lambda a, b: subset(complement(b), complement(a)),
}


def intersect(set1, set2) -> bool:
    """Is at least one element of `set1` shared with `set2`?"""
    set1, set2 = coerce(set1), coerce(set2)
    return INTERSECT_TABLE[classify(set1, set2)](set1, set2)


def disjoint(set1, set2) -> bool:
    """Are no elements of `set1` shared with `set2`?"""
    return not intersect(set1, set2)


def subset(set1, set2) -> bool:
    """Are all elements of `set1` also in `set2`?

    Example::

        >>> subset({1, 2}, complement({3}))
        True
        >>> subset(complement({1}), {1, 2})
        False
    """
    set1, set2 = coerce(set1), coerce(set2)
    return SUBSET_TABLE[classify(set1, set2)](set1, set2)


def superset(set1, set2) -> bool:
    """Are all elements of `set2` also in `set1`?"""
    return subset(set2, set1)


def proper_subset(set1, set2) -> bool:
    """Is `set1` a subset of `set2` without being equal to it?"""
    set1, set2 = coerce(set1), coerce(set2)
    return set1 != set2 and subset(set1, set2)


def proper_superset(set1, set2) -> bool:
    """Is `set1` a superset of `set2` without being equal to it?"""
    return proper_subset(set2, set1)
