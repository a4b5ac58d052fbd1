"""Union, intersection and difference over finite sets and anti-sets.

Every binary operation is a table with one entry per `SetPair`. Thanks to
De Morgan's laws each entry only needs ordinary finite set operations on
the finite operands and on the excluded elements of the anti-set operands,
wrapped or unwrapped by `complement`. Writing ``A'`` for the excluded
elements of an anti-set ``A``::

                     finite,finite  finite,anti   anti,finite   anti,anti
    union            A | B          ~(B' - A)     ~(A' - B)     ~(A' & B')
    intersection     A & B          A - B'        B - A'        ~(A' | B')
    difference       A - B          A & B'        ~(A' | B)     B' - A'

where ``~`` stands for `complement`.
"""
from antiset.complement import EMPTY, UNIVERSE, complement
from antiset.finite import coerce
from antiset.set_fold import SetFold, SetValue
from antiset.set_kind import SetPair, classify

__all__ = ["union", "intersection", "difference", "symmetric_difference",
           "UNION_TABLE", "INTERSECTION_TABLE", "DIFFERENCE_TABLE"]


UNION_TABLE = {
    SetPair.FINITE_FINITE: lambda a, b: a | b,
    SetPair.FINITE_ANTI: lambda a, b: complement(complement(b) - a),
    SetPair.ANTI_FINITE: lambda a, b: complement(complement(a) - b),
    SetPair.ANTI_ANTI:
        lambda a, b: complement(complement(a) & complement(b)),
}

INTERSECTION_TABLE = {
    SetPair.FINITE_FINITE: lambda a, b: a & b,
    SetPair.FINITE_ANTI: lambda a, b: a - complement(b),
    SetPair.ANTI_FINITE: lambda a, b: b - complement(a),
    SetPair.ANTI_ANTI:
        lambda a, b: complement(complement(a) | complement(b)),
}

DIFFERENCE_TABLE = {
    SetPair.FINITE_FINITE: lambda a, b: a - b,
    SetPair.FINITE_ANTI: lambda a, b: a & complement(b),
    SetPair.ANTI_FINITE: lambda a, b: complement(complement(a) | b),
    SetPair.ANTI_ANTI: lambda a, b: complement(b) - complement(a),
}


def _apply(table, set1, set2) -> SetValue:
    set1, set2 = coerce(set1), coerce(set2)
    return table[classify(set1, set2)](set1, set2)


def binary_union(set1, set2) -> SetValue:
    """Union of exactly two sets"""
    return _apply(UNION_TABLE, set1, set2)


def binary_intersection(set1, set2) -> SetValue:
    """Intersection of exactly two sets"""
    return _apply(INTERSECTION_TABLE, set1, set2)


def binary_difference(set1, set2) -> SetValue:
    """Elements of `set1` that are not in `set2`"""
    return _apply(DIFFERENCE_TABLE, set1, set2)


_union = SetFold(binary_union, UNIVERSE, "union")
_intersection = SetFold(binary_intersection, EMPTY, "intersection")
_difference = SetFold(binary_difference, EMPTY, "difference")


def union(set1, *sets) -> SetValue:
    """Returns a set containing the elements of all the given sets.

    Example::

        >>> union({1, 2}, complement({2, 3}))
        #-{3}
    """
    return _union(set1, *sets)


def intersection(set1, *sets) -> SetValue:
    """Returns a set containing only the elements that are members of all
    the given sets."""
    return _intersection(set1, *sets)


def difference(set1, *sets) -> SetValue:
    """Returns a set containing the elements of `set1` that are not
    elements of any of the following sets. Operands are processed from
    left to right."""
    return _difference(set1, *sets)


def symmetric_difference(set1, set2) -> SetValue:
    """Returns the elements found in `set1` or in `set2` but not in both."""
    return difference(union(set1, set2), intersection(set1, set2))
