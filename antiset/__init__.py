"""Set algebra over finite sets and anti-sets.

An anti-set is the universe minus a finite set of elements. Finite sets are
plain ``set``/``frozenset`` objects; the functions of this package accept
any mix of the two representations and always return one of them.
"""
from antiset.anti_set import AntiSet
from antiset.errors import InvalidSetError, UnsupportedOperationError
from antiset.complement import (EMPTY, UNIVERSE, NegatedPredicate,
                                complement, contains)
from antiset.set_kind import SetKind, SetPair, classify
from antiset.algebra import (difference, intersection, symmetric_difference,
                             union)
from antiset.predicates import (disjoint, intersect, proper_subset,
                                proper_superset, subset, superset)

__all__ = ["AntiSet", "NegatedPredicate", "EMPTY", "UNIVERSE",
           "complement", "contains", "union", "intersection", "difference",
           "symmetric_difference", "subset", "superset", "proper_subset",
           "proper_superset", "intersect", "disjoint", "SetKind", "SetPair",
           "classify", "UnsupportedOperationError", "InvalidSetError"]

__version__ = "1.0"
