import logging
from typing import Callable, FrozenSet, Union

from antiset.anti_set import AntiSet
from antiset.finite import coerce

SetValue = Union[FrozenSet, AntiSet]


class SetFold:
    """Left-to-right reduction of a binary set operation over any number of
    operands.

    `absorbing` is the value that fixes the result of `operation` once the
    accumulator reaches it (the universe for unions, the empty set for
    intersections and differences). When that happens the fold stops and
    the remaining operands are never looked at.
    """

    def __init__(self, operation: Callable[[SetValue, SetValue], SetValue],
                 absorbing: SetValue, name: str = None,
                 log: logging.Logger = None):
        self.operation = operation
        self.absorbing = absorbing
        self.name = name or getattr(operation, "__name__", "fold")
        if log is None:
            self.log = logging.getLogger(__name__)
        else:
            self.log = log

    def __call__(self, first, *others) -> SetValue:
        """Folds `operation` over `first` and `others`.

        Parameters
        ----------
        first
            the initial accumulator, a finite set or an `AntiSet`
        others
            operands combined with the accumulator one by one

        Returns
        -------
        SetValue
            the folded value; finite results are frozensets
        """
        result = coerce(first)
        for position, operand in enumerate(others):
            if result == self.absorbing:
                self.log.debug("%s reached %r after %d operand(s), "
                               "skipping the remaining %d", self.name,
                               result, position + 1,
                               len(others) - position)
                return result
            result = self.operation(result, operand)
        return result
