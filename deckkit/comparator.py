"""
Composable card comparators.

A comparator returns a negative number if c1 sorts before c2, a positive
number if after, and 0 if they are equal in its intended order.

    hand.sort(by_suit.then(by_rank.reversed()))
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable

from deckkit.card import Card

ComparatorFunc = Callable[[Card, Card], int]


class Comparator:
    """A function (Card, Card) -> int supporting order composition."""

    __slots__ = ("_fn",)

    def __init__(self, fn: ComparatorFunc) -> None:
        self._fn = fn

    def __call__(self, c1: Card, c2: Card) -> int:
        return self._fn(c1, c2)

    def reversed(self) -> "Comparator":
        """Negate the result, giving the opposite order."""
        return Comparator(lambda c1, c2: -self(c1, c2))

    def then(self, other: ComparatorFunc) -> "Comparator":
        """Break ties of this comparator with other."""
        def chained(c1: Card, c2: Card) -> int:
            o = self(c1, c2)
            if o != 0:
                return o
            return other(c1, c2)
        return Comparator(chained)

    def key(self) -> Callable[[Card], Any]:
        """Key function for sorted() / list.sort()."""
        return cmp_to_key(self._fn)

    def __repr__(self) -> str:
        return f"Comparator({self._fn!r})"


# ---------------------------------------------------------------------------
# Common comparators (ascending)
# ---------------------------------------------------------------------------

by_suit = Comparator(lambda c1, c2: int(c1.suit) - int(c2.suit))
by_rank = Comparator(lambda c1, c2: int(c1.rank) - int(c2.rank))
by_ordinal = Comparator(lambda c1, c2: int(c1) - int(c2))
