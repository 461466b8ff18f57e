"""
Composable card predicates.

    is_high = rank_is(JACK, QUEEN, KING)
    hand.filter(is_high & ~suit_is(SPADE))
"""

from __future__ import annotations

from typing import Callable

from deckkit.card import Card
from deckkit.suit import CLUB, DIAMOND, HEART, SPADE

PredicateFunc = Callable[[Card], bool]


class Predicate:
    """A function Card -> bool supporting logical composition."""

    __slots__ = ("_fn",)

    def __init__(self, fn: PredicateFunc) -> None:
        self._fn = fn

    def __call__(self, card: Card) -> bool:
        return bool(self._fn(card))

    def and_(self, other: PredicateFunc) -> "Predicate":
        """Logical AND; other is only evaluated when this one holds."""
        return Predicate(lambda c: self(c) and bool(other(c)))

    def or_(self, other: PredicateFunc) -> "Predicate":
        """Logical OR; other is only evaluated when this one fails."""
        return Predicate(lambda c: self(c) or bool(other(c)))

    def not_(self) -> "Predicate":
        return Predicate(lambda c: not self(c))

    __and__ = and_
    __or__ = or_
    __invert__ = not_

    def __repr__(self) -> str:
        return f"Predicate({self._fn!r})"


# ---------------------------------------------------------------------------
# Common predicates
# ---------------------------------------------------------------------------

is_valid = Predicate(lambda c: c.is_valid())


def suit_is(*suits: int) -> Predicate:
    """Holds for valid cards of any of the given suits."""
    wanted = frozenset(suits)
    return Predicate(lambda c: c.is_valid() and c.suit in wanted)


def rank_is(*ranks: int) -> Predicate:
    """Holds for valid cards of any of the given ranks."""
    wanted = frozenset(ranks)
    return Predicate(lambda c: c.is_valid() and c.rank in wanted)


is_red = suit_is(DIAMOND, HEART)
is_black = suit_is(CLUB, SPADE)
