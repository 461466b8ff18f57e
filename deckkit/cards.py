"""
Immutable collections of playing cards.

Cards is an ordered sequence of Card. Every operation is non-destructive:
it leaves the receiver unchanged and returns new collections that share no
storage with the receiver or with each other.

Two empty states are kept apart:
  Cards()    nil, an absent collection
  Cards([])  empty, a collection with zero cards

Operations on nil give nil results, operations on empty give empty results.

    deck = new_piquet_pack().shuffle()

    # deal 5 cards in batches of 3 and 2
    hand1, talon = deck.take(3)
    hand2, talon = talon.take(3)
    hand1, talon = talon.move(2, hand1)
    hand2, talon = talon.move(2, hand2)

    hand1 = hand1.sort(by_suit.then(by_rank))
"""

from __future__ import annotations

import logging
import random
from functools import cmp_to_key
from typing import Callable, Iterable, Iterator, Optional, Union, overload

from deckkit.card import Card
from deckkit.notation import Notation, get_notation

logger = logging.getLogger(__name__)

RandomSource = Union[random.Random, int, None]


class Cards:
    """Zero or more playing cards, possibly nil."""

    __slots__ = ("_cards",)

    def __init__(self, cards: Optional[Iterable[int]] = None) -> None:
        if isinstance(cards, Cards):
            cards = cards._cards
        self._cards: Optional[list[Card]] = (
            None if cards is None else [Card(c) for c in cards]
        )

    @classmethod
    def from_str(cls, s: str, notation: Optional[Notation] = None) -> "Cards":
        """Parse cards like 'SA SK', 'SA,SK' or '[SA SK]'."""
        notation = notation or get_notation()
        return cls(Card.from_str(t, notation) for t in notation.tokens(s))

    # -- queries -----------------------------------------------------------

    @property
    def is_nil(self) -> bool:
        return self._cards is None

    @property
    def size(self) -> int:
        return len(self)

    def is_empty(self) -> bool:
        """True for nil and empty collections."""
        return len(self) == 0

    def any(self, p: Callable[[Card], bool]) -> bool:
        """True if p holds for at least one card; False on nil or empty."""
        for c in self:
            if p(c):
                return True
        return False

    def every(self, p: Callable[[Card], bool]) -> bool:
        """True if p holds for all cards; True on nil or empty."""
        for c in self:
            if not p(c):
                return False
        return True

    def include(self, *cards: int) -> bool:
        """True if every given card is present at least once.

        Duplicate arguments count as one card.
        """
        return set(cards) <= set(self)

    def has_duplicates(self) -> bool:
        """True if any card appears more than once."""
        seen: set[Card] = set()
        for c in self:
            if c in seen:
                return True
            seen.add(c)
        return False

    # -- transformations ---------------------------------------------------

    def clone(self) -> "Cards":
        return Cards(self._cards)

    def add(self, *cards: int) -> "Cards":
        """New cards with the given cards added on the bottom.

        With no arguments this is clone(), so nil stays nil.
        """
        if not cards:
            return self.clone()
        return Cards([*self, *cards])

    def filter(self, p: Callable[[Card], bool]) -> "Cards":
        """New cards holding the cards that satisfy p, in order."""
        if self._cards is None:
            return Cards()
        return Cards([c for c in self._cards if p(c)])

    def partition(self, p: Callable[[Card], bool]) -> tuple["Cards", "Cards"]:
        """Split into (satisfied, unsatisfied) in a single pass, in order."""
        if self._cards is None:
            return Cards(), Cards()
        satisfied: list[Card] = []
        unsatisfied: list[Card] = []
        for c in self._cards:
            if p(c):
                satisfied.append(c)
            else:
                unsatisfied.append(c)
        return Cards(satisfied), Cards(unsatisfied)

    def remove(self, *cards: int) -> "Cards":
        """New cards without any occurrence of the given cards."""
        excluded = frozenset(cards)
        return self.filter(lambda c: c not in excluded)

    def reverse(self) -> "Cards":
        if self._cards is None:
            return Cards()
        return Cards(reversed(self._cards))

    def shuffle(self, rng: RandomSource = None) -> "Cards":
        """New cards in a uniformly random order.

        rng may be a random.Random, an int seed, or None for the module-level
        generator of the random module.
        """
        res = self.clone()
        if res._cards is None:
            return res
        if isinstance(rng, int):
            logger.debug("shuffling %d cards with seed %d", len(res), rng)
            rng = random.Random(rng)
        if rng is None:
            random.shuffle(res._cards)
        else:
            rng.shuffle(res._cards)
        return res

    def sort(self, comparator: Callable[[Card, Card], int]) -> "Cards":
        """New cards sorted ascending by the comparator."""
        if self._cards is None:
            return Cards()
        return Cards(sorted(self._cards, key=cmp_to_key(comparator)))

    # -- splitting ---------------------------------------------------------

    def take(self, n: int) -> tuple["Cards", "Cards"]:
        """Split into (first n cards, remaining cards).

        n is clamped to [0, size].
        """
        return self._split_at(max(n, 0))

    def _split_at(self, n: int) -> tuple["Cards", "Cards"]:
        """Split into (upper, lower) at position n.

        A negative n counts from the bottom, so -1 leaves one card in lower.
        Out of range positions are clamped.
        """
        if self._cards is None:
            return Cards(), Cards()
        size = len(self._cards)
        if n < 0:
            n = size + n
        n = min(max(n, 0), size)
        return Cards(self._cards[:n]), Cards(self._cards[n:])

    def move(self, n: int, to: Optional[Iterable[int]]) -> tuple["Cards", "Cards"]:
        """Move the first n cards onto the bottom of `to`.

        Returns (new destination, remaining cards). A `to` of None is nil.
        """
        if not isinstance(to, Cards):
            to = Cards(to)
        taken, remaining = self.take(n)
        return to.add(*taken), remaining

    def top(self) -> tuple[Optional[Card], "Cards"]:
        """Return (top card, remaining cards).

        (None, nil) on nil and (None, empty) on empty.
        """
        if self._cards is None:
            return None, Cards()
        if not self._cards:
            return None, Cards([])
        return self._cards[0], Cards(self._cards[1:])

    def bottom(self) -> tuple["Cards", Optional[Card]]:
        """Return (remaining cards, bottom card).

        (nil, None) on nil and (empty, None) on empty.
        """
        if self._cards is None:
            return Cards(), None
        if not self._cards:
            return Cards([]), None
        return Cards(self._cards[:-1]), self._cards[-1]

    # -- sequence protocol -------------------------------------------------

    def to_list(self) -> list[Card]:
        return list(self)

    def __len__(self) -> int:
        return 0 if self._cards is None else len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(()) if self._cards is None else iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return self._cards is not None and card in self._cards

    @overload
    def __getitem__(self, index: int) -> Card: ...

    @overload
    def __getitem__(self, index: slice) -> "Cards": ...

    def __getitem__(self, index):
        cards = self._cards or []
        if isinstance(index, slice):
            return Cards(cards[index])
        return cards[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cards):
            return NotImplemented
        return self._cards == other._cards

    def __hash__(self) -> int:
        return hash(None if self._cards is None else tuple(self._cards))

    def __str__(self) -> str:
        return get_notation().cards(self._cards)

    def __repr__(self) -> str:
        if self._cards is None:
            return "Cards(None)"
        return f"Cards({get_notation().cards(self._cards)})"
