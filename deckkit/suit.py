"""
Card suits.

  clubs=0, diamonds=1, hearts=2, spades=3

Any integer can be held in a Suit; only 0..3 are valid. The shorthand
symbol of a suit comes from the current notation (see deckkit.notation).
"""

from __future__ import annotations

from deckkit.notation import get_notation

NUM_SUITS = 4

SUIT_NAMES = ["Club", "Diamond", "Heart", "Spade"]


class Suit(int):
    """A card suit, ordered Club < Diamond < Heart < Spade."""

    __slots__ = ()

    def is_valid(self) -> bool:
        return 0 <= self < NUM_SUITS

    @property
    def name(self) -> str:
        """Full written name of the suit, e.g. 'Spade'."""
        if self.is_valid():
            return SUIT_NAMES[self]
        return f"Invalid Suit({int(self)})"

    def __str__(self) -> str:
        return get_notation().suit(self)

    def __repr__(self) -> str:
        return f"Suit({int(self)})"


CLUB = Suit(0)
DIAMOND = Suit(1)
HEART = Suit(2)
SPADE = Suit(3)

SUITS = (CLUB, DIAMOND, HEART, SPADE)
