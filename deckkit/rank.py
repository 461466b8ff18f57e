"""
Card ranks.

A rank is a small integer ordinal:
  Ace=0, Two=1, ..., Ten=9, Jack=10, Queen=11, King=12

Any integer can be held in a Rank; only 0..12 are valid.
"""

from __future__ import annotations

NUM_RANKS = 13

RANK_CHARS = "A23456789TJQK"

RANK_NAMES = [
    "Ace", "Two", "Three", "Four", "Five", "Six", "Seven",
    "Eight", "Nine", "Ten", "Jack", "Queen", "King",
]


class Rank(int):
    """A card rank, ordered Ace < Two < ... < King."""

    __slots__ = ()

    def is_valid(self) -> bool:
        return 0 <= self < NUM_RANKS

    @property
    def name(self) -> str:
        """Full written name of the rank, e.g. 'Queen'."""
        if self.is_valid():
            return RANK_NAMES[self]
        return f"Invalid Rank({int(self)})"

    def __str__(self) -> str:
        if self.is_valid():
            return RANK_CHARS[self]
        return f"!({int(self)})"

    def __repr__(self) -> str:
        return f"Rank({int(self)})"


ACE = Rank(0)
TWO = Rank(1)
THREE = Rank(2)
FOUR = Rank(3)
FIVE = Rank(4)
SIX = Rank(5)
SEVEN = Rank(6)
EIGHT = Rank(7)
NINE = Rank(8)
TEN = Rank(9)
JACK = Rank(10)
QUEEN = Rank(11)
KING = Rank(12)

RANKS = (ACE, TWO, THREE, FOUR, FIVE, SIX, SEVEN, EIGHT, NINE, TEN, JACK, QUEEN, KING)


def rank_from_str(s: str) -> Rank:
    """Parse a rank character like 'A', 't' or '10'."""
    ch = s.upper()
    if ch == "10":
        ch = "T"
    if len(ch) != 1 or ch not in RANK_CHARS:
        raise ValueError(f"Invalid rank '{s}', expected one of {RANK_CHARS}")
    return Rank(RANK_CHARS.index(ch))
