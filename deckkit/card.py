"""
Single playing cards.

Cards use a compact integer encoding:
  card = suit * 13 + rank  (0..51)

  suit: clubs=0, diamonds=1, hearts=2, spades=3
  rank: A=0, 2=1, ..., T=9, J=10, Q=11, K=12

Ordinal 52 is the invalid card returned by Card.of() for a bad suit or rank.
Every ordinal from 52 up decomposes to an invalid suit.
"""

from __future__ import annotations

from typing import Optional

from deckkit.notation import Notation, get_notation
from deckkit.rank import NUM_RANKS, Rank, rank_from_str
from deckkit.suit import NUM_SUITS, Suit


class Card(int):
    """A single playing card."""

    __slots__ = ()

    @classmethod
    def of(cls, suit: int, rank: int) -> "Card":
        """Compose a card from a suit and a rank.

        Returns INVALID_CARD if either one is invalid.
        """
        suit, rank = Suit(suit), Rank(rank)
        if suit.is_valid() and rank.is_valid():
            return cls(suit * NUM_RANKS + rank)
        return cls(NUM_SUITS * NUM_RANKS)

    @classmethod
    def from_str(cls, s: str, notation: Optional[Notation] = None) -> "Card":
        """Parse a shorthand string like 'SA', 'hT' or 'D10'."""
        notation = notation or get_notation()
        suit, rank_text = notation.split_card(s)
        try:
            rank = rank_from_str(rank_text)
        except ValueError as e:
            raise ValueError(f"Invalid card string '{s}': {e}") from e
        return cls.of(suit, rank)

    @property
    def suit(self) -> Suit:
        """Suit of the card; invalid cards always give an invalid suit."""
        return Suit(self // NUM_RANKS)

    @property
    def rank(self) -> Rank:
        """Rank of the card; only meaningful when the card is valid."""
        return Rank(self % NUM_RANKS)

    def is_valid(self) -> bool:
        # the rank is always in range, so the suit decides
        return self.suit.is_valid()

    @property
    def name(self) -> str:
        """Full written name, e.g. 'Ace of Spades'."""
        if self.is_valid():
            return f"{self.rank.name} of {self.suit.name}s"
        return f"Invalid Card({int(self)})"

    def __str__(self) -> str:
        return get_notation().card(self)

    def __repr__(self) -> str:
        return f"Card({int(self)})"


INVALID_CARD = Card(NUM_SUITS * NUM_RANKS)

CA, C2, C3, C4, C5, C6, C7, C8, C9, CT, CJ, CQ, CK = (Card(i) for i in range(0, 13))
DA, D2, D3, D4, D5, D6, D7, D8, D9, DT, DJ, DQ, DK = (Card(i) for i in range(13, 26))
HA, H2, H3, H4, H5, H6, H7, H8, H9, HT, HJ, HQ, HK = (Card(i) for i in range(26, 39))
SA, S2, S3, S4, S5, S6, S7, S8, S9, ST, SJ, SQ, SK = (Card(i) for i in range(39, 52))
