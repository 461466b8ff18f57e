"""
Shorthand notation for suits, cards and collections of cards.

A Notation holds the four suit symbols (club, diamond, heart, spade order)
used to render and parse shorthand strings such as 'SA' or '[SA SK]'.

Notations can be passed around explicitly. The process-wide current notation
is what str() uses on Suit, Card and Cards; replacing it is not synchronized,
so configure it once at startup or serialize writers yourself.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from deckkit.rank import NUM_RANKS, Rank

logger = logging.getLogger(__name__)

DEFAULT_SUIT_SYMBOLS = ("C", "D", "H", "S")
UNICODE_SUIT_SYMBOLS = ("♣", "♦", "♥", "♠")


@dataclass(frozen=True)
class Notation:
    """Suit symbols used for shorthand rendering and parsing."""

    suit_symbols: tuple[str, str, str, str] = DEFAULT_SUIT_SYMBOLS

    def __post_init__(self) -> None:
        symbols = tuple(self.suit_symbols)
        if len(symbols) != 4:
            raise ValueError(
                f"Expected 4 suit symbols (club, diamond, heart, spade), got {len(symbols)}"
            )
        for sym in symbols:
            if not isinstance(sym, str):
                raise ValueError(f"Invalid suit symbol {sym!r}, must be a string")
        object.__setattr__(self, "suit_symbols", symbols)

    @classmethod
    def default(cls) -> "Notation":
        return cls()

    @classmethod
    def unicode(cls) -> "Notation":
        """Preset rendering suits as ♣ ♦ ♥ ♠."""
        return cls(UNICODE_SUIT_SYMBOLS)

    # -- rendering ---------------------------------------------------------

    def suit(self, suit: int) -> str:
        if 0 <= suit < len(self.suit_symbols):
            return self.suit_symbols[suit]
        return f"!({int(suit)})"

    def rank(self, rank: int) -> str:
        return str(Rank(rank))

    def card(self, card: int) -> str:
        """Suit symbol followed by rank character, e.g. 'SA'.

        Invalid cards keep the same arithmetic, so Card(52) is '!(4)A'.
        """
        return self.suit(card // NUM_RANKS) + self.rank(card % NUM_RANKS)

    def cards(self, cards: Iterable[int] | None) -> str:
        """Bracketed, space-separated shorthand, e.g. '[SA SK]'."""
        if cards is None:
            return "[]"
        return "[" + " ".join(self.card(c) for c in cards) + "]"

    # -- parsing -----------------------------------------------------------

    def split_card(self, s: str) -> tuple[int, str]:
        """Split a card string into (suit ordinal, rank text).

        The longest matching suit symbol wins; matching ignores case.
        Empty symbols render fine but are never matched here.
        """
        text = s.strip()
        best = -1
        best_len = 0
        for ordinal, sym in enumerate(self.suit_symbols):
            if sym and len(sym) > best_len and text.upper().startswith(sym.upper()):
                best, best_len = ordinal, len(sym)
        if best < 0:
            raise ValueError(
                f"Invalid card string '{s}', must start with one of {list(self.suit_symbols)}"
            )
        return best, text[best_len:]

    def tokens(self, s: str) -> list[str]:
        """Split a card list like '[SA SK]' or 'SA,SK' into card tokens."""
        s = s.strip()
        if s.startswith("[") and s.endswith("]"):
            s = s[1:-1]
        return s.replace(",", " ").split()


# ---------------------------------------------------------------------------
# Process-wide notation
# ---------------------------------------------------------------------------

_current = Notation()


def get_notation() -> Notation:
    return _current


def set_notation(notation: Notation) -> None:
    """Replace the notation used by str() everywhere in the process."""
    global _current
    logger.debug("suit symbols changed from %s to %s", _current.suit_symbols, notation.suit_symbols)
    _current = notation


def set_suit_symbols(symbols: Sequence[str]) -> None:
    """Shortcut for set_notation(Notation(tuple(symbols)))."""
    set_notation(Notation(tuple(symbols)))


@contextmanager
def using_notation(notation: Notation) -> Iterator[Notation]:
    """Temporarily switch the process-wide notation."""
    previous = get_notation()
    set_notation(notation)
    try:
        yield notation
    finally:
        set_notation(previous)
