"""
Standard deck and piquet pack.

Builders return cards in the order of a freshly opened pack: hearts and
clubs ascending Ace to King, then diamonds and spades descending King to Ace.
Recognizers ignore order and only check size, duplicates and membership.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from deckkit.card import (
    CA, C2, C3, C4, C5, C6, C7, C8, C9, CT, CJ, CQ, CK,
    DA, D2, D3, D4, D5, D6, D7, D8, D9, DT, DJ, DQ, DK,
    HA, H2, H3, H4, H5, H6, H7, H8, H9, HT, HJ, HQ, HK,
    SA, S2, S3, S4, S5, S6, S7, S8, S9, ST, SJ, SQ, SK,
    Card,
)
from deckkit.cards import Cards
from deckkit.rank import SIX, TWO

logger = logging.getLogger(__name__)

STANDARD_DECK_SIZE = 52
PIQUET_PACK_SIZE = 32

STANDARD_DECK_ORDER = (
    HA, H2, H3, H4, H5, H6, H7, H8, H9, HT, HJ, HQ, HK,
    CA, C2, C3, C4, C5, C6, C7, C8, C9, CT, CJ, CQ, CK,
    DK, DQ, DJ, DT, D9, D8, D7, D6, D5, D4, D3, D2, DA,
    SK, SQ, SJ, ST, S9, S8, S7, S6, S5, S4, S3, S2, SA,
)

PIQUET_PACK_ORDER = (
    HA, H7, H8, H9, HT, HJ, HQ, HK,
    CA, C7, C8, C9, CT, CJ, CQ, CK,
    DK, DQ, DJ, DT, D9, D8, D7, DA,
    SK, SQ, SJ, ST, S9, S8, S7, SA,
)


def new_standard_deck() -> Cards:
    """A standard 52-card deck, 4 suits of 13 ranks each."""
    return Cards(STANDARD_DECK_ORDER)


def new_piquet_pack() -> Cards:
    """A 32-card piquet pack, without ranks 2 through 6."""
    return Cards(PIQUET_PACK_ORDER)


def is_piquet_card(card: int) -> bool:
    """True for valid cards whose rank is not 2 through 6."""
    card = Card(card)
    if not card.is_valid():
        return False
    return not (TWO <= card.rank <= SIX)


def is_standard_deck(cards: Optional[Iterable[int]]) -> bool:
    return _is_pack(cards, "standard deck", STANDARD_DECK_SIZE, lambda c: c.is_valid())


def is_piquet_pack(cards: Optional[Iterable[int]]) -> bool:
    return _is_pack(cards, "piquet pack", PIQUET_PACK_SIZE, is_piquet_card)


def _is_pack(
    cards: Optional[Iterable[int]],
    kind: str,
    size: int,
    belongs: Callable[[Card], bool],
) -> bool:
    cs = cards if isinstance(cards, Cards) else Cards(cards)
    if cs.size != size:
        logger.debug("not a %s: %d cards, want %d", kind, cs.size, size)
        return False
    if cs.has_duplicates():
        logger.debug("not a %s: duplicate cards", kind)
        return False
    if not cs.every(belongs):
        logger.debug("not a %s: holds cards that do not belong", kind)
        return False
    return True
