"""Decks in a fixed order, for playing out known rounds."""

from __future__ import annotations

import random
from typing import Iterable

from .cards import Card, Deck, Rank, Suit

_SUITS = {
    "H": Suit.HEARTS,
    "S": Suit.SPADES,
    "C": Suit.CLUBS,
    "D": Suit.DIAMONDS,
}

_RANKS = {
    "A": Rank.ACE,
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
}


def _parse(layout: str) -> list[tuple[Suit, Rank]]:
    """Turn tokens such as ``"H10 SA CK"`` into (suit, rank) pairs."""
    return [(_SUITS[token[0]], _RANKS[token[1:]]) for token in layout.split()]


class StackedDeck(Deck):
    """A deck that always deals its cards in the order it was built with.

    Shuffling leaves the order alone, so rounds dealt from it are predictable.
    """

    def __init__(
        self,
        order: Iterable[tuple[Suit, Rank]],
        max_size: int = 52,
        name: str = "",
    ) -> None:
        self.name = name
        self.max_size = max_size
        self._order: tuple[tuple[Suit, Rank], ...] = tuple(order)
        self._cards: list[Card] = []
        self.reset()

    @property
    def cards(self) -> list[Card]:
        return list(self._cards)

    @property
    def cards_remaining(self) -> int:
        return len(self._cards)

    def reset(self) -> None:
        """Rebuild the deck, face down, in its fixed order."""
        self._cards = [Card(suit, rank) for suit, rank in self._order]

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Keep the fixed order; a stacked deck is never shuffled."""

    def draw_card(self, face_up: bool) -> Card:
        if not self._cards:
            raise IndexError("deck is empty")
        card = self._cards.pop(0)
        card.face_up = face_up
        return card


_BLACKJACK_WIN = """
    H10 S10 HA H7
    HJ H2 SA H3 S5 S6 D2
    DA H4 SJ H6 SK
    CK S2 CA S3 S9 H5
    H8 H9 HQ HK
    S4 S7 SQ S8
    C2 C3 C4 C5 C6 C7 C8 C9 C10 CJ CQ
    D3 D4 D5 D6 D7 D8 D9 D10 DJ DQ DK
"""

_BUST = """
    H5 HA H7 H2 HQ
    HK H3 H9 H4 H6
    H10 HJ C2 H8 S5 S6
    S2 S8 CA SJ SQ
    SK S3 S4 S7 S9 S10 SA
    C3 C4 C5 C6 C7 C8 C9 C10 CJ CQ CK
    DA D2 D3 D4 D5 D6 D7 D8 D9 D10 DJ DQ DK
"""

_PUSH = """
    H6 S4 HA H10 C3
    S3 H3 H7 S7 HJ HQ
    H9 C4 H4 H6 S8 S5 C6
    HK SK SA CA
    S2 S6 S9 S10 SJ SQ H8
    C2 C6 C7 C8 C9 C10 CJ CQ CK
    DA D2 D3 D4 D5 D6 D7 D8 D9 D10 DJ DQ DK
"""

_SURRENDER = """
    H5 H7 HA HJ
    H2 CA H4 SQ
    H6 H8 H9 H10
    S2 HQ HK SA
    S3 S4 S5 S6 S7 S8 S9 S10 SJ SK
    C2 C3 C4 C5 C6 C7 C8 C9 C10 CJ CQ CK
    DA D2 D3 D4 D5 D6 D7 D8 D9 D10 DJ DQ DK
"""


def blackjack_win_deck() -> StackedDeck:
    """Four rounds in which the player is dealt a natural and the dealer is not."""
    return StackedDeck(_parse(_BLACKJACK_WIN), name="BlackjackWinTestDeck")


def bust_deck() -> StackedDeck:
    """Rounds in which the player busts after hitting."""
    return StackedDeck(_parse(_BUST), name="BustTestDeck")


def push_deck() -> StackedDeck:
    """Rounds in which player and dealer finish level."""
    return StackedDeck(_parse(_PUSH), name="PushTestDeck")


def surrender_deck() -> StackedDeck:
    """Rounds in which the player may surrender against a ten or an ace showing."""
    return StackedDeck(_parse(_SURRENDER), name="SurrenderTestDeck")