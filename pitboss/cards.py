"""Cards, decks, hands and the dealer who moves cards between them."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, IntEnum


class Suit(Enum):
    HEARTS = "Hearts"
    SPADES = "Spades"
    CLUBS = "Clubs"
    DIAMONDS = "Diamonds"


class Rank(IntEnum):
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


@dataclass(eq=False)
class Card:
    """A playing card; aces count one and face cards ten."""

    suit: Suit
    rank: Rank
    face_up: bool = False

    @property
    def value(self) -> int:
        return min(int(self.rank), 10)


class Deck(ABC):
    """A source of cards drawn from the top."""

    max_size: int

    @abstractmethod
    def reset(self) -> None:
        """Restore the deck to its full starting order."""

    @abstractmethod
    def shuffle(self, rng: random.Random | None = None) -> None:
        """Reorder the remaining cards."""

    @abstractmethod
    def draw_card(self, face_up: bool) -> Card:
        """Remove the top card, turned the given way."""

    @property
    @abstractmethod
    def cards_remaining(self) -> int:
        """Number of cards still in the deck."""


class DoubleDeck(Deck):
    """Two standard 52-card decks in one shoe."""

    max_size = 104
    SHUFFLE_SWAPS = 1000

    def __init__(self) -> None:
        self._cards: list[Card] = []
        self.reset()

    @property
    def cards(self) -> list[Card]:
        return list(self._cards)

    @property
    def cards_remaining(self) -> int:
        return len(self._cards)

    def reset(self) -> None:
        self._cards = [
            Card(suit, rank)
            for _ in range(2)
            for suit in Suit
            for rank in Rank
        ]

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Swap randomly chosen pairs of cards a thousand times."""
        if not self._cards:
            return
        rng = rng if rng is not None else random.Random()
        size = len(self._cards)
        cards = self._cards
        for _ in range(self.SHUFFLE_SWAPS):
            i = rng.randrange(size)
            j = rng.randrange(size)
            cards[i], cards[j] = cards[j], cards[i]

    def draw_card(self, face_up: bool) -> Card:
        if not self._cards:
            raise IndexError("deck is empty")
        card = self._cards.pop(0)
        card.face_up = face_up
        return card


class Hand:
    """The cards held by one player or the dealer, with the stake on them."""

    def __init__(self) -> None:
        self._cards: list[Card] = []
        self.wager = 0
        self.surrendered = False

    @property
    def cards(self) -> list[Card]:
        return list(self._cards)

    @property
    def size(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def receive_card(self, card: Card) -> None:
        self._cards.append(card)

    def remove_card(self) -> Card:
        """Take back the most recently received card."""
        if not self._cards:
            raise IndexError("cannot remove a card from an empty hand")
        return self._cards.pop()

    def clear(self) -> None:
        self._cards.clear()

    def has_ace_up(self) -> bool:
        return any(card.rank == Rank.ACE and card.face_up for card in self._cards)


class Dealer:
    """Moves cards from a deck into hands and turns them over."""

    def deal_card(self, hand: Hand, deck: Deck, face_up: bool) -> None:
        hand.receive_card(deck.draw_card(face_up))

    def set_cards_face_up(self, hand: Hand) -> None:
        for card in hand.cards:
            card.face_up = True