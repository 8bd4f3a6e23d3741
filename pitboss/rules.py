"""Blackjack rules: hand values, outcomes and which plays are allowed."""

from __future__ import annotations

from .cards import Deck, Hand, Rank

BLACKJACK = 21
DEALER_STANDS_ON = 17
_ACE_BONUS = 10


def _count(hand: Hand) -> tuple[int, int]:
    """Return the best total and how many aces count eleven in it."""
    cards = hand.cards
    total = sum(card.value for card in cards)
    aces = sum(1 for card in cards if card.rank == Rank.ACE)
    soft = 0
    while aces and total + _ACE_BONUS <= BLACKJACK:
        total += _ACE_BONUS
        aces -= 1
        soft += 1
    return total, soft


def hand_value(hand: Hand) -> int:
    """Best total of ``hand``, counting aces as eleven where that does not bust."""
    return _count(hand)[0]


def is_hard_value(hand: Hand) -> bool:
    """Whether no ace in ``hand`` is counted as eleven."""
    return _count(hand)[1] == 0


def up_card_value(dealer_hand: Hand) -> int:
    """Value of the first face-up card, or 0 if none is showing."""
    return next((card.value for card in dealer_hand.cards if card.face_up), 0)


def is_surrendered(hand: Hand) -> bool:
    return hand.surrendered


def is_21(hand: Hand) -> bool:
    return hand_value(hand) == BLACKJACK


def is_natural(hand: Hand) -> bool:
    return hand_value(hand) == BLACKJACK and hand.size == 2


def is_bust(hand: Hand) -> bool:
    return hand_value(hand) > BLACKJACK


def is_push(hand_a: Hand, hand_b: Hand) -> bool:
    return not is_bust(hand_a) and not is_bust(hand_b) and hand_value(hand_a) == hand_value(hand_b)


def is_win(hand_a: Hand, hand_b: Hand) -> bool:
    """Whether ``hand_a`` beats ``hand_b``."""
    if is_bust(hand_a):
        return False
    return is_bust(hand_b) or hand_value(hand_a) > hand_value(hand_b)


def is_time_to_shuffle(deck: Deck) -> bool:
    return deck.cards_remaining < deck.max_size // 2


def can_draw(dealer_hand: Hand) -> bool:
    """Dealer draws below 17 and on a soft 17."""
    value = hand_value(dealer_hand)
    return value < DEALER_STANDS_ON or (value == DEALER_STANDS_ON and not is_hard_value(dealer_hand))


def can_hit(hand: Hand) -> bool:
    return hand_value(hand) < BLACKJACK


def can_stand(hand: Hand) -> bool:
    """Standing is allowed on any hand, whatever its total."""
    return hand_value(hand) >= 0


def can_split(hand: Hand) -> bool:
    if hand.size != 2:
        return False
    first, second = hand.cards
    return first.value == second.value


def can_surrender(player_hand: Hand, dealer_hand: Hand) -> bool:
    """Two-card non-21 hand against a dealer showing ten or eleven without 21."""
    return (
        player_hand.size == 2
        and hand_value(player_hand) != BLACKJACK
        and up_card_value(dealer_hand) in (10, 11)
        and not is_21(dealer_hand)
    )


def can_insure(dealer_hand: Hand) -> bool:
    """Whether the dealer's hole card is down and the second card is an ace showing."""
    hole, up = dealer_hand.cards[:2]
    return not hole.face_up and up.face_up and up.rank == Rank.ACE


def can_double_down(hand: Hand) -> bool:
    return hand.size == 2 and hand_value(hand) < BLACKJACK