import random

import pytest

from pitboss import rules
from pitboss.cards import Card, Dealer, Hand, Rank, Suit
from pitboss.stacked_decks import (
    StackedDeck,
    blackjack_win_deck,
    bust_deck,
    push_deck,
    surrender_deck,
)

ALL_DECKS = [blackjack_win_deck, bust_deck, push_deck, surrender_deck]


def _deal_round(deck):
    """Deal player, dealer hole card, player, dealer up card."""
    dealer = Dealer()
    player, house = Hand(), Hand()
    dealer.deal_card(player, deck, True)
    dealer.deal_card(house, deck, False)
    dealer.deal_card(player, deck, True)
    dealer.deal_card(house, deck, True)
    return player, house, dealer


def _identity(deck):
    return [(card.suit, card.rank) for card in deck.cards]


def test_blackjack_win_deck_top_cards():
    deck = blackjack_win_deck()
    drawn = [(c.suit, c.rank) for c in (deck.draw_card(True) for _ in range(4))]
    assert drawn == [
        (Suit.HEARTS, Rank.TEN),
        (Suit.SPADES, Rank.TEN),
        (Suit.HEARTS, Rank.ACE),
        (Suit.HEARTS, Rank.SEVEN),
    ]


def test_max_size_is_single_deck():
    decks = [blackjack_win_deck(), bust_deck(), push_deck(), surrender_deck()]
    assert [deck.max_size for deck in decks] == [52, 52, 52, 52]


def test_blackjack_and_bust_decks_hold_full_deck_without_duplicates():
    for factory in (blackjack_win_deck, bust_deck):
        deck = factory()
        ids = _identity(deck)
        assert deck.cards_remaining == deck.max_size
        assert len(set(ids)) == len(ids)


def test_push_deck_repeats_sixes_as_stacked():
    ids = _identity(push_deck())
    assert ids.count((Suit.HEARTS, Rank.SIX)) == 2
    assert ids.count((Suit.CLUBS, Rank.SIX)) == 2


def test_shuffle_keeps_order():
    for deck in (blackjack_win_deck(), bust_deck(), push_deck(), surrender_deck()):
        before = _identity(deck)
        deck.shuffle(random.Random(7))
        deck.shuffle()
        assert _identity(deck) == before


def test_reset_restores_order_and_count():
    for deck in (blackjack_win_deck(), bust_deck(), push_deck(), surrender_deck()):
        before = _identity(deck)
        count = deck.cards_remaining
        for _ in range(10):
            deck.draw_card(True)
        assert deck.cards_remaining == count - 10
        deck.reset()
        assert _identity(deck) == before
        assert deck.cards_remaining == count


def test_reset_gives_fresh_face_down_cards():
    deck = surrender_deck()
    first = deck.draw_card(True)
    deck.reset()
    again = deck.cards[0]
    assert again is not first
    assert again.face_up is False
    assert (again.suit, again.rank) == (first.suit, first.rank)


def test_draw_sets_face():
    deck = bust_deck()
    assert deck.draw_card(True).face_up is True
    assert deck.draw_card(False).face_up is False


def test_draw_from_empty_raises():
    deck = StackedDeck([(Suit.CLUBS, Rank.KING)])
    card = deck.draw_card(False)
    assert card.rank == Rank.KING
    with pytest.raises(IndexError):
        deck.draw_card(True)


def test_custom_order_is_dealt_in_sequence():
    order = [(Suit.DIAMONDS, Rank.TWO), (Suit.SPADES, Rank.QUEEN)]
    deck = StackedDeck(order, max_size=2, name="tiny")
    assert deck.name == "tiny"
    dealt = [(deck.draw_card(True).suit, deck.draw_card(True).rank)]
    assert dealt == [(Suit.DIAMONDS, Rank.QUEEN)]
    assert deck.cards_remaining == 0
    assert isinstance(StackedDeck(order).cards[0], Card)


def test_blackjack_win_first_round_player_natural():
    player, house, _ = _deal_round(blackjack_win_deck())
    assert rules.is_natural(player)
    assert not rules.is_natural(house)
    assert not rules.can_insure(house)


def test_bust_first_round_player_busts_on_hit():
    deck = bust_deck()
    player, house, dealer = _deal_round(deck)
    assert rules.can_hit(player)
    dealer.deal_card(player, deck, True)
    assert rules.is_bust(player)


def test_push_first_round_ends_level():
    deck = push_deck()
    player, house, dealer = _deal_round(deck)
    dealer.set_cards_face_up(house)
    while rules.can_draw(house):
        dealer.deal_card(house, deck, True)
    assert rules.is_push(player, house)


def test_surrender_first_round_allows_surrender():
    player, house, _ = _deal_round(surrender_deck())
    assert rules.can_surrender(player, house)
    assert rules.up_card_value(house) == 10


def test_not_time_to_shuffle_when_full():
    for factory in ALL_DECKS:
        assert not rules.is_time_to_shuffle(factory())