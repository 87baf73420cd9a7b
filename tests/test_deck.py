"""Tests for the deck.

Tests cover:
- Standard deck contents and canonical order
- Fisher-Yates shuffle: permutation property and seeded determinism
- Dealing: shrinking, disjointness, insufficient cards
- deal_hands helper and seeding utilities
"""

import random
from collections import Counter

import numpy as np
import pytest

from poker_hands import set_seed, make_rng
from poker_hands.engine import Deck, DECK_SIZE, shuffle_deck, deal_cards, deal_hands
from poker_hands.errors import InsufficientCards, PokerError
from poker_hands.rules import Card, Hand, Rank, Suit, create_standard_deck


class TestStandardDeck:
    """Tests for deck construction."""

    def test_has_52_cards(self):
        deck = Deck.standard()
        assert len(deck) == DECK_SIZE == 52

    def test_no_duplicates(self):
        cards = Deck.standard().cards
        assert len(set(cards)) == 52
        assert len({(c.rank, c.suit) for c in cards}) == 52

    def test_canonical_order_is_deterministic(self):
        assert Deck.standard().cards == Deck.standard().cards
        cards = Deck.standard().cards
        assert cards[0] == Card(Rank.TWO, Suit.HEARTS)
        assert cards[12] == Card(Rank.ACE, Suit.HEARTS)
        assert cards[-1] == Card(Rank.ACE, Suit.SPADES)

    def test_default_constructor_is_full(self):
        assert Deck().cards == create_standard_deck()

    def test_cards_is_a_copy(self):
        deck = Deck.standard()
        cards = deck.cards
        cards.pop()
        assert len(deck) == 52

    def test_iteration(self):
        assert list(Deck.standard()) == create_standard_deck()


class TestShuffle:
    """Tests for Fisher-Yates shuffling."""

    def test_shuffle_is_permutation(self):
        deck = Deck.standard().shuffle(make_rng(7))
        assert len(deck) == 52
        assert Counter(deck.cards) == Counter(create_standard_deck())

    def test_shuffle_returns_same_deck(self):
        deck = Deck.standard()
        assert deck.shuffle(make_rng(1)) is deck

    def test_shuffle_changes_order(self):
        deck = Deck.standard().shuffle(make_rng(12345))
        assert deck.cards != create_standard_deck()

    def test_same_seed_same_order(self):
        deck1 = Deck.standard().shuffle(np.random.default_rng(42))
        deck2 = Deck.standard().shuffle(np.random.default_rng(42))
        assert deck1.cards == deck2.cards

    def test_different_seeds_differ(self):
        deck1 = Deck.standard().shuffle(make_rng(1))
        deck2 = Deck.standard().shuffle(make_rng(2))
        assert deck1.cards != deck2.cards

    def test_unseeded_shuffle_is_permutation(self):
        deck = Deck.standard().shuffle()
        assert sorted(deck.cards) == sorted(create_standard_deck())

    def test_fisher_yates_swap_sequence(self):
        """Replaying the generator's draws reproduces the shuffle."""
        cards = ["a", "b", "c", "d", "e"]
        deck = Deck(cards).shuffle(make_rng(3))

        rng = make_rng(3)
        expected = list(cards)
        for i in range(len(expected) - 1, 0, -1):
            j = int(rng.integers(0, i + 1))
            expected[i], expected[j] = expected[j], expected[i]
        assert deck.cards == expected

    def test_small_decks(self):
        assert Deck([]).shuffle(make_rng(0)).cards == []
        single = Card("A", "hearts")
        assert Deck([single]).shuffle(make_rng(0)).cards == [single]

    def test_function_form(self):
        deck = Deck.standard()
        assert shuffle_deck(deck, make_rng(5)) is deck
        assert deck.cards == Deck.standard().shuffle(make_rng(5)).cards


class TestDeal:
    """Tests for dealing."""

    def test_deal_removes_prefix(self):
        deck = Deck.standard()
        expected = deck.cards[:5]
        dealt = deck.deal(5)
        assert dealt == expected
        assert len(deck) == 47

    def test_dealt_cards_disjoint_from_rest(self):
        deck = Deck.standard().shuffle(make_rng(9))
        dealt = deck.deal(10)
        assert len(dealt) == 10
        assert not set(dealt) & set(deck.cards)

    def test_deal_all(self):
        deck = Deck.standard()
        assert len(deck.deal(52)) == 52
        assert len(deck) == 0

    def test_deal_zero(self):
        deck = Deck.standard()
        assert deck.deal(0) == []
        assert len(deck) == 52

    def test_deal_too_many(self):
        deck = Deck.standard()
        with pytest.raises(InsufficientCards) as excinfo:
            deck.deal(53)
        assert excinfo.value.requested == 53
        assert excinfo.value.remaining == 52
        assert len(deck) == 52

    def test_deal_after_shrinking(self):
        deck = Deck.standard()
        deck.deal(50)
        with pytest.raises(InsufficientCards):
            deck.deal(3)
        assert len(deck.deal(2)) == 2

    def test_insufficient_cards_is_poker_error(self):
        with pytest.raises(PokerError):
            Deck([]).deal(1)

    def test_negative_deal_rejected(self):
        with pytest.raises(ValueError):
            Deck.standard().deal(-1)

    def test_function_form(self):
        deck = Deck.standard()
        assert len(deal_cards(deck, 3)) == 3
        assert len(deck) == 49


class TestDealHands:
    """Tests for dealing classified hands."""

    def test_two_hands(self):
        deck = Deck.standard().shuffle(make_rng(42))
        hands = deal_hands(deck, 2)
        assert len(hands) == 2
        assert all(isinstance(h, Hand) for h in hands)
        assert len(deck) == 42
        assert not set(hands[0].cards) & set(hands[1].cards)

    def test_deterministic_with_seed(self):
        hands1 = deal_hands(Deck.standard().shuffle(make_rng(8)), 3)
        hands2 = deal_hands(Deck.standard().shuffle(make_rng(8)), 3)
        assert hands1 == hands2

    def test_unshuffled_deck(self):
        hands = deal_hands(Deck.standard(), 1)
        # 2-6 of hearts
        assert hands[0].category == "Straight Flush"
        assert hands[0].tiebreak == (6,)

    def test_too_many_hands_deals_nothing(self):
        deck = Deck.standard()
        with pytest.raises(InsufficientCards):
            deal_hands(deck, 11)
        assert len(deck) == 52


class TestSeeding:
    """Tests for seeding utilities."""

    def test_set_seed_returns_seed(self):
        assert set_seed(42) == 42

    def test_set_seed_generates_seed(self):
        seed = set_seed()
        assert 0 <= seed <= 2**32 - 1

    def test_set_seed_is_reproducible(self):
        set_seed(123)
        a = (random.random(), np.random.rand())
        set_seed(123)
        b = (random.random(), np.random.rand())
        assert a == b

    def test_make_rng_seeded(self):
        assert make_rng(5).integers(0, 1000) == make_rng(5).integers(0, 1000)
