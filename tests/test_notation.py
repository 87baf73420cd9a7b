"""Tests for hand notation parsing.

Test coverage:
- Short form (rank + suit letter, T for ten)
- Glyph form (rank symbol or English name + suit glyph)
- Rejection of unknown tokens and wrong card counts
- Short-form rendering
"""

import pytest
from poker_hands.errors import MalformedNotation, PokerError
from poker_hands.rules import (
    Rank,
    Suit,
    Card,
    HandType,
    parse_card,
    parse_cards,
    parse_hand,
    format_card,
    format_cards,
    create_standard_deck,
)


class TestShortForm:
    """Test rank + suit letter tokens."""

    def test_letters(self):
        assert parse_card("Ah") == Card(Rank.ACE, Suit.HEARTS)
        assert parse_card("Kd") == Card(Rank.KING, Suit.DIAMONDS)
        assert parse_card("Qc") == Card(Rank.QUEEN, Suit.CLUBS)
        assert parse_card("Js") == Card(Rank.JACK, Suit.SPADES)

    def test_ten(self):
        assert parse_card("Th").rank == Rank.TEN
        assert parse_card("10h").rank == Rank.TEN

    def test_numerals(self):
        for value in range(2, 10):
            assert parse_card(f"{value}c").value == value

    def test_case_insensitive(self):
        assert parse_card("aH") == parse_card("Ah")
        assert parse_card("tS") == Card(Rank.TEN, Suit.SPADES)


class TestGlyphForm:
    """Test rank + suit glyph tokens."""

    def test_symbols(self):
        assert parse_card("A♥") == Card(Rank.ACE, Suit.HEARTS)
        assert parse_card("10♠") == Card(Rank.TEN, Suit.SPADES)
        assert parse_card("2♣") == Card(Rank.TWO, Suit.CLUBS)

    def test_names(self):
        assert parse_card("King♦") == Card(Rank.KING, Suit.DIAMONDS)
        assert parse_card("queen♣") == Card(Rank.QUEEN, Suit.CLUBS)
        assert parse_card("Ace♥") == Card(Rank.ACE, Suit.HEARTS)

    def test_round_trip_display(self):
        card = Card("J", "diamonds")
        assert parse_card(str(card)) == card

    def test_glyph_hand(self):
        h = parse_hand("A♥ K♥ Q♥ J♥ 10♥")
        assert h.hand_type == HandType.ROYAL_FLUSH

    def test_french_names(self):
        h = parse_hand("As♥ Roi♥ Dame♥ Valet♥ 10♥")
        assert h.hand_type == HandType.ROYAL_FLUSH
        assert parse_card("Roi♦") == Card(Rank.KING, Suit.DIAMONDS)
        assert parse_card("valet♣") == Card(Rank.JACK, Suit.CLUBS)
        # Short form is unaffected: "As" is still the ace of spades
        assert parse_card("As") == Card(Rank.ACE, Suit.SPADES)


class TestHandParsing:
    """Test whole-hand parsing."""

    def test_royal_flush(self):
        assert parse_hand("Ah Kh Qh Jh Th").hand_type == HandType.ROYAL_FLUSH

    def test_full_house(self):
        assert parse_hand("Ts Th Td 2c 2s").hand_type == HandType.FULL_HOUSE

    def test_commas_and_extra_whitespace(self):
        h = parse_hand("  Ah, Kh,Qh   Jh\tTh ")
        assert h.hand_type == HandType.ROYAL_FLUSH

    def test_mixed_forms(self):
        assert parse_hand("Ah K♥ Queen♥ Jh 10♥").hand_type == HandType.ROYAL_FLUSH

    @pytest.mark.parametrize("text", ["", "Ah Kh Qh Jh", "Ah Kh Qh Jh Th 9h"])
    def test_wrong_count_rejected(self, text):
        with pytest.raises(MalformedNotation):
            parse_hand(text)

    @pytest.mark.parametrize("token", ["1h", "Ax", "Zz", "A", "11s", "h", "Kingx", "A♡"])
    def test_bad_tokens_rejected(self, token):
        with pytest.raises(MalformedNotation):
            parse_card(token)

    def test_bad_token_in_hand_rejected(self):
        with pytest.raises(MalformedNotation):
            parse_hand("Ah Kh Qh Jh Xh")

    def test_malformed_is_poker_error(self):
        with pytest.raises(PokerError):
            parse_hand("nonsense")

    def test_parse_cards_any_count(self):
        assert len(parse_cards("Ah Kd")) == 2
        assert parse_cards("") == []


class TestFormatting:
    """Test short-form rendering."""

    def test_format_card(self):
        assert format_card(Card("10", "hearts")) == "Th"
        assert format_card(Card("A", "spades")) == "As"

    def test_format_cards_parses_back(self):
        deck = create_standard_deck()
        assert parse_cards(format_cards(deck)) == deck

    def test_format_hand_cards(self):
        h = parse_hand("2d 3d 4d 5d Ad")
        assert format_cards(h.cards) == "Ad 5d 4d 3d 2d"
