"""Tests for Card and Deck classes."""

import pytest
from random import Random

from blackjack.cards import Card, Deck, Rank, Suit, no_shuffle, random_shuffle
from blackjack.errors import DeckExhaustedError


class TestCard:
    """Tests for the Card class."""

    def test_card_creation(self):
        """Test creating a card."""
        card = Card(Rank.ACE, Suit.SPADES)
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES

    def test_card_immutability(self):
        """Test that cards are immutable."""
        card = Card(Rank.ACE, Suit.SPADES)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING

    def test_structural_equality(self):
        """Cards with the same rank and suit are equal."""
        assert Card(Rank.NINE, Suit.HEARTS) == Card(Rank.NINE, Suit.HEARTS)
        assert Card(Rank.NINE, Suit.HEARTS) != Card(Rank.NINE, Suit.CLUBS)
        assert len({Card(Rank.TWO, Suit.CLUBS), Card(Rank.TWO, Suit.CLUBS)}) == 1

    def test_card_score(self):
        """Test base point values."""
        assert Card(Rank.ACE, Suit.HEARTS).score == 1
        assert Card(Rank.TWO, Suit.HEARTS).score == 2
        assert Card(Rank.TEN, Suit.HEARTS).score == 10
        assert Card(Rank.JACK, Suit.HEARTS).score == 10
        assert Card(Rank.QUEEN, Suit.HEARTS).score == 10
        assert Card(Rank.KING, Suit.HEARTS).score == 10

    def test_card_is_ace(self):
        """Test ace detection."""
        assert Card(Rank.ACE, Suit.SPADES).is_ace
        assert not Card(Rank.KING, Suit.SPADES).is_ace

    def test_card_str(self):
        """Test console rendering."""
        assert str(Card(Rank.ACE, Suit.HEARTS)) == "A하트"
        assert str(Card(Rank.TEN, Suit.CLUBS)) == "10클로버"
        assert str(Card(Rank.KING, Suit.SPADES)) == "K스페이드"


class TestDeck:
    """Tests for the Deck class."""

    def test_deck_has_52_unique_cards(self, deck):
        """A new deck holds every rank and suit exactly once."""
        cards = list(deck)
        assert len(deck) == 52
        assert len(set(cards)) == 52

    def test_unshuffled_order_is_rank_major(self, deck):
        """Without shuffling, all four Aces come first, then the Twos."""
        first_five = [deck.draw() for _ in range(5)]
        assert [c.rank for c in first_five[:4]] == [Rank.ACE] * 4
        assert first_five[4].rank == Rank.TWO

    def test_shuffle_applied_exactly_once(self):
        """The shuffle strategy runs once, on the full deck."""
        calls = []

        def recording_shuffle(cards):
            calls.append(len(cards))

        deck = Deck.create(recording_shuffle)
        deck.draw()
        deck.draw()

        assert calls == [52]

    def test_strategy_order_is_kept(self):
        """Whatever order the strategy produces is the draw order."""
        deck = Deck.create(lambda cards: cards.reverse())
        assert deck.draw() == Card(Rank.KING, Suit.CLUBS)

    def test_seeded_shuffle_is_reproducible(self):
        """Same seed, same order."""
        deck1 = Deck.create(random_shuffle(Random(7)))
        deck2 = Deck.create(random_shuffle(Random(7)))
        assert list(deck1) == list(deck2)

    def test_shuffled_deck_is_a_permutation(self, shuffled_deck, deck):
        """Shuffling never adds or loses cards."""
        assert set(shuffled_deck) == set(deck)
        assert list(shuffled_deck) != list(deck)

    def test_draw_removes_front_card(self, deck):
        """Drawing takes from the front and shrinks the deck."""
        front = next(iter(deck))
        card = deck.draw()
        assert card == front
        assert len(deck) == 51
        assert deck.cards_remaining == 51
        assert card not in list(deck)

    def test_draw_from_empty_deck_fails(self, deck):
        """Drawing past the last card is an error."""
        for _ in range(52):
            deck.draw()

        with pytest.raises(DeckExhaustedError):
            deck.draw()

    def test_deck_exhausted_is_not_user_error(self):
        """An empty deck is an internal error, not rejected input."""
        from blackjack.errors import BlackjackError

        assert issubclass(DeckExhaustedError, IndexError)
        assert not issubclass(DeckExhaustedError, BlackjackError)

    def test_no_shuffle_leaves_list_alone(self):
        cards = [Card(Rank.TWO, Suit.CLUBS), Card(Rank.ACE, Suit.HEARTS)]
        no_shuffle(cards)
        assert cards == [Card(Rank.TWO, Suit.CLUBS), Card(Rank.ACE, Suit.HEARTS)]
