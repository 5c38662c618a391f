"""Pytest fixtures for blackjack table tests."""

import pytest
from random import Random

from blackjack.cards import Deck, no_shuffle, random_shuffle
from blackjack.game import create_game
from blackjack.participant import Participant
from blackjack.participants import Participants


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck():
    """An unshuffled deck: four Aces, then four Twos, and so on."""
    return Deck.create(no_shuffle)


@pytest.fixture
def shuffled_deck(rng):
    """A shuffled deck."""
    return Deck.create(random_shuffle(rng))


@pytest.fixture
def table(deck):
    """One player, dealt from an unshuffled deck: both hands are Ace-Ace (12)."""
    participants = Participants.of(["연어"])
    participants.init_hand(deck)
    return participants


@pytest.fixture
def player():
    """A player with an empty hand."""
    return Participant.player("연어")


@pytest.fixture
def dealer():
    """A dealer with an empty hand."""
    return Participant.dealer()


@pytest.fixture
def game():
    """A started single-player game on an unshuffled deck."""
    g = create_game(["연어"], no_shuffle)
    g.start()
    return g

