"""Card and Deck classes - immutable cards, single-use deck."""

from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Callable, Iterator

from blackjack.errors import DeckExhaustedError


class Suit(Enum):
    """Card suits."""

    SPADES = auto()
    HEARTS = auto()
    DIAMONDS = auto()
    CLUBS = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.SPADES: "♠",
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
        }
        return symbols[self]

    @property
    def korean_name(self) -> str:
        """Return the suit name used by the console."""
        return {
            Suit.SPADES: "스페이드",
            Suit.HEARTS: "하트",
            Suit.DIAMONDS: "다이아몬드",
            Suit.CLUBS: "클로버",
        }[self]


class Rank(Enum):
    """Card ranks, declared in deck order."""

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

    def __str__(self) -> str:
        if 1 < self.value <= 10:
            return str(self.value)
        return {
            Rank.ACE: "A",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]

    @property
    def score(self) -> int:
        """Return the base point value (Ace = 1, face cards = 10)."""
        return min(self.value, 10)

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit.korean_name}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def score(self) -> int:
        """Return the base point value, counting an Ace as 1."""
        return self.rank.score

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace


# Permutes the given list in place, like Random.shuffle.
ShuffleStrategy = Callable[[list[Card]], None]


def random_shuffle(rng: Random | None = None) -> ShuffleStrategy:
    """Return a uniform shuffle backed by ``rng`` (a fresh Random if omitted)."""
    return (rng or Random()).shuffle


def no_shuffle(cards: list[Card]) -> None:
    """Leave the cards in creation order."""


class Deck:
    """A standard 52-card deck, shuffled once and drawn from the front."""

    def __init__(self, cards: list[Card]) -> None:
        self._cards: deque[Card] = deque(cards)

    @classmethod
    def create(cls, shuffle_strategy: ShuffleStrategy | None = None) -> "Deck":
        """
        Build all 52 cards and randomize them exactly once.

        Args:
            shuffle_strategy: Permutation applied in place; defaults to a
                uniform random shuffle.
        """
        cards = [Card(rank, suit) for rank in Rank for suit in Suit]
        (shuffle_strategy or random_shuffle())(cards)
        return cls(cards)

    def draw(self) -> Card:
        """Remove and return the front card."""
        if not self._cards:
            raise DeckExhaustedError()
        return self._cards.popleft()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)
