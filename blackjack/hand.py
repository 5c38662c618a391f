"""Hand scoring for blackjack."""

from dataclasses import dataclass, field
from typing import Iterator

from blackjack.cards import Card

BLACKJACK = 21
ACE_BONUS = 10


@dataclass
class Hand:
    """An append-only blackjack hand with score calculation."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    @property
    def hard_score(self) -> int:
        """Sum of the cards with every Ace counted as 1."""
        return sum(card.score for card in self.cards)

    @property
    def score(self) -> int:
        """
        Calculate the hand score.

        Every Ace starts at 1. Each Ace held may then add 10, as long as the
        running total stays at or below 21.
        """
        total = self.hard_score
        for card in self.cards:
            if card.is_ace and total + ACE_BONUS <= BLACKJACK:
                total += ACE_BONUS
        return total

    @property
    def is_soft(self) -> bool:
        """Check if an Ace is currently counted as 11."""
        return self.score != self.hard_score

    @property
    def is_bust(self) -> bool:
        """Check if the hand has busted (score > 21)."""
        return self.score > BLACKJACK

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        return ", ".join(str(card) for card in self.cards)

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, score={self.score})"
