"""Table participants: one variant type for the dealer and the players."""

from dataclasses import dataclass, field
from enum import Enum, auto

from loguru import logger

from blackjack.cards import Card, Deck
from blackjack.errors import InvalidNameLengthError, TurnOrderError
from blackjack.hand import Hand

DEALER_STAND_THRESHOLD = 16
MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 10


class Role(Enum):
    """Seat a participant occupies."""

    DEALER = auto()
    PLAYER = auto()


@dataclass
class Participant:
    """
    A named seat at the table holding one hand.

    Players stand explicitly; the dealer stands once its score passes 16.
    Busting is always derived from the hand.
    """

    role: Role
    name: str
    hand: Hand = field(default_factory=Hand)
    stood: bool = False

    @classmethod
    def dealer(cls, name: str = "딜러") -> "Participant":
        """Create the dealer."""
        return cls(role=Role.DEALER, name=name)

    @classmethod
    def player(
        cls,
        name: str,
        min_length: int = MIN_NAME_LENGTH,
        max_length: int = MAX_NAME_LENGTH,
    ) -> "Participant":
        """Create a player from a raw name, trimming surrounding whitespace."""
        name = name.strip()
        if not min_length <= len(name) <= max_length:
            raise InvalidNameLengthError(name, min_length, max_length)
        return cls(role=Role.PLAYER, name=name)

    @property
    def is_dealer(self) -> bool:
        return self.role == Role.DEALER

    @property
    def cards(self) -> list[Card]:
        """Return a copy of the cards held."""
        return list(self.hand.cards)

    @property
    def score(self) -> int:
        return self.hand.score

    @property
    def is_bust(self) -> bool:
        return self.hand.is_bust

    @property
    def is_stand(self) -> bool:
        """Check if the participant has finished drawing by standing."""
        if self.role == Role.DEALER:
            return self.score > DEALER_STAND_THRESHOLD
        return self.stood

    @property
    def is_active(self) -> bool:
        """Check if the participant may still take a card."""
        return not (self.is_bust or self.is_stand)

    def add_card(self, card: Card) -> None:
        """Add a card, refusing once the participant has stood or busted."""
        if not self.is_active:
            raise TurnOrderError(f"[ERROR] {self.name}은(는) 더 이상 카드를 받을 수 없습니다")
        self.hand.add_card(card)

    def stand(self) -> None:
        """Stop drawing. Only players stand by choice."""
        if self.role == Role.DEALER:
            raise TurnOrderError("[ERROR] 딜러는 점수에 따라 자동으로 멈춥니다")
        if not self.is_active:
            raise TurnOrderError(f"[ERROR] {self.name}의 차례는 이미 끝났습니다")
        self.stood = True

    def play_turn(self, deck: Deck) -> int:
        """
        Run the dealer's fixed strategy: draw while the score is 16 or less.

        Returns:
            Number of cards drawn
        """
        if self.role != Role.DEALER:
            raise TurnOrderError("[ERROR] 플레이어의 차례는 자동으로 진행되지 않습니다")

        drawn = 0
        while self.is_active:
            self.hand.add_card(deck.draw())
            drawn += 1
            logger.debug("dealer draws, score now {}", self.score)
        return drawn

    def __str__(self) -> str:
        return f"{self.name}카드: {self.hand}"
