"""Per-player outcome against the dealer."""

from enum import Enum

from blackjack.participant import Participant


class PlayerGameResult(Enum):
    """Outcome of one player's hand."""

    WIN = "승"
    LOSE = "패"
    DRAW = "무"

    def __str__(self) -> str:
        return self.value

    def reversed(self) -> "PlayerGameResult":
        """Return the outcome from the dealer's side."""
        if self == PlayerGameResult.WIN:
            return PlayerGameResult.LOSE
        if self == PlayerGameResult.LOSE:
            return PlayerGameResult.WIN
        return PlayerGameResult.DRAW


def judge(player: Participant, dealer: Participant) -> PlayerGameResult:
    """
    Compare a player's hand against the dealer's.

    A busted player loses even if the dealer also busted.
    """
    # Player busts always loses
    if player.is_bust:
        return PlayerGameResult.LOSE

    # Dealer busts, player wins
    if dealer.is_bust:
        return PlayerGameResult.WIN

    if player.score > dealer.score:
        return PlayerGameResult.WIN
    if player.score < dealer.score:
        return PlayerGameResult.LOSE
    return PlayerGameResult.DRAW
