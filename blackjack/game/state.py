"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Game state machine states.

    Flow: WAITING → PLAYER_TURN → DEALER_TURN → FINISHED
    """

    # Table seated, no cards dealt yet
    WAITING = auto()

    # Players hit or stand in registration order
    PLAYER_TURN = auto()

    # Every player stood or busted; dealer draws
    DEALER_TURN = auto()

    # Dealer done, results final
    FINISHED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()
