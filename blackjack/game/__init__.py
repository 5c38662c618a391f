"""Game engine and state management."""

from blackjack.game.decision import Decision
from blackjack.game.events import GameEvent, EventType
from blackjack.game.state import GameState
from blackjack.game.engine import BlackjackGame, create_game

__all__ = [
    "Decision",
    "GameEvent",
    "EventType",
    "GameState",
    "BlackjackGame",
    "create_game",
]
