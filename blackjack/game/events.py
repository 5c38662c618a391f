"""Game events for the event system."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """Types of game events."""

    # Game flow events
    GAME_STARTED = auto()
    GAME_FINISHED = auto()

    # Card events
    CARD_DEALT = auto()

    # Player action events
    PLAYER_HIT = auto()
    PLAYER_STAND = auto()
    PLAYER_BUSTS = auto()

    # Dealer events
    DEALER_HITS = auto()
    DEALER_STANDS = auto()
    DEALER_BUSTS = auto()


@dataclass(frozen=True)
class GameEvent:
    """
    Immutable game event.

    Events are how front ends learn what the engine did without polling.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


EventHandler = Callable[[GameEvent], None]


class EventEmitter:
    """
    Fans engine events out to front ends and keeps a log of the game.

    A handler registered without an event type sees every event.
    """

    def __init__(self) -> None:
        self._handlers: dict[EventType | None, list[EventHandler]] = {}
        self._log: list[GameEvent] = []

    def subscribe(self, handler: EventHandler, event_type: EventType | None = None) -> None:
        self._handlers.setdefault(event_type, []).append(handler)

    def emit_new(self, event_type: EventType, **data: Any) -> GameEvent:
        """Log a new event and call its handlers, typed ones before catch-all ones."""
        event = GameEvent(event_type=event_type, data=data)
        self._log.append(event)
        for key in (event_type, None):
            for handler in self._handlers.get(key, []):
                handler(event)
        return event

    @property
    def history(self) -> list[GameEvent]:
        """Every event emitted so far, oldest first."""
        return list(self._log)
