"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Literal


class NewGameRequest(BaseModel):
    """Request to seat a new table."""

    player_names: list[str] = Field(..., description="Player names in seating order")


class TurnRequest(BaseModel):
    """Request for the current player's move."""

    decision: str = Field(..., description="\"hit\" or \"stand\", or the configured short tokens")


class CardResponse(BaseModel):
    """Card representation."""

    model_config = ConfigDict(from_attributes=True)

    rank: str
    suit: str
    score: int


class ParticipantResponse(BaseModel):
    """A seat and its hand."""

    name: str
    cards: list[CardResponse]
    score: int
    is_soft: bool
    is_bust: bool
    is_stand: bool


class GameStateResponse(BaseModel):
    """Current table state."""

    state: str
    dealer: ParticipantResponse
    players: list[ParticipantResponse]
    next_player: str | None
    is_dealer_standing: bool
    cards_remaining: int


class NewGameResponse(BaseModel):
    """A freshly dealt game."""

    session_id: str
    state: GameStateResponse


class ResultsResponse(BaseModel):
    """Final outcome per player, in seating order."""

    results: dict[str, Literal["WIN", "LOSE", "DRAW"]]


class ErrorResponse(BaseModel):
    """Rejected request."""

    detail: str
    error: str
