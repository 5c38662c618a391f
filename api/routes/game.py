"""Game API endpoints."""

from fastapi import APIRouter, HTTPException, Header
from typing import Annotated

from loguru import logger

from api.schemas import (
    CardResponse,
    ErrorResponse,
    GameStateResponse,
    NewGameRequest,
    NewGameResponse,
    ParticipantResponse,
    ResultsResponse,
    TurnRequest,
)
from api.session import create_session, get_session
from blackjack.game import BlackjackGame, create_game
from blackjack.participant import Participant
from config import config

router = APIRouter()

# Session data keys
SESSION_KEY_GAME = "game"

# Rejected moves come back through the BlackjackError handler in api.main
REJECTED = {400: {"model": ErrorResponse}}


async def _get_game(session_id: str) -> BlackjackGame:
    """Load the game behind a signed session id."""
    session_data = await get_session(session_id)
    if not session_data or SESSION_KEY_GAME not in session_data:
        raise HTTPException(status_code=404, detail="Game session not found")
    return session_data[SESSION_KEY_GAME]


def _participant_to_response(participant: Participant) -> ParticipantResponse:
    """Convert a Participant to ParticipantResponse."""
    return ParticipantResponse(
        name=participant.name,
        cards=[
            CardResponse(
                rank=str(c.rank),
                suit=c.suit.name,
                score=c.score,
            )
            for c in participant.cards
        ],
        score=participant.score,
        is_soft=participant.hand.is_soft,
        is_bust=participant.is_bust,
        is_stand=participant.is_stand,
    )


def _game_state_response(game: BlackjackGame) -> GameStateResponse:
    """Convert game state to response."""
    next_player = game.participants.next_turn_player()
    return GameStateResponse(
        state=game.state.name,
        dealer=_participant_to_response(game.dealer),
        players=[_participant_to_response(p) for p in game.players],
        next_player=next_player.name if next_player else None,
        is_dealer_standing=game.is_dealer_standing,
        cards_remaining=len(game.deck),
    )


@router.post("/new", responses=REJECTED)
async def new_game(request: NewGameRequest) -> NewGameResponse:
    """Seat a table and deal the opening hands."""
    game = create_game(request.player_names, rules=config.table.to_rules())
    game.start()

    session_id = await create_session({SESSION_KEY_GAME: game})
    logger.info("new game for {}", game.player_names)
    return NewGameResponse(session_id=session_id, state=_game_state_response(game))


@router.get("/state")
async def get_state(
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> GameStateResponse:
    """Get current game state."""
    game = await _get_game(session_id)
    return _game_state_response(game)


@router.post("/turn", responses=REJECTED)
async def take_turn(
    request: TurnRequest,
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> GameStateResponse:
    """Hit or stand for the player whose turn it is."""
    game = await _get_game(session_id)
    game.apply_turn(request.decision)
    return _game_state_response(game)


@router.post("/dealer", responses=REJECTED)
async def dealer_turn(
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> GameStateResponse:
    """Play out the dealer's hand once every player is done."""
    game = await _get_game(session_id)
    game.run_dealer_turn()
    return _game_state_response(game)


@router.get("/results")
async def get_results(
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> ResultsResponse:
    """Get each player's outcome against the dealer."""
    game = await _get_game(session_id)
    return ResultsResponse(
        results={name: result.name for name, result in game.results().items()}
    )
