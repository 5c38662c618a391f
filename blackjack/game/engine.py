"""Blackjack game engine with state machine."""

from typing import Callable, Sequence

from loguru import logger
from transitions import Machine

from blackjack.cards import Deck, ShuffleStrategy
from blackjack.errors import TurnOrderError
from blackjack.game.decision import Decision
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.state import GameState
from blackjack.participant import Participant
from blackjack.participants import Participants
from blackjack.result import PlayerGameResult
from blackjack.rules import TableRules


class BlackjackGame:
    """
    One game at one table: deal, player turns, dealer turn, results.

    This is the core game logic, completely UI-agnostic.
    Communication happens through events, return values and exceptions.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "deal_cards", "source": "waiting", "dest": "player_turn"},
        {"trigger": "players_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "finished"},
    ]

    def __init__(
        self,
        participants: Participants,
        deck: Deck,
        rules: TableRules | None = None,
    ) -> None:
        """
        Seat a table around a fresh deck.

        Args:
            participants: Dealer and validated players
            deck: Deck owned by this game for its whole lifetime
            rules: Table rules (uses defaults if not provided)
        """
        self.rules = rules or TableRules()
        self.participants = participants
        self.deck = deck
        self.events = EventEmitter()

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="waiting",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    @property
    def dealer(self) -> Participant:
        return self.participants.dealer

    @property
    def players(self) -> list[Participant]:
        return self.participants.players

    @property
    def player_names(self) -> list[str]:
        return self.participants.player_names

    def _require_state(self, expected: GameState, message: str) -> None:
        if self.state != expected:
            raise TurnOrderError(message)

    def start(self) -> None:
        """Deal the initial two cards to everyone."""
        self._require_state(GameState.WAITING, "[ERROR] 이미 시작된 게임입니다")

        self.participants.init_hand(self.deck)
        for participant in [self.dealer, *self.players]:
            self.events.emit_new(
                EventType.CARD_DEALT,
                participant=participant.name,
                cards=[str(card) for card in participant.cards],
            )

        self.deal_cards()
        self.events.emit_new(EventType.GAME_STARTED, players=self.player_names)
        logger.debug("game started with {} player(s)", len(self.players))
        self._end_player_phase_if_done()

    @property
    def has_next_player_turn(self) -> bool:
        """Check if some player can still hit or stand."""
        return self.participants.next_turn_player() is not None

    @property
    def next_player(self) -> Participant:
        """Return the player whose turn it is."""
        player = self.participants.next_turn_player()
        if player is None:
            raise TurnOrderError("[ERROR] 차례를 진행할 플레이어가 없습니다")
        return player

    def apply_turn(self, decision: "Decision | str") -> Participant:
        """
        Apply a hit or stand for the current player.

        Args:
            decision: A Decision, or a hit/stand token

        Returns:
            The player who acted

        Raises:
            TurnOrderError: not in the player phase
            InvalidDecisionError: token is neither hit nor stand
        """
        self._require_state(GameState.PLAYER_TURN, "[ERROR] 플레이어의 차례가 아닙니다")
        decision = Decision.parse(decision, self.rules.hit_token, self.rules.stand_token)
        player = self.next_player

        if decision == Decision.STAND:
            player.stand()
            self.events.emit_new(EventType.PLAYER_STAND, player=player.name, score=player.score)
            logger.debug("{} stands on {}", player.name, player.score)
        else:
            card = self.deck.draw()
            player.add_card(card)
            self.events.emit_new(
                EventType.PLAYER_HIT,
                player=player.name,
                card=str(card),
                score=player.score,
            )
            logger.debug("{} hits {}, score now {}", player.name, card, player.score)
            if player.is_bust:
                self.events.emit_new(EventType.PLAYER_BUSTS, player=player.name, score=player.score)

        self._end_player_phase_if_done()
        return player

    def _end_player_phase_if_done(self) -> None:
        if not self.has_next_player_turn:
            self.players_done()
            logger.debug("player phase over")

    def run_dealer_turn(self) -> int:
        """
        Play the dealer's fixed strategy.

        Returns:
            Number of cards the dealer drew
        """
        self._require_state(GameState.DEALER_TURN, "[ERROR] 플레이어의 차례가 끝나지 않았습니다")

        drawn = self.participants.play_dealer_turn(self.deck)
        for card in self.dealer.cards[len(self.dealer.cards) - drawn:]:
            self.events.emit_new(EventType.DEALER_HITS, card=str(card))

        if self.dealer.is_bust:
            self.events.emit_new(EventType.DEALER_BUSTS, score=self.dealer.score)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, score=self.dealer.score)

        self.dealer_done()
        self.events.emit_new(
            EventType.GAME_FINISHED,
            results={name: result.name for name, result in self.results().items()},
        )
        logger.debug("dealer finished on {} after {} card(s)", self.dealer.score, drawn)
        return drawn

    @property
    def is_dealer_standing(self) -> bool:
        return self.participants.is_dealer_stand

    def results(self) -> dict[str, PlayerGameResult]:
        """Return each player's outcome, in registration order."""
        return self.participants.results()


def create_game(
    player_names: Sequence[str],
    shuffle_strategy: ShuffleStrategy | None = None,
    rules: TableRules | None = None,
) -> BlackjackGame:
    """
    Validate the players and seat a new game around a freshly shuffled deck.

    Raises:
        InvalidPlayerCountError, InvalidNameLengthError, DuplicateNameError
    """
    rules = rules or TableRules()
    participants = Participants.of(player_names, rules)
    return BlackjackGame(participants, Deck.create(shuffle_strategy), rules)
