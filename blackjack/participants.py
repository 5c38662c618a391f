"""The table: one dealer and an ordered list of players."""

from typing import Sequence

from loguru import logger

from blackjack.cards import Deck
from blackjack.errors import DuplicateNameError, InvalidPlayerCountError
from blackjack.participant import Participant
from blackjack.result import PlayerGameResult, judge
from blackjack.rules import TableRules

INITIAL_CARDS = 2


class Participants:
    """
    Dealer plus players, in registration order.

    Drives the initial deal, player turn order, the dealer's turn and the
    final results. The deck is never stored here; callers pass it in.
    """

    def __init__(self, dealer: Participant, players: list[Participant]) -> None:
        self._dealer = dealer
        self._players = players

    @classmethod
    def of(cls, names: Sequence[str], rules: TableRules | None = None) -> "Participants":
        """
        Build a table from raw player names.

        Raises:
            InvalidPlayerCountError: fewer or more players than allowed
            InvalidNameLengthError: a trimmed name is too short or too long
            DuplicateNameError: two trimmed names are equal
        """
        rules = rules or TableRules()
        if not rules.min_players <= len(names) <= rules.max_players:
            raise InvalidPlayerCountError(rules.min_players, rules.max_players)

        players = [
            Participant.player(name, rules.min_name_length, rules.max_name_length)
            for name in names
        ]

        seen: set[str] = set()
        for player in players:
            if player.name in seen:
                raise DuplicateNameError(player.name)
            seen.add(player.name)

        return cls(Participant.dealer(rules.dealer_name), players)

    @property
    def dealer(self) -> Participant:
        return self._dealer

    @property
    def players(self) -> list[Participant]:
        """Return the players in registration order."""
        return list(self._players)

    @property
    def player_names(self) -> list[str]:
        return [player.name for player in self._players]

    def init_hand(self, deck: Deck) -> None:
        """Deal two cards to the dealer, then two to each player in order."""
        for participant in [self._dealer, *self._players]:
            for _ in range(INITIAL_CARDS):
                participant.add_card(deck.draw())
            logger.debug("dealt {} to {}", participant.hand, participant.name)

    def next_turn_player(self) -> Participant | None:
        """Return the first player still able to act, or None when all are done."""
        for player in self._players:
            if player.is_active:
                return player
        return None

    def play_dealer_turn(self, deck: Deck) -> int:
        """Let the dealer draw to 17 or more. Returns the number of cards drawn."""
        return self._dealer.play_turn(deck)

    @property
    def is_dealer_stand(self) -> bool:
        """Check if the dealer is done drawing (a bust counts as done)."""
        return self._dealer.is_stand

    def results(self) -> dict[str, PlayerGameResult]:
        """Compute every player's outcome from the current hands."""
        return {player.name: judge(player, self._dealer) for player in self._players}

    def dealer_results(self) -> dict[PlayerGameResult, int]:
        """Tally the dealer's own wins, losses and draws."""
        tally = {outcome: 0 for outcome in PlayerGameResult}
        for outcome in self.results().values():
            tally[outcome.reversed()] += 1
        return tally
