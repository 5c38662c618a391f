"""Table limits and turn tokens."""

from dataclasses import dataclass

from blackjack.participant import MAX_NAME_LENGTH, MIN_NAME_LENGTH


@dataclass(frozen=True)
class TableRules:
    """
    Blackjack table configuration.

    The dealer strategy itself (draw to 17) is fixed and not configurable.
    """

    # Seats
    min_players: int = 1
    max_players: int = 7

    # Player names (measured after trimming)
    min_name_length: int = MIN_NAME_LENGTH
    max_name_length: int = MAX_NAME_LENGTH

    dealer_name: str = "딜러"

    # Console answers to "one more card?"
    hit_token: str = "y"
    stand_token: str = "n"

    def __post_init__(self) -> None:
        if not 1 <= self.min_players <= self.max_players:
            raise ValueError("Player limits must satisfy 1 <= min_players <= max_players")
        if not 1 <= self.min_name_length <= self.max_name_length:
            raise ValueError("Name limits must satisfy 1 <= min_name_length <= max_name_length")
        if self.hit_token == self.stand_token:
            raise ValueError("Hit and stand tokens must differ")
