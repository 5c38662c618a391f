"""Exceptions raised by the blackjack engine."""


class BlackjackError(ValueError):
    """Base class for errors caused by invalid input or an illegal move."""


class InvalidPlayerCountError(BlackjackError):
    """The table was created with too few or too many players."""

    def __init__(self, min_players: int = 1, max_players: int = 7) -> None:
        super().__init__(
            f"[ERROR] 플레이어의 수는 {min_players} ~ {max_players} 이내여야 합니다"
        )


class DuplicateNameError(BlackjackError):
    """Two players share the same name after trimming."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("[ERROR] 플레이어의 이름은 중복될 수 없습니다")


class InvalidNameLengthError(BlackjackError):
    """A trimmed player name is too short or too long."""

    def __init__(self, name: str, min_length: int = 2, max_length: int = 10) -> None:
        self.name = name
        super().__init__(
            f"[ERROR] 플레이어의 이름은 {min_length} ~ {max_length} 글자여야 합니다."
        )


class InvalidDecisionError(BlackjackError):
    """A turn decision was neither the hit nor the stand token."""

    def __init__(self, token: str, hit_token: str = "y", stand_token: str = "n") -> None:
        self.token = token
        super().__init__(f"[ERROR] {hit_token} 또는 {stand_token}만 입력할 수 있습니다")


class TurnOrderError(BlackjackError):
    """An action was attempted out of turn or on a finished participant."""


class DeckExhaustedError(IndexError):
    """A card was drawn from an empty deck.

    This is an internal invariant violation, not a user error.
    """

    def __init__(self) -> None:
        super().__init__("Cannot draw from empty deck")
