"""Player turn decisions."""

from enum import Enum

from blackjack.errors import InvalidDecisionError


class Decision(Enum):
    """What a player does on their turn."""

    HIT = "hit"
    STAND = "stand"

    @classmethod
    def parse(cls, token: "str | Decision", hit_token: str = "y", stand_token: str = "n") -> "Decision":
        """
        Turn console or API input into a decision.

        Accepts the short console tokens as well as ``"hit"``/``"stand"``.
        Matching is exact.
        """
        if isinstance(token, Decision):
            return token
        if token in (hit_token, cls.HIT.value):
            return cls.HIT
        if token in (stand_token, cls.STAND.value):
            return cls.STAND
        raise InvalidDecisionError(token, hit_token, stand_token)
