"""Console input and output for the blackjack table."""

from typing import Callable

from blackjack.game import BlackjackGame
from blackjack.participant import Participant

NAME_DELIMITER = ","


def split_names(text: str) -> list[str]:
    """
    Split comma-separated names.

    Trailing empty entries are dropped, so a lone comma yields no names.
    Surrounding whitespace is left for the engine to trim.
    """
    names = text.split(NAME_DELIMITER)
    while names and names[-1] == "":
        names.pop()
    return names


class InputView:
    """Prompts that read from the player."""

    def __init__(
        self,
        read: Callable[[], str] | None = None,
        write: Callable[[str], None] | None = None,
    ) -> None:
        self._read = read or input
        self._write = write or print

    def read_player_names(self) -> list[str]:
        self._write("게임에 참여할 사람의 이름을 입력하세요.(쉼표 기준으로 분리)")
        return split_names(self._read())

    def read_decision(self, name: str, hit_token: str = "y", stand_token: str = "n") -> str:
        self._write(
            f"\n{name}는 한장의 카드를 더 받겠습니까?(예는 {hit_token}, 아니오는 {stand_token})"
        )
        return self._read().strip()


class OutputView:
    """Table rendering."""

    def __init__(self, write: Callable[[str], None] | None = None) -> None:
        self._write = write or print

    def print_error(self, error: Exception) -> None:
        self._write(str(error))

    def print_initial_hands(self, game: BlackjackGame) -> None:
        """Show the opening deal; only the dealer's first card is face up."""
        names = ", ".join(game.player_names)
        self._write(f"\n{game.dealer.name}와 {names}에게 2장을 나누었습니다.")
        self._write(f"{game.dealer.name}: {game.dealer.cards[0]}")
        for player in game.players:
            self.print_hand(player)

    def print_hand(self, participant: Participant) -> None:
        self._write(str(participant))

    def print_dealer_hit(self, dealer_name: str = "딜러") -> None:
        self._write(f"\n{dealer_name}는 16이하라 한장의 카드를 더 받았습니다.")

    def print_final_hands(self, game: BlackjackGame) -> None:
        self._write("")
        for participant in [game.dealer, *game.players]:
            self._write(f"{participant} - 결과: {participant.score}")

    def print_results(self, game: BlackjackGame) -> None:
        """Print the dealer's tally, then one line per player."""
        self._write("\n## 최종 승패")
        tally = game.participants.dealer_results()
        dealer_line = " ".join(
            f"{count}{outcome}" for outcome, count in tally.items() if count
        )
        self._write(f"{game.dealer.name}: {dealer_line}")
        for name, result in game.results().items():
            self._write(f"{name}: {result}")
