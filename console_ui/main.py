"""Main entry point for the console blackjack table."""

import argparse
import sys
from random import Random

from loguru import logger

from blackjack.cards import ShuffleStrategy, random_shuffle
from blackjack.errors import BlackjackError, InvalidDecisionError
from blackjack.game import BlackjackGame, EventType, create_game
from blackjack.rules import TableRules
from config import config, configure_logging
from console_ui.views import InputView, OutputView


def play_player_turns(game: BlackjackGame, input_view: InputView, output_view: OutputView) -> None:
    """Ask each player hit or stand until every player is done."""
    while game.has_next_player_turn:
        player = game.next_player
        answer = input_view.read_decision(
            player.name, game.rules.hit_token, game.rules.stand_token
        )
        try:
            game.apply_turn(answer)
        except InvalidDecisionError as exc:
            output_view.print_error(exc)
            continue
        output_view.print_hand(player)


def run(
    input_view: InputView,
    output_view: OutputView,
    shuffle_strategy: ShuffleStrategy | None = None,
    rules: TableRules | None = None,
) -> int:
    """
    Play one full game on the console.

    Returns:
        Process exit status (1 when the table could not be seated)
    """
    names = input_view.read_player_names()
    try:
        game = create_game(names, shuffle_strategy, rules)
    except BlackjackError as exc:
        output_view.print_error(exc)
        return 1

    game.subscribe(
        lambda event: output_view.print_dealer_hit(game.dealer.name),
        EventType.DEALER_HITS,
    )

    game.start()
    output_view.print_initial_hands(game)
    play_player_turns(game, input_view, output_view)

    game.run_dealer_turn()
    output_view.print_final_hands(game)
    output_view.print_results(game)
    return 0


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play blackjack against the dealer.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible shuffle")
    parser.add_argument(
        "--log-level",
        default=config.logging.level,
        help="loguru level for engine logs (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    shuffle_strategy = None
    if args.seed is not None:
        shuffle_strategy = random_shuffle(Random(args.seed))
        logger.debug("shuffling with seed {}", args.seed)

    return run(InputView(), OutputView(), shuffle_strategy, config.table.to_rules())


if __name__ == "__main__":
    sys.exit(main())
