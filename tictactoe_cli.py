"""
Main entry point for TicTacToe.

Sets up the two players (from the command line or by asking), then plays
one game in the console. Use --gui for the Tkinter window instead.

Usage:
    python tictactoe_cli.py                          # Ask for names and player types
    python tictactoe_cli.py --x-kind h --o-kind a    # Human vs smart AI
    python tictactoe_cli.py --x-kind a --o-kind a    # Watch the AI play itself
    python tictactoe_cli.py --gui                    # Tkinter window
"""

import argparse
import logging
import random
import sys
from typing import Callable, List, Optional

from logic.config import GameConfig
from logic.display import ConsoleRenderer
from logic.factory import PlayerKind, create_player
from logic.game import Game
from logic.mark import Mark
from logic.player import Player


def positive_int(text: str) -> int:
    """argparse type for counts that must be 1 or more."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Tic-Tac-Toe CLI")
    parser.add_argument("--x-name", help="Name for the X player")
    parser.add_argument("--o-name", help="Name for the O player")
    parser.add_argument(
        "--x-kind",
        help="Type for X: h = human, r = random computer, a = smart AI"
    )
    parser.add_argument(
        "--o-kind",
        help="Type for O: h = human, r = random computer, a = smart AI"
    )
    parser.add_argument(
        "--max-rejected",
        type=positive_int,
        default=GameConfig.MAX_REJECTED_MOVES,
        help="Invalid moves in a row before a player forfeits the game"
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for random players")
    parser.add_argument("--verbose", action="store_true", help="Show debug logging")
    parser.add_argument("--gui", action="store_true", help="Open the Tkinter window")
    return parser.parse_args(argv)


def choose_player(
    default_name: str,
    mark: Mark,
    name: Optional[str] = None,
    kind_text: Optional[str] = None,
    input_func: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
    rng: Optional[random.Random] = None
) -> Player:
    """
    Build one player, asking for whatever wasn't given.

    Args:
        default_name: Name used when the answer is blank.
        mark: X or O.
        name: Name from the command line, if any.
        kind_text: Player type from the command line, if any.
        input_func: Reads one answer given a prompt.
        output: Where to write messages.
        rng: Random source for a random player.

    Returns:
        The player. Unknown types are asked again.
    """
    if name is None:
        name = input_func(f"Enter name for {default_name} ({mark.value}): ").strip() or default_name

    while True:
        if kind_text is None:
            kind_text = input_func(
                f"Type for {name}? (h = human, r = random computer, a = smart AI) [h]: "
            ).strip() or PlayerKind.HUMAN.value

        try:
            kind = PlayerKind.from_choice(kind_text)
        except ValueError as e:
            output(str(e))
            kind_text = None
            continue

        if kind == PlayerKind.HUMAN:
            return create_player(kind, name, mark, input_func=input_func, output=output)
        if kind == PlayerKind.RANDOM:
            return create_player(kind, name, mark, rng=rng)
        return create_player(kind, name, mark)


def main(
    argv: Optional[List[str]] = None,
    input_func: Callable[[str], str] = input,
    output: Callable[[str], None] = print
) -> int:
    """
    Main entry point.

    Returns:
        0 when the game finished, 1 when it was aborted.
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s: %(message)s"
    )

    # Launch UI if asked
    if args.gui:
        from tictactoe_ui import TicTacToeUI
        ui = TicTacToeUI(seed=args.seed)
        ui.run()
        return 0

    rng = random.Random(args.seed)

    output("Welcome to Tic-Tac-Toe CLI")

    try:
        player_x = choose_player(
            GameConfig.DEFAULT_X_NAME, Mark.X, args.x_name, args.x_kind,
            input_func=input_func, output=output, rng=rng
        )
        player_o = choose_player(
            GameConfig.DEFAULT_O_NAME, Mark.O, args.o_name, args.o_kind,
            input_func=input_func, output=output, rng=rng
        )
    except (EOFError, OSError, UnicodeDecodeError):
        output("No input. Goodbye!")
        return 1

    game = Game(
        player_x,
        player_o,
        renderer=ConsoleRenderer(output),
        max_rejected_moves=args.max_rejected
    )

    try:
        result = game.play()
    except KeyboardInterrupt:
        output("\n\nGame interrupted by user.")
        return 1

    output("Thanks for playing!")
    return 0 if result is not None else 1


if __name__ == "__main__":
    sys.exit(main())
