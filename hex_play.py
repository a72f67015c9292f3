#!/usr/bin/env python3
# hex_play.py: play Hex in the terminal against the Monte Carlo computer
# Usage examples:
#   python hex_play.py --quick --colour red
#   python hex_play.py --size 11 --colour blue --repeats 2000 --workers 4
#   HEX_MC_REPEATS=300 python hex_play.py --quick

from __future__ import annotations

import argparse
import logging
from typing import Callable, List, Optional

from hex_board import State
from hex_config import QUICK_SIZE, GameConfig
from hex_game import HexGame
from hex_renderer import board_to_text, render_board

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]

BANNER = (
    "Red wins by connecting North and South\n"
    "and Blue wins by connecting East and West.\n"
    "Red always goes first.\n"
)


def parse_colour(text: str) -> Optional[State]:
    t = text.strip().lower()
    if t in ("1", "r", "red", "x"):
        return State.RED
    if t in ("2", "b", "blue", "o"):
        return State.BLUE
    return None


def ask_colour(input_fn: InputFn = input) -> State:
    while True:
        side = parse_colour(input_fn("Choose a colour Red or Blue <1,2>: "))
        if side is not None:
            return side
        print("Please answer 1 (Red) or 2 (Blue).")


def read_coordinate(prompt: str, size: int, input_fn: InputFn = input) -> int:
    """Prompt until the answer is an integer in [0, size)."""
    while True:
        raw = input_fn(prompt)
        try:
            value = int(raw.strip())
        except ValueError:
            print("Please enter a number.")
            continue
        if not 0 <= value < size:
            print("Value out of bounds!")
            continue
        return value


def player_turn(game: HexGame, input_fn: InputFn = input) -> None:
    print(board_to_text(game.board))
    while True:
        row = read_coordinate("\nInsert the row you want to play: ", game.size, input_fn)
        col = read_coordinate("Insert the column you want to play: ", game.size, input_fn)
        if game.play_human(row, col):
            return
        print("\nTile is already occupied!")


def computer_turn(game: HexGame) -> None:
    print("\nComputer is deciding...")
    row, col = game.play_computer()
    stats = game.last_stats()
    if stats is not None:
        logger.debug("decision took %.2fs (%d playouts)", stats.duration, stats.repeats)
    print(f"\nComputer plays: Row = {row} Col = {col}\n")


def play_game(
    config: GameConfig,
    human: State,
    input_fn: InputFn = input,
    save_image: Optional[str] = None,
) -> State:
    """Run one game to completion and return the winning side."""
    game = HexGame(config.size, human, config.repeats, config.workers, config.seed)
    while not game.is_over:
        if game.current == game.human:
            player_turn(game, input_fn)
        else:
            computer_turn(game)

    print("\nPLAYER WON\n" if game.winner == game.human else "\nCOMPUTER WON\n")
    print(board_to_text(game.board))
    if save_image:
        render_board(game.board, output=save_image, highlight=game.moves[-1])
        print(f"Saved final position to {save_image}")
    return game.winner


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play Hex against a Monte Carlo computer player")
    ap.add_argument("--size", type=int, default=None, help="board size n (n×n), default 11 or $HEX_SIZE")
    ap.add_argument("--quick", action="store_true", help=f"quick game on a {QUICK_SIZE}×{QUICK_SIZE} board")
    ap.add_argument("--colour", "--color", dest="colour", default=None,
                    help="your side: red (moves first, North↔South) or blue (East↔West)")
    ap.add_argument("--repeats", type=int, default=None,
                    help="Monte Carlo playouts per computer move, default 1000 or $HEX_MC_REPEATS")
    ap.add_argument("--workers", type=int, default=None, help="processes used for the playouts")
    ap.add_argument("--seed", type=int, default=None, help="RNG seed for a reproducible computer")
    ap.add_argument("--save-image", default=None, help="save the final position to this image file")
    ap.add_argument("--once", action="store_true", help="play a single game and exit")
    ap.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    return ap


def config_from_args(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.from_env()
    if args.quick:
        config.size = QUICK_SIZE
    if args.size is not None:
        config.size = args.size
    if args.repeats is not None:
        config.repeats = args.repeats
    if args.workers is not None:
        config.workers = args.workers
    if args.seed is not None:
        config.seed = args.seed
    return config.validate()


def main(argv: Optional[List[str]] = None, input_fn: InputFn = input) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        config = config_from_args(args)
    except ValueError as e:
        raise SystemExit(f"Invalid configuration: {e}")

    human = None
    if args.colour is not None:
        human = parse_colour(args.colour)
        if human is None:
            raise SystemExit(f"Unknown colour '{args.colour}', use red or blue.")

    print("\nWelcome to HEX!\n")
    print(BANNER)
    try:
        while True:
            side = human if human is not None else ask_colour(input_fn)
            play_game(config, side, input_fn, args.save_image)
            if args.once:
                break
            if input_fn("\nGame Over, play again? <y,n> ").strip().lower() != "y":
                break
    except (EOFError, KeyboardInterrupt):
        print("\nBye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
