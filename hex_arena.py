# hex_arena.py

import argparse
import importlib
import inspect
import logging
from types import ModuleType
from typing import Any, Dict, List, Optional

import numpy as np

from hex_adjacency import build_adjacency
from hex_board import HexBoard, Move, State
from hex_config import DEFAULT_REPEATS
from hex_evaluator import wins

logger = logging.getLogger(__name__)


def load_player(module_name: str) -> ModuleType:
    """Dynamically import a player module by name."""
    try:
        mod = importlib.import_module(module_name)
    except ImportError as e:
        raise SystemExit(f"Cannot import player module '{module_name}': {e}")
    if not hasattr(mod, "choose_move"):
        raise SystemExit(f"Player module '{module_name}' lacks a choose_move() function.")
    return mod


def _call_choose_move(
    mod: ModuleType,
    board: HexBoard,
    adjacency: np.ndarray,
    side: State,
    rng: np.random.Generator,
    repeats: int,
    workers: int,
) -> Move:
    fn = mod.choose_move
    params = inspect.signature(fn).parameters

    kwargs: Dict[str, Any] = {"rng": rng}
    if "repeats" in params:
        kwargs["repeats"] = repeats
    if "workers" in params:
        kwargs["workers"] = workers

    return fn(board.clone(), adjacency, side, side.opponent(), **kwargs)


def _last_duration(mod: ModuleType) -> float:
    if not hasattr(mod, "get_last_stats"):
        return 0.0
    st = mod.get_last_stats()
    return float(getattr(st, "duration", 0.0) or 0.0)


# -----------------------------------------------------------
# One complete game of Hex between two black-box player mods
# -----------------------------------------------------------

def play_single_game(
    size: int,
    red_mod: ModuleType,
    blue_mod: ModuleType,
    rng: np.random.Generator,
    repeats: int = DEFAULT_REPEATS,
    workers: int = 1,
    timings: Optional[Dict[str, List[float]]] = None,
    start: Optional[HexBoard] = None,
) -> State:                                   # returns State.RED or State.BLUE
    """Play to the end, from `start` if given (Red moves when the stone counts are level)."""
    if start is not None and start.size != size:
        raise ValueError(f"Start position is {start.size}×{start.size}, expected {size}×{size}.")
    board = start.clone() if start is not None else HexBoard(size)
    adjacency = build_adjacency(size)
    side = State.RED if board.count(State.RED) <= board.count(State.BLUE) else State.BLUE

    while True:
        mod = red_mod if side == State.RED else blue_mod
        try:
            move = _call_choose_move(mod, board, adjacency, side, rng, repeats, workers)
        except Exception as err:                # crash = immediate loss
            print(f"⚠️  {side.name} program raised {err.__class__.__name__}: {err}")
            return side.opponent()

        if timings is not None:
            timings.setdefault(mod.__name__, []).append(_last_duration(mod))

        # basic legality check; the Monte Carlo (0, 0) fallback onto a taken
        # cell is judged like any other illegal move and loses the game
        r, c = move
        if not board.in_bounds(r, c) or not board.place(r, c, side):
            print(f"⚠️  {side.name} played illegal move {move}. {side.opponent().name} wins.")
            return side.opponent()

        if wins(board, adjacency, side):
            return side
        if board.is_full():
            # cannot happen on a legal board: a full Hex board always has a winner
            raise RuntimeError(f"Board full without a winner:\n{board}")
        side = side.opponent()


# -----------------------------------------------------------
# Match runner
# -----------------------------------------------------------

def run_match(
    size: int,
    games: int,
    player1_mod: ModuleType,
    player2_mod: ModuleType,
    mode: str,
    seed: int,
    repeats: int = DEFAULT_REPEATS,
    workers: int = 1,
) -> Dict[str, int]:
    if mode not in ("p1_red", "p2_red", "alternate"):
        raise ValueError("mode must be one of: p1_red, p2_red, alternate")
    rng = np.random.default_rng(seed)
    timings: Dict[str, List[float]] = {}

    p1_total = p2_total = 0
    p1_red = p1_blue = p2_red = p2_blue = 0

    for g in range(1, games + 1):
        p1_is_red = mode == "p1_red" or (mode == "alternate" and g % 2 == 1)
        red_mod, blue_mod = (player1_mod, player2_mod) if p1_is_red else (player2_mod, player1_mod)

        winner = play_single_game(size, red_mod, blue_mod, rng, repeats, workers, timings)
        logger.info("game %d: %s (red) vs %s (blue) -> %s",
                    g, red_mod.__name__, blue_mod.__name__, winner.name)

        if winner == State.RED:
            if p1_is_red:
                p1_total += 1; p1_red += 1
            else:
                p2_total += 1; p2_red += 1
        else:
            if p1_is_red:
                p2_total += 1; p2_blue += 1
            else:
                p1_total += 1; p1_blue += 1

    # ------------------  report  ------------------
    def pct(x: int) -> str:
        return f"{(100.0 * x / games):.1f}%" if games else "n/a"

    per_colour = games // 2 if mode == "alternate" else games
    print("\n=== Results ===")
    print(f"Total games      : {games}")
    print(f"Player1 wins     : {p1_total} ({pct(p1_total)})")
    print(f"Player2 wins     : {p2_total} ({pct(p2_total)})")
    print("----- split by colour -----")
    print(f"Player1 as Red   : {p1_red} / {per_colour} ({pct(p1_red)})")
    print(f"Player1 as Blue  : {p1_blue} / {per_colour} ({pct(p1_blue)})")
    print(f"Player2 as Red   : {p2_red} / {per_colour} ({pct(p2_red)})")
    print(f"Player2 as Blue  : {p2_blue} / {per_colour} ({pct(p2_blue)})")
    for name, ts in timings.items():
        if ts and any(ts):
            print(f"{name:<17}: {np.mean(ts):.3f}s per move over {len(ts)} moves")

    return {
        "p1_total": p1_total, "p2_total": p2_total,
        "p1_red": p1_red, "p1_blue": p1_blue,
        "p2_red": p2_red, "p2_blue": p2_blue,
    }

# -----------------------------------------------------------
# Command-line interface
# -----------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Hex arena: pit two black-box players against each other")
    ap.add_argument("--player1", default="monte_carlo_player", help="module name for player 1 (importable)")
    ap.add_argument("--player2", default="random_player", help="module name for player 2 (importable)")
    ap.add_argument("--size", type=int, default=4, help="board size n (n×n)")
    ap.add_argument("--games", type=int, default=20, help="number of games to play")
    ap.add_argument("--mode", choices=["p1_red", "p2_red", "alternate"],
                    default="alternate", help="colour assignment scheme")
    ap.add_argument("--seed", type=int, default=42, help="RNG seed for reproducibility")
    ap.add_argument("--repeats", type=int, default=DEFAULT_REPEATS, help="playouts passed to Monte Carlo players")
    ap.add_argument("--workers", type=int, default=1, help="processes passed to Monte Carlo players")
    ap.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    p1 = load_player(args.player1)
    p2 = load_player(args.player2)

    run_match(
        size=args.size,
        games=args.games,
        player1_mod=p1,
        player2_mod=p2,
        mode=args.mode,
        seed=args.seed,
        repeats=args.repeats,
        workers=args.workers,
    )

if __name__ == "__main__":
    main()

# run with: python3 hex_arena.py --player1 monte_carlo_player --player2 random_player --size 4 --games 20 --repeats 300
