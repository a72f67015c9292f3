# hex_renderer.py
#
# Public API:
#   board_to_text(board) -> str
#   render_board(board, output=None, show=False, highlight=None) -> None
#
# Example:
#   from hex_renderer import render_board
#   render_board(game.board, output="game.png", highlight=game.moves[-1])
#
# Notes:
#   - 0-based coordinates (row, col)
#   - Red  (X) connects Top↔Bottom
#   - Blue (O) connects Left↔Right
#   - No dependency on the evaluator; it only draws.

from __future__ import annotations

import math
from typing import Dict, Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.patches import Circle, RegularPolygon

from hex_board import HexBoard, Move, State

STONE_COLOURS = {State.RED: "#d62728", State.BLUE: "#1f77b4"}


# --------------------------- console board ---------------------------

def board_to_text(board: HexBoard) -> str:
    """
    Console drawing: a column header, then one line per row (row number first,
    cells joined by ' - ') with a line of slanted links between rows. Every
    row is indented one step more than the previous one.
    """
    n = board.size
    g = board.grid()
    lines = ["".join(f"  {c} " for c in range(n))]
    for r in range(n):
        cells = " - ".join(State(int(v)).symbol for v in g[r])
        lines.append(f"{'  ' * r}{r} {cells}")
        if r < n - 1:
            lines.append("  " * (r + 1) + " \\" + " / \\" * (n - 1))
    return "\n".join(lines)


# ------------- geometry helpers (pointy-top hex layout) ----------------

def _hex_centers(size: int, R: float = 1.0) -> Dict[Move, Tuple[float, float]]:
    """Map (row, col) -> (x, y) center coordinates for an n×n rhombus of hex cells."""
    w = math.sqrt(3.0) * R     # horizontal spacing
    v = 1.5 * R                # vertical spacing
    centers: Dict[Move, Tuple[float, float]] = {}
    for r in range(size):
        for c in range(size):
            centers[(r, c)] = (c * w + r * (w / 2.0), -r * v)
    return centers


def _board_bounds(centers: Dict[Move, Tuple[float, float]], pad: float = 1.4) -> Tuple[float, float, float, float]:
    xs = [p[0] for p in centers.values()]
    ys = [p[1] for p in centers.values()]
    return (min(xs) - pad, max(xs) + pad, min(ys) - pad, max(ys) + pad)


# --------------------------- image board -----------------------------

def render_board(
    board: HexBoard,
    *,
    output: str | None = None,
    show: bool = False,
    highlight: Optional[Move] = None,
    scale: float = 1.0,
    dpi: int = 150,
) -> None:
    """
    Draw a Hex position with matplotlib.

    Parameters
    ----------
    board : HexBoard
        Position to draw.
    output : str | None
        If provided, save the image to this path (e.g., 'board.png', '.pdf', '.svg').
    show : bool
        If True, show an interactive window.
    highlight : (row, col) | None
        Cell to ring, typically the last move.
    scale : float
        Visual scale (1.0 = default size).
    dpi : int
        Resolution when saving.
    """
    n = board.size
    R = 1.0 * scale
    centers = _hex_centers(n, R)
    xmin, xmax, ymin, ymax = _board_bounds(centers, pad=1.4 * scale)

    fig, ax = plt.subplots(figsize=(6 * scale, 6 * scale))
    ax.set_aspect('equal')
    ax.set_xlim(xmin, xmax)
    ax.set_ylim(ymin, ymax)
    ax.axis('off')

    for (x, y) in centers.values():
        ax.add_patch(RegularPolygon(
            (x, y), numVertices=6, radius=R, orientation=0.0,
            facecolor="#f2f2f2", edgecolor="#888888", linewidth=1.0,
        ))

    ax.text((xmin + xmax) / 2, ymax + 0.25 * scale, "Blue: Left ↔ Right",
            ha='center', va='bottom', fontsize=9 * scale, color=STONE_COLOURS[State.BLUE])
    ax.text(xmin - 0.25 * scale, (ymin + ymax) / 2, "Red: Top ↔ Bottom",
            ha='right', va='center', rotation=90, fontsize=9 * scale, color=STONE_COLOURS[State.RED])

    stone_r = 0.58 * R
    for (r, c), (x, y) in centers.items():
        side = board.get(r, c)
        if side == State.EMPTY:
            continue
        ax.add_patch(Circle((x, y), radius=stone_r, facecolor=STONE_COLOURS[side],
                            edgecolor='black', linewidth=1.0))

    if highlight is not None:
        xL, yL = centers[highlight]
        ax.add_patch(Circle((xL, yL), radius=stone_r * 1.15,
                            facecolor=(0, 0, 0, 0), edgecolor='#2ca02c', linewidth=2.0))

    # coordinate ticks (top row cols, left col rows)
    for c in range(n):
        xt, yt = centers[(0, c)]
        ax.text(xt, yt + (R * 0.95), f"{c}", ha='center', va='bottom', fontsize=7 * scale, color='#555555')
    for r in range(n):
        xl, yl = centers[(r, 0)]
        ax.text(xl - (math.sqrt(3) * R * 0.65), yl, f"{r}", ha='right', va='center', fontsize=7 * scale, color='#555555')

    if output:
        plt.savefig(output, bbox_inches='tight', dpi=dpi)
    if show:
        plt.show()
    plt.close(fig)
