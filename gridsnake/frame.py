from __future__ import annotations

from gridsnake.game import Snapshot
from gridsnake.geometry import GridGeometry


def board_text(snapshot: Snapshot, geometry: GridGeometry) -> str:
    """
    Text board, top row first:
    . = empty, A = food, X = active hazard, o = body, H = head
    """
    board = [["." for _ in range(geometry.width_cells)] for _ in range(geometry.height_cells)]

    fx, fy = snapshot.food
    board[fy][fx] = "A"
    for (x, y), active in snapshot.hazards:
        if active:
            board[y][x] = "X"
    # a head that already left the board is simply not drawn
    for index, (x, y) in enumerate(snapshot.body):
        if geometry.contains((x, y)):
            board[y][x] = "H" if index == 0 else "o"

    return "\n".join("".join(row) for row in board)
