
"""Board helpers: create, collide, merge, sweep, clear"""
from typing import List

Board = List[List[int]]

def create_board(cols: int, rows: int) -> Board:
    return [[0] * cols for _ in range(rows)]

def collide(board: Board, player) -> bool:
    """True if any block of the player's shape hits a wall, the floor or a locked cell.

    Rows above the board are open: a piece may hang over the top edge.
    """
    rows, cols = len(board), len(board[0])
    for y, row in enumerate(player.shape):
        for x, v in enumerate(row):
            if not v: continue
            bx, by = player.x + x, player.y + y
            if bx < 0 or bx >= cols or by >= rows: return True
            if by >= 0 and board[by][bx]: return True
    return False

def merge(board: Board, player) -> None:
    for y, row in enumerate(player.shape):
        for x, v in enumerate(row):
            if v:
                by = player.y + y
                if by >= 0: board[by][player.x + x] = v

def sweep(board: Board) -> int:
    """Remove full rows, shifting everything above down. Returns rows cleared.

    Row 0 is never examined.
    """
    cleared = 0
    cols = len(board[0])
    y = len(board) - 1
    while y > 0:
        if all(board[y]):
            del board[y]
            board.insert(0, [0] * cols)
            cleared += 1
        else:
            y -= 1
    return cleared

def clear(board: Board) -> None:
    for row in board:
        row[:] = [0] * len(row)
