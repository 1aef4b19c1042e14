
"""Piece catalog and in-place rotation"""
from typing import Dict, List

Shape = List[List[int]]

# order fixes the colour id of each type: T=1 .. Z=7
PIECES = "TOLJISZ"

SHAPES: Dict[str, Shape] = {
    "T": [[0,0,0],[1,1,1],[0,1,0]],
    "O": [[2,2],[2,2]],
    "L": [[0,3,0],[0,3,0],[0,3,3]],
    "J": [[0,4,0],[0,4,0],[4,4,0]],
    "I": [[0,5,0,0],[0,5,0,0],[0,5,0,0],[0,5,0,0]],
    "S": [[0,6,6],[6,6,0],[0,0,0]],
    "Z": [[7,7,0],[0,7,7],[0,0,0]],
}

def type_id(t: str) -> int:
    if t not in SHAPES:
        raise ValueError(f"unknown piece type: {t!r}")
    return PIECES.index(t) + 1

def create_piece(t: str) -> Shape:
    """Return a newly allocated shape matrix for piece type ``t``."""
    if t not in SHAPES:
        raise ValueError(f"unknown piece type: {t!r}")
    return [row[:] for row in SHAPES[t]]

def width(shape: Shape) -> int:
    return len(shape[0])

def rotate(shape: Shape, direction: int) -> None:
    """Rotate a square matrix a quarter turn in place.

    Transpose, then mirror: reversing each row gives a clockwise turn
    (direction > 0), reversing the row order gives a counter-clockwise one.
    """
    for y in range(len(shape)):
        for x in range(y):
            shape[x][y], shape[y][x] = shape[y][x], shape[x][y]
    if direction > 0:
        for row in shape:
            row.reverse()
    else:
        shape.reverse()
