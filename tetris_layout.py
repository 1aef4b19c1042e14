# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG

@dataclass
class Dims:
    cell: int
    score_h: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int

def compute_dims(cols: int = CONFIG["COLS"], rows: int = CONFIG["ROWS"]) -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    score_h = 28

    board_w = cols * cell
    board_h = rows * cell

    return Dims(
        cell=cell, score_h=score_h,
        board_w=board_w, board_h=board_h,
        total_w=board_w, total_h=score_h + board_h,
        board_x=0, board_y=score_h,
    )
