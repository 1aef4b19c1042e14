from tetris_board import create_board
from tetris_player import Player, PlayerController


class FixedRandom:
    """Hands out piece types from a list, repeating the last one."""

    def __init__(self, types):
        self.types = list(types)

    def next_piece(self):
        if len(self.types) > 1:
            return self.types.pop(0)
        return self.types[0]


def make_controller(types="T", cols=12, rows=20):
    controller = PlayerController(create_board(cols, rows), FixedRandom(types))
    controller.reset()
    return controller


def fill_rows(board, rows, hole=None, value=1):
    for y in rows:
        board[y] = [0 if x == hole else value for x in range(len(board[y]))]


def player_at(shape, x, y, score=0):
    return Player(shape=shape, x=x, y=y, score=score)
