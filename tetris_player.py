
"""Active piece and the controller that moves it against the board"""
import logging
from dataclasses import dataclass, field
from tetris_board import Board, collide, merge, sweep, clear
from tetris_piece import Shape, create_piece, rotate, width
from tetris_rng import UniformRandom
from tetris_config import CONFIG

log = logging.getLogger(__name__)

@dataclass
class Player:
    shape: Shape = field(default_factory=list)
    x: int = 0
    y: int = 0
    score: int = 0

class PlayerController:
    """Owns the falling piece; every move is checked against the board.

    The board is only ever consulted through ``collide`` with this
    controller's player pushed in, never the other way round.
    """
    def __init__(self, board: Board, rng: UniformRandom, row_score: int = CONFIG["ROW_SCORE"]):
        self.board = board
        self.rng = rng
        self.row_score = row_score
        self.player = Player()

    def reset(self) -> None:
        t = self.rng.next_piece()
        p = self.player
        p.shape = create_piece(t)
        p.y = 0
        p.x = len(self.board[0]) // 2 - width(p.shape) // 2
        if collide(self.board, p):
            log.info("Spawn blocked (%s at x=%d), clearing board; final score %d", t, p.x, p.score)
            clear(self.board)
            p.score = 0

    def move(self, dx: int) -> bool:
        p = self.player
        p.x += dx
        if collide(self.board, p):
            p.x -= dx
            return False
        return True

    def drop(self) -> bool:
        """Fall one row; on landing lock the piece and spawn the next.

        Returns True when the piece locked.
        """
        p = self.player
        p.y += 1
        if not collide(self.board, p):
            return False
        p.y -= 1
        merge(self.board, p)
        log.debug("Locked piece at (%d, %d)", p.x, p.y)
        self.reset()
        cleared = sweep(self.board)
        if cleared:
            p.score += cleared * self.row_score
            log.debug("Cleared %d row(s), score %d", cleared, p.score)
        return True

    def rotate(self, direction: int) -> bool:
        """Rotate and search sideways for room: -1, +2, -3, +4 ... columns.

        Gives up once the trial offset exceeds the shape width, restoring the
        original shape and column. Returns False in that case.
        """
        p = self.player
        x = p.x
        offset = -1
        rotate(p.shape, direction)
        while collide(self.board, p):
            p.x += offset
            offset = -(offset + (1 if offset > 0 else -1))
            if offset > width(p.shape):
                rotate(p.shape, -direction)
                p.x = x
                log.debug("Rotation %+d rejected at x=%d", direction, x)
                return False
        return True

    @property
    def score(self) -> int:
        return self.player.score
