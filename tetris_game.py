
"""Game session: one board, one falling piece, one clock"""
import logging
from typing import Optional
from tetris_board import Board, create_board
from tetris_config import CONFIG
from tetris_input import Command
from tetris_loop import GameLoop
from tetris_player import Player, PlayerController
from tetris_rng import UniformRandom

log = logging.getLogger(__name__)

class Tetris:
    """A single game session.

    Nothing is shared between sessions; the caller owns the instance and
    feeds it commands and timestamps. Input keeps working while paused, only
    the timed drop stops.
    """
    def __init__(self, config: Optional[dict] = None, seed: Optional[int] = None):
        self.config = {**CONFIG, **(config or {})}
        if seed is None:
            seed = self.config["SEED"]
        self._board = create_board(self.config["COLS"], self.config["ROWS"])
        self.rng = UniformRandom(seed)
        self.controller = PlayerController(self._board, self.rng, self.config["ROW_SCORE"])
        self.loop = GameLoop(self.controller, self.config["DROP_INTERVAL_MS"])
        self.controller.reset()
        self._actions = {
            Command.MOVE_LEFT: lambda: self.controller.move(-1),
            Command.MOVE_RIGHT: lambda: self.controller.move(1),
            Command.SOFT_DROP: self.loop.drop,
            Command.ROTATE_CCW: lambda: self.controller.rotate(-1),
            Command.ROTATE_CW: lambda: self.controller.rotate(1),
            Command.START: self.loop.start,
            Command.PAUSE: self.loop.pause,
        }
        log.debug("New game %dx%d, seed=%r", self.config["COLS"], self.config["ROWS"], seed)

    def handle(self, command: Command):
        try:
            action = self._actions[command]
        except KeyError:
            raise ValueError(f"unknown command: {command!r}") from None
        return action()

    def advance(self, time) -> bool:
        return self.loop.advance(time)

    @property
    def board(self) -> Board:
        return self._board

    @property
    def player(self) -> Player:
        return self.controller.player

    @property
    def score(self) -> int:
        return self.controller.score

    @property
    def is_playing(self) -> bool:
        return self.loop.is_playing
