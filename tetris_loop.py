
"""Fixed-interval drop clock"""
import logging
from tetris_config import CONFIG

log = logging.getLogger(__name__)

class GameLoop:
    """Accumulates elapsed time and drops the piece once per interval.

    An outside scheduler calls ``advance`` every frame with a monotonically
    increasing timestamp, paused or not; while paused the tick does no work.
    """
    def __init__(self, controller, drop_interval=CONFIG["DROP_INTERVAL_MS"]):
        self.controller = controller
        self.drop_interval = drop_interval
        self.drop_counter = 0
        self.last_time = 0
        self.is_playing = True

    def advance(self, time) -> bool:
        """Run one tick. Returns True when the frame should be redrawn."""
        if not self.is_playing:
            return False
        delta = time - self.last_time
        self.last_time = time
        self.drop_counter += delta
        if self.drop_counter > self.drop_interval:
            self.drop()
        return True

    def drop(self) -> bool:
        locked = self.controller.drop()
        self.drop_counter = 0
        return locked

    def start(self):
        if not self.is_playing:
            log.info("Resumed")
        self.is_playing = True

    def pause(self):
        if self.is_playing:
            log.info("Paused")
        self.is_playing = False
