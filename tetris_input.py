
"""Keyboard to command mapping"""
from enum import Enum
from typing import Dict, Optional
import pygame

class Command(Enum):
    MOVE_LEFT = "move-left"
    MOVE_RIGHT = "move-right"
    SOFT_DROP = "soft-drop"
    ROTATE_CCW = "rotate-ccw"
    ROTATE_CW = "rotate-cw"
    START = "start"
    PAUSE = "pause"

KEYMAP: Dict[int, Command] = {
    pygame.K_a: Command.MOVE_LEFT,
    pygame.K_d: Command.MOVE_RIGHT,
    pygame.K_s: Command.SOFT_DROP,
    pygame.K_q: Command.ROTATE_CCW,
    pygame.K_e: Command.ROTATE_CW,
    pygame.K_RETURN: Command.START,
    pygame.K_p: Command.PAUSE,
}

def command_for_key(key: int) -> Optional[Command]:
    return KEYMAP.get(key)
