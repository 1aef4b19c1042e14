
import logging
import sys
import pygame
from tetris_game import Tetris
from tetris_input import command_for_key
from tetris_layout import compute_dims
from tetris_render import Renderer

log = logging.getLogger(__name__)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=logging.INFO, format='[TETRIS] %(asctime)s - %(message)s')
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    game = Tetris()
    dims = compute_dims(game.config["COLS"], game.config["ROWS"])
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 24)
    render = Renderer(dims, font)
    clock = pygame.time.Clock()
    log.info("Started: A/D move, S drop, Q/E rotate, P pause, Enter play")

    # First frame is always drawn; afterwards only ticks that ran redraw
    render.draw(screen, game)
    pygame.display.flip()

    while True:
        clock.tick(game.config["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                command = command_for_key(e.key)
                if command is not None:
                    game.handle(command)

        if game.advance(pygame.time.get_ticks()):
            render.draw(screen, game)
            pygame.display.flip()


if __name__ == '__main__':
    main()
