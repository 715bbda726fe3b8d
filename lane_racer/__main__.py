import argparse
import logging
import os

import pygame

from lane_racer.config import GameConfig
from lane_racer.game import Match
from lane_racer.loop import FrameLoop
from lane_racer.render import Renderer

logger = logging.getLogger("lane_racer")

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
START_KEYS = (pygame.K_SPACE, pygame.K_RETURN)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="lane-racer", description="Play Lane Racer in a window.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the spawn generator")
    parser.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)


def start_or_restart(loop):
    if loop.match.snapshot().ended:
        loop.restart()
    else:
        loop.start()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    # To run with display, unset the dummy video driver
    if "SDL_VIDEODRIVER" in os.environ:
        del os.environ["SDL_VIDEODRIVER"]

    config = GameConfig.from_env()
    renderer = Renderer(config)
    match = Match(config, seed=args.seed)
    loop = FrameLoop(match)

    screen = pygame.display.set_mode(renderer.size)
    pygame.display.set_caption("Lane Racer")
    clock = pygame.time.Clock()

    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in LEFT_KEYS:
                        match.press_left()
                    elif event.key in RIGHT_KEYS:
                        match.press_right()
                    elif event.key in START_KEYS and not loop.active:
                        start_or_restart(loop)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if loop.active:
                        match.tap(event.pos[0])
                    else:
                        start_or_restart(loop)

            loop.frame()
            screen.blit(renderer.draw(match.snapshot()), (0, 0))
            pygame.display.flip()
            clock.tick(config.fps)
    finally:
        loop.stop()
        renderer.close()


if __name__ == "__main__":
    main()
