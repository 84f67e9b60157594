# main.py
import argparse
import logging

import pygame # type: ignore
from .config import WIDTH, HEIGHT, FPS, Config
from .controller import GameController
from .game import GameEngine
from .render import PygameRenderer

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> Config:
    parser = argparse.ArgumentParser(description="Grid snake")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)
    return Config(seed=args.seed, log_level=args.log_level)


def main(argv=None):
    cfg = parse_args(argv)
    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    renderer = PygameRenderer(screen, font)
    controller = GameController(
        GameEngine(seed=cfg.seed),
        renderer,
        score_sink=lambda score: logger.debug("Score is now %d", score),
    )
    controller.reset()
    running = True

    while running:
        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    controller.handle_key(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                action = renderer.button_at(event.pos)
                if action is not None:
                    controller.handle_action(action)

        # 2) update (movement gated by the tick scheduler)
        controller.update()

        # 3) present whatever the controller last rendered
        pygame.display.flip()
        clock.tick(FPS)

    pygame.quit()

if __name__ == "__main__":
    main()
