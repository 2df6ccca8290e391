from __future__ import annotations

import argparse
import logging

import pygame

from gridsnake.config import Config
from gridsnake.controls import InputRouter
from gridsnake.driver import TickDriver
from gridsnake.frame import board_text
from gridsnake.game import GameSession
from gridsnake.render import Renderer

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    defaults = Config()
    parser = argparse.ArgumentParser(description="Play Snake with poison on a fixed grid")
    parser.add_argument("--width", type=int, default=defaults.board_width, help="Board width in pixels")
    parser.add_argument("--height", type=int, default=defaults.board_height, help="Board height in pixels")
    parser.add_argument("--cell-size", type=int, default=defaults.cell_size)
    parser.add_argument("--tick-ms", type=int, default=defaults.tick_ms, help="Milliseconds between moves")
    parser.add_argument("--hazards", type=int, default=defaults.hazard_count, help="Number of poison cells")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> Config:
    return Config(
        board_width=args.width,
        board_height=args.height,
        cell_size=args.cell_size,
        tick_ms=args.tick_ms,
        hazard_count=args.hazards,
        seed=args.seed,
    )


def run_tick(driver: TickDriver, now_ms: int) -> bool:
    """Let the driver fire a tick; log the final board on the tick that ends the game."""
    fired = driver.update(now_ms)
    session = driver.session
    if fired and not session.running:
        logger.info("Final board:\n%s", board_text(session.snapshot(), session.geometry))
    return fired


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    session = GameSession(config_from_args(args))
    renderer = Renderer(session.geometry)
    router = InputRouter(session)
    driver = TickDriver(session)
    clock = pygame.time.Clock()

    driver.start(pygame.time.get_ticks())
    running = True
    while running:
        running = router.handle(pygame.event.get())
        run_tick(driver, pygame.time.get_ticks())
        renderer.draw(session.snapshot())
        clock.tick(120)

    print(f"Final score: {session.score}")
    renderer.close()


if __name__ == "__main__":
    main()
