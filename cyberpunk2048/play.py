# -*- coding: utf-8 -*-
"""
Play 2048 in a Matplotlib window, with the arrow keys or by dragging across the board.
"""
import argparse
import logging
from typing import Optional

from cyberpunk2048.config import LOG_LEVELS, GameConfig
from cyberpunk2048.controls import GameController, SwipeDetector
from cyberpunk2048.core import TileSpawner
from cyberpunk2048.game import GameSession, LoggingObserver, NullObserver
from cyberpunk2048.storage import BestScore, JsonFileStore
from cyberpunk2048.utils import WindowBoard

logger = logging.getLogger(__name__)


def build_session(config: GameConfig) -> GameSession:
    """
    Assemble a session from the configuration.

    Parameters
    ----------
    config : GameConfig
        Settings of the session.

    Returns
    -------
    GameSession
        A session with a fresh board and the stored best score.
    """
    return GameSession(
        size=config.size,
        spawner=TileSpawner(four_probability=config.four_probability, seed=config.seed),
        best_score=BestScore(JsonFileStore(config.store_path)),
        observer=LoggingObserver() if config.debug else NullObserver(),
    )


def redraw(window: WindowBoard, session: GameSession):
    """
    Redraw the game board with the tiles spawned since the last frame.

    Parameters
    ----------
    window: WindowBoard
        Class to draw the game board
    session: GameSession
        The game to draw
    """
    window.show_board(
        session.board,
        new_tiles=session.drain_new_tiles(),
        score=session.score,
        best_score=session.best_score,
        game_over=session.is_over,
    )


def key_handler(controller: GameController, window: WindowBoard, key: Optional[str]):
    """
    Handle the keyboard.

    Parameters
    ----------
    controller: GameController
        Dispatches the key to the session
    window: WindowBoard
        Class to draw the game board
    key: str
        Matplotlib key name
    """
    if key == "escape":
        window.close()
        return

    controller.handle_key(key)
    redraw(window, controller.session)


def release_handler(controller: GameController, window: WindowBoard, x: float, y: float):
    """Finish a drag and redraw if it produced a move."""
    outcome = controller.handle_release(x, y)
    if outcome is not None and outcome.moved:
        redraw(window, controller.session)


def parse_args(argv: Optional[list[str]] = None) -> GameConfig:
    """Build the configuration from the command line."""
    defaults = GameConfig()
    parser = argparse.ArgumentParser(description="Play 2048")
    parser.add_argument("--size", type=int, default=defaults.size, help="Width and height of the board")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the tile spawner")
    parser.add_argument(
        "--four-probability", type=float, default=defaults.four_probability, help="Chance that a new tile is a 4"
    )
    parser.add_argument(
        "--swipe-threshold", type=float, default=defaults.swipe_threshold, help="Minimum drag length in pixels"
    )
    parser.add_argument(
        "--swipe-cooldown", type=float, default=defaults.swipe_cooldown, help="Seconds ignored after a swipe"
    )
    parser.add_argument("--store", default=str(defaults.store_path), help="File holding the best score")
    parser.add_argument("--debug", action="store_true", help="Log every turn")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=defaults.log_level, help="Logging level"
    )
    args = parser.parse_args(argv)

    return GameConfig(
        size=args.size,
        four_probability=args.four_probability,
        swipe_threshold=args.swipe_threshold,
        swipe_cooldown=args.swipe_cooldown,
        store_path=args.store,
        seed=args.seed,
        debug=args.debug,
        log_level=args.log_level,
    )


def main(argv: Optional[list[str]] = None):
    config = parse_args(argv)
    logging.basicConfig(level=config.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    logger.info("Starting with %s", config)
    session = build_session(config)
    controller = GameController(
        session, SwipeDetector(threshold=config.swipe_threshold, cooldown=config.swipe_cooldown)
    )

    window = WindowBoard(title="Cyberpunk 2048", size=config.size)
    window.register_key_handler(lambda key: key_handler(controller, window, key))
    window.register_drag_handlers(
        controller.handle_press,
        lambda x, y: release_handler(controller, window, x, y),
    )

    redraw(window, session)

    # Blocking event loop
    window.show(block=True)


if __name__ == "__main__":
    main()
