# -*- coding: utf-8 -*-
"""
Configuration of a play session.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

DEFAULT_STORE_PATH = Path.home() / ".cyberpunk2048" / "store.json"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class GameConfig:
    """
    Settings shared by the game session, the input handlers and the persistence layer.

    Attributes
    ----------
    size : int
        Width and height of the board.
    four_probability : float
        Probability that a spawned tile is a 4 rather than a 2.
    swipe_threshold : float
        Minimum travel, in pixels, along the dominant axis for a drag to count as a swipe.
    swipe_cooldown : float
        Seconds during which further swipes are ignored after one has been processed.
    store_path : Path
        JSON file holding the best score.
    seed : int, optional
        Seed of the tile spawner; None draws from the shared generator.
    debug : bool
        Whether to log every state transition.
    log_level : str
        Root logging level, one of LOG_LEVELS; forced to DEBUG when debug is set.
    """

    size: int = 4
    four_probability: float = 0.1
    swipe_threshold: float = 30.0
    swipe_cooldown: float = 0.12
    store_path: Path = field(default_factory=lambda: DEFAULT_STORE_PATH)
    seed: Optional[int] = None
    debug: bool = False
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f"size must be at least 2, got {self.size}")
        if not 0.0 <= self.four_probability <= 1.0:
            raise ValueError(f"four_probability must be in [0, 1], got {self.four_probability}")
        if self.swipe_threshold < 0:
            raise ValueError(f"swipe_threshold must be non-negative, got {self.swipe_threshold}")
        if self.swipe_cooldown < 0:
            raise ValueError(f"swipe_cooldown must be non-negative, got {self.swipe_cooldown}")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level}")
        if self.debug:
            self.log_level = "DEBUG"
        self.store_path = Path(self.store_path).expanduser()
