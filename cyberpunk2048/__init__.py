# -*- coding: utf-8 -*-
"""
Cyberpunk 2048: the sliding tile puzzle.

The board logic lives in ``cyberpunk2048.core``, the game loop in ``cyberpunk2048.game``.
"""

from .core import Direction, TileSpawner, has_moves, merge_line, slide
from .game import GameSession, GameState

__all__ = ["Direction", "GameSession", "GameState", "TileSpawner", "has_moves", "merge_line", "slide"]
