# -*- coding: utf-8 -*-
"""
Pure board logic for the 2048 game.

It includes the line reducer, the move engine, the tile spawner, the terminal detector and
helpers to list the legal directions of a board.
"""

from .gameboard import (
    TILE_SPAWN_PROBS,
    MoveResult,
    SpawnResult,
    TileSpawner,
    empty_cells,
    has_moves,
    is_done,
    latent_state,
    merge_line,
    new_board,
    slide,
    slide_and_merge,
)
from .gamemove import Direction, can_move, illegal_actions, legal_actions, legal_actions_mask

__all__ = [
    "TILE_SPAWN_PROBS",
    "Direction",
    "MoveResult",
    "SpawnResult",
    "TileSpawner",
    "can_move",
    "empty_cells",
    "has_moves",
    "illegal_actions",
    "is_done",
    "latent_state",
    "legal_actions",
    "legal_actions_mask",
    "merge_line",
    "new_board",
    "slide",
    "slide_and_merge",
]
