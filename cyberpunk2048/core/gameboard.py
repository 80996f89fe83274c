"""
Core functionality of the 2048 board: merging lines, sliding the board, spawning tiles and
detecting the end of the game.
"""

import logging
from typing import NamedTuple, Optional, Protocol

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array_equal, asarray, int64, ndarray, rot90, zeros
from numpy.random import PCG64DXSM, default_rng

from cyberpunk2048.core.gamemove import Direction

logger = logging.getLogger(__name__)

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Module-level generator for performance (avoids repeated initialization).
_GENERATOR = default_rng(PCG64DXSM())


class MoveResult(NamedTuple):
    """Outcome of sliding a board in one direction."""

    board: ndarray
    score: int
    moved: bool


class SpawnResult(NamedTuple):
    """Board after a spawn attempt, and the cell that received the tile (None if the board was full)."""

    board: ndarray
    cell: Optional[tuple[int, int]]


class RandomSource(Protocol):
    """The subset of ``numpy.random.Generator`` the spawner relies on."""

    def integers(self, high: int) -> int: ...

    def random(self) -> float: ...


def new_board(size: int = 4) -> ndarray:
    """Create an empty ``size`` x ``size`` board."""
    return zeros((size, size), dtype=int64)


def merge_line(line: ndarray) -> tuple[ndarray, int]:
    """
    Merge adjacent equal values of a line towards its start.

    Parameters
    ----------
    line : ndarray
        A 1D array holding one row or column, already ordered in the direction of the move.

    Returns
    -------
    merged_line : ndarray
        The reduced line, right-padded with zeros to the original length.
    score : int
        The sum of every tile created by a merge.

    Notes
    -----
    - Zeros (empty cells) are dropped before merging, so gaps never block a merge.
    - Each tile can only be merged once per call.
    - Equal values separated by another tile never merge.
    """
    line = asarray(line)
    non_zero = line[line != 0]
    result = zeros(len(line), dtype=line.dtype)
    score = 0

    i = 0
    position = 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            merged = non_zero[i] * 2
            result[position] = merged
            score += int(merged)
            i += 2
        else:
            result[position] = non_zero[i]
            i += 1
        position += 1

    return result, score


def slide_and_merge(board: ndarray) -> tuple[ndarray, int]:
    """
    Slide every row of the board to the left and merge.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array.

    Returns
    -------
    updated_board : ndarray
        A new board; the input is left untouched.
    score : int
        The total score obtained from all merges.
    """
    result = zeros(board.shape, dtype=board.dtype)
    score = 0

    for i, row in enumerate(board):
        merged_row, score_row = merge_line(row)
        result[i] = merged_row
        score += score_row

    return result, score


def latent_state(state: ndarray, direction: Direction) -> tuple[ndarray, int]:
    """
    Compute the board after a move, without adding a new tile.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.
    direction : Direction
        The move to apply.

    Returns
    -------
    new_state : ndarray
        The board after sliding.
    score : int
        The score gained by the move.

    Notes
    -----
    The board is rotated so that ``direction`` becomes a left slide. Reading a rotated row from
    left to right is the same as reading the original line from its near edge inward, so
    ``right`` and ``down`` traverse in reverse index order and ``left`` and ``up`` in ascending
    order. The inverse rotation writes the merged lines back.
    """
    turns = int(Direction.parse(direction))
    updated_board, score = slide_and_merge(rot90(state, k=turns))
    return rot90(updated_board, k=-turns).copy(), score


def slide(state: ndarray, direction: Direction) -> MoveResult:
    """
    Apply a move to the board.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. Never modified.
    direction : Direction
        The move to apply.

    Returns
    -------
    MoveResult
        The new board, the score gained and whether any cell changed.
    """
    new_state, score = latent_state(state, direction)
    return MoveResult(board=new_state, score=score, moved=not array_equal(new_state, state))


def empty_cells(state: ndarray) -> list[tuple[int, int]]:
    """Coordinates of every empty cell, in row-major order."""
    return [(int(row), int(col)) for row, col in argwhere(state == 0)]


class TileSpawner:
    """
    Place new tiles on random empty cells.

    The cell is chosen uniformly among the empty ones; the tile is a 4 with probability
    ``four_probability`` and a 2 otherwise. Both draws come from ``rng``, so tests can pin the
    outcome with a seeded generator or a stub exposing ``integers`` and ``random``.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        four_probability: float = TILE_SPAWN_PROBS[4],
        seed: Optional[int] = None,
    ):
        """
        Parameters
        ----------
        rng : RandomSource, optional
            Random source; defaults to the module generator, or a fresh one when ``seed`` is set.
        four_probability : float, optional
            Probability that a spawned tile is a 4 (default 0.1).
        seed : int, optional
            Seed used to build a dedicated generator when ``rng`` is not given.
        """
        if not 0.0 <= four_probability <= 1.0:
            raise ValueError(f'four_probability must be in [0, 1], got {four_probability}')
        if rng is None:
            rng = default_rng(seed) if seed is not None else _GENERATOR
        self._rng = rng
        self.four_probability = four_probability

    def choose_value(self) -> int:
        """Draw the value of the next tile."""
        return 4 if self._rng.random() < self.four_probability else 2

    def spawn(self, state: ndarray) -> SpawnResult:
        """
        Add one tile to a random empty cell.

        Parameters
        ----------
        state : ndarray
            The current board. Never modified.

        Returns
        -------
        SpawnResult
            A copy of the board with the new tile, and its coordinates. When the board is full,
            the board is returned as is and ``cell`` is None.
        """
        cells = empty_cells(state)
        if not cells:
            return SpawnResult(board=state, cell=None)

        cell = cells[int(self._rng.integers(len(cells)))]
        new_state = state.copy()
        new_state[cell] = self.choose_value()
        logger.debug('Spawned %d at %s', new_state[cell], cell)
        return SpawnResult(board=new_state, cell=cell)


def has_moves(state: ndarray) -> bool:
    """
    Check whether the player still has a legal move.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if a cell is empty or two horizontally or vertically adjacent cells are equal.

    Notes
    -----
    Comparing each cell with its right and bottom neighbour covers the left and upper pairs too.
    """
    if not np_all(state != 0):
        return True
    return bool(np_any(state[:-1] == state[1:]) or np_any(state[:, :-1] == state[:, 1:]))


def is_done(state: ndarray) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if the board is full and no adjacent cells share a value.
    """
    return not has_moves(state)
