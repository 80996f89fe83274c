# -*- coding: utf-8 -*-
"""
A play session: the board, the score and the state machine driving them.
"""
import logging
from enum import Enum
from typing import NamedTuple, Optional

from numpy import ndarray

from cyberpunk2048.core import Direction, TileSpawner, has_moves, new_board, slide
from cyberpunk2048.storage import BestScore, MemoryStore

from .observer import GameObserver, NullObserver

logger = logging.getLogger(__name__)


class GameState(str, Enum):
    """Whether the session still accepts moves."""

    PLAYING = "playing"
    GAME_OVER = "game_over"


class TurnOutcome(NamedTuple):
    """What a directional input did to the session."""

    direction: Direction
    moved: bool
    score_delta: int
    spawned: Optional[tuple[int, int]]
    state: GameState


class GameSession:
    """
    The 2048 game loop.

    The session owns the board, the score, the best score and the game-over flag. Each call to
    ``move`` runs the whole turn synchronously: slide, score, spawn, then check for the end of the
    game. A move that changes nothing is a no-op: no tile spawns and nothing is checked.
    """

    def __init__(
        self,
        size: int = 4,
        spawner: Optional[TileSpawner] = None,
        best_score: Optional[BestScore] = None,
        observer: Optional[GameObserver] = None,
    ):
        """
        Start a new session.

        Parameters
        ----------
        size : int, optional
            The size of the square grid (default is 4).
        spawner : TileSpawner, optional
            Source of new tiles; a default spawner is built if omitted.
        best_score : BestScore, optional
            Persistent best score; an in-memory one is used if omitted.
        observer : GameObserver, optional
            Notified of every transition; defaults to a no-op observer.
        """
        self.size = size
        self._spawner = spawner or TileSpawner()
        self._best = best_score or BestScore(MemoryStore())
        self._observer = observer or NullObserver()

        self._board: ndarray = new_board(size)
        self._score = 0
        self._state = GameState.PLAYING
        self._new_tiles: set[tuple[int, int]] = set()

        self.new_game()

    @property
    def board(self) -> ndarray:
        """A copy of the current board."""
        return self._board.copy()

    @property
    def score(self) -> int:
        return self._score

    @property
    def best_score(self) -> int:
        return self._best.value

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_over(self) -> bool:
        return self._state is GameState.GAME_OVER

    def new_game(self) -> ndarray:
        """
        Reset the board and the score, then place two random tiles.

        Accepted in any state. The best score is kept.

        Returns
        -------
        ndarray
            The new board.
        """
        self._board = new_board(self.size)
        self._score = 0
        self._state = GameState.PLAYING
        self._new_tiles.clear()

        for _ in range(2):
            self._spawn()

        logger.info("New game on a %dx%d board", self.size, self.size)
        self._observer.on_new_game(self)
        return self.board

    def move(self, direction: Direction) -> TurnOutcome:
        """
        Play one turn.

        Parameters
        ----------
        direction : Direction
            The direction to slide the tiles, or its name.

        Returns
        -------
        TurnOutcome
            Whether the board changed, the score gained, the cell that received a new tile and the
            state after the turn.

        Raises
        ------
        ValueError
            If ``direction`` is not one of the four directions.
        """
        direction = Direction.parse(direction)
        if self.is_over:
            return TurnOutcome(direction, False, 0, None, self._state)

        result = slide(self._board, direction)
        if not result.moved:
            outcome = TurnOutcome(direction, False, 0, None, self._state)
            self._observer.on_turn(self, outcome)
            return outcome

        self._board = result.board
        self._score += result.score
        self._best.record(self._score)

        spawned = self._spawn()
        if not has_moves(self._board):
            self._state = GameState.GAME_OVER

        outcome = TurnOutcome(direction, True, result.score, spawned, self._state)
        self._observer.on_turn(self, outcome)
        if self.is_over:
            logger.info("Game over, final score %d", self._score)
            self._observer.on_game_over(self)
        return outcome

    def drain_new_tiles(self) -> set[tuple[int, int]]:
        """
        Return the cells that received a tile since the last call, and forget them.

        Renderers call this once per frame to animate fresh tiles.
        """
        tiles = set(self._new_tiles)
        self._new_tiles.clear()
        return tiles

    def _spawn(self) -> Optional[tuple[int, int]]:
        self._board, cell = self._spawner.spawn(self._board)
        if cell is not None:
            self._new_tiles.add(cell)
        return cell
