# -*- coding: utf-8 -*-
"""
Turn keyboard presses and pointer drags into moves.
"""
import logging
import time
from threading import Lock
from typing import Callable, Optional

from cyberpunk2048.core import Direction
from cyberpunk2048.game import GameSession, TurnOutcome

logger = logging.getLogger(__name__)

KEY_BINDINGS: dict[str, Direction] = {
    "left": Direction.LEFT,
    "up": Direction.UP,
    "right": Direction.RIGHT,
    "down": Direction.DOWN,
}

NEW_GAME_KEYS = frozenset({"n", "backspace"})


def resolve_swipe(dx: float, dy: float, threshold: float = 30.0) -> Optional[Direction]:
    """
    Find the direction of a drag.

    Parameters
    ----------
    dx : float
        Horizontal travel, positive to the right.
    dy : float
        Vertical travel in screen coordinates, positive downward.
    threshold : float, optional
        Minimum travel along the dominant axis (default is 30).

    Returns
    -------
    Direction or None
        The direction of the dominant axis, or None for short or perfectly diagonal drags.
    """
    if abs(dx) == abs(dy):
        return None
    if abs(dx) > abs(dy):
        if abs(dx) <= threshold:
            return None
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    if abs(dy) <= threshold:
        return None
    return Direction.DOWN if dy > 0 else Direction.UP


class SwipeDetector:
    """
    Track a pointer between press and release and report at most one direction per gesture.

    Once a swipe has been reported, further gestures are ignored for ``cooldown`` seconds, so a
    single physical swipe that fires twice is only counted once.
    """

    def __init__(
        self,
        threshold: float = 30.0,
        cooldown: float = 0.12,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.threshold = threshold
        self.cooldown = cooldown
        self._clock = clock
        self._start: Optional[tuple[float, float]] = None
        self._last_swipe: Optional[float] = None

    def press(self, x: float, y: float):
        """Record where the gesture starts."""
        self._start = (x, y)

    def cancel(self):
        """Forget the gesture in progress."""
        self._start = None

    def release(self, x: float, y: float) -> Optional[Direction]:
        """
        Finish the gesture.

        Returns
        -------
        Direction or None
            The swipe direction, or None if there was no press, the drag was too short or
            ambiguous, or the cooldown of the previous swipe is still running.
        """
        if self._start is None:
            return None
        start_x, start_y = self._start
        self._start = None

        now = self._clock()
        if self._last_swipe is not None and now - self._last_swipe < self.cooldown:
            logger.debug("Swipe ignored during cooldown")
            return None

        direction = resolve_swipe(x - start_x, y - start_y, self.threshold)
        if direction is not None:
            self._last_swipe = now
        return direction


class GameController:
    """
    Dispatch inputs to a game session, one turn at a time.

    An input arriving while a turn is still being processed is dropped rather than queued.
    """

    def __init__(self, session: GameSession, swipes: Optional[SwipeDetector] = None):
        self.session = session
        self.swipes = swipes or SwipeDetector()
        self._lock = Lock()

    def play(self, direction: Direction) -> Optional[TurnOutcome]:
        """
        Run one turn.

        Returns
        -------
        TurnOutcome or None
            The outcome, or None if another turn was in progress.
        """
        if not self._lock.acquire(blocking=False):
            logger.debug("Dropped %s: a turn is in progress", direction)
            return None
        try:
            return self.session.move(direction)
        finally:
            self._lock.release()

    def new_game(self):
        with self._lock:
            self.session.new_game()

    def handle_key(self, key: Optional[str]) -> Optional[TurnOutcome]:
        """
        React to a key name as reported by matplotlib (``"left"``, ``"n"``, ...).

        Returns the outcome of the turn when the key is a direction.
        """
        if key in NEW_GAME_KEYS:
            self.new_game()
            return None
        direction = KEY_BINDINGS.get(key)
        if direction is None:
            return None
        return self.play(direction)

    def handle_press(self, x: float, y: float):
        if self.session.is_over:
            return
        self.swipes.press(x, y)

    def handle_release(self, x: float, y: float) -> Optional[TurnOutcome]:
        """Finish a drag in screen coordinates and play the swipe, if any."""
        if self.session.is_over:
            self.swipes.cancel()
            return None
        direction = self.swipes.release(x, y)
        if direction is None:
            return None
        return self.play(direction)
