# -*- coding: utf-8 -*-
"""
Observers notified by the game session on every state transition.
"""
import logging
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .session import GameSession, TurnOutcome

logger = logging.getLogger(__name__)


class GameObserver(Protocol):
    """Receives the transitions of a ``GameSession``."""

    def on_new_game(self, session: "GameSession") -> None: ...

    def on_turn(self, session: "GameSession", outcome: "TurnOutcome") -> None: ...

    def on_game_over(self, session: "GameSession") -> None: ...


class NullObserver:
    """Observer that ignores everything."""

    def on_new_game(self, session: "GameSession") -> None:
        pass

    def on_turn(self, session: "GameSession", outcome: "TurnOutcome") -> None:
        pass

    def on_game_over(self, session: "GameSession") -> None:
        pass


class LoggingObserver:
    """
    Observer writing every transition to the log.

    Turns are logged at DEBUG level together with the board, which makes it a textual replacement
    for an on-screen debug overlay.
    """

    def __init__(self, level: int = logging.DEBUG):
        self.level = level

    def on_new_game(self, session: "GameSession") -> None:
        logger.log(self.level, "New game (best=%d)\n%s", session.best_score, session.board)

    def on_turn(self, session: "GameSession", outcome: "TurnOutcome") -> None:
        if not outcome.moved:
            logger.log(self.level, "%s changed nothing", outcome.direction.name.lower())
            return
        logger.log(
            self.level,
            "%s: +%d (score=%d), spawned at %s\n%s",
            outcome.direction.name.lower(),
            outcome.score_delta,
            session.score,
            outcome.spawned,
            session.board,
        )

    def on_game_over(self, session: "GameSession") -> None:
        logger.log(self.level, "Game over with score %d", session.score)
