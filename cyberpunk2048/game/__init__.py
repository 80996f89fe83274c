# -*- coding: utf-8 -*-
"""
The game loop of 2048 and the observers it reports to.
"""

from .observer import GameObserver, LoggingObserver, NullObserver
from .session import GameSession, GameState, TurnOutcome

__all__ = ["GameObserver", "GameSession", "GameState", "LoggingObserver", "NullObserver", "TurnOutcome"]
