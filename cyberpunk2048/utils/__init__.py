# -*- coding: utf-8 -*-
"""
Display helpers for the 2048 game.
"""

from .windows import WindowBoard

__all__ = ["WindowBoard"]
