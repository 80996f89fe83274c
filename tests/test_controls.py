"""
Tests for keyboard and swipe input.
"""

from unittest import TestCase, main

import numpy as np

from cyberpunk2048.controls import GameController, SwipeDetector, resolve_swipe
from cyberpunk2048.core import Direction, TileSpawner
from cyberpunk2048.game import GameSession, GameState


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class TestResolveSwipe(TestCase):
    def test_dominant_axis(self):
        self.assertIs(resolve_swipe(50, 10), Direction.RIGHT)
        self.assertIs(resolve_swipe(-50, 10), Direction.LEFT)
        self.assertIs(resolve_swipe(5, 40), Direction.DOWN)
        self.assertIs(resolve_swipe(5, -40), Direction.UP)

    def test_below_threshold(self):
        self.assertIsNone(resolve_swipe(30, 0))
        self.assertIsNone(resolve_swipe(0, -12))
        self.assertIs(resolve_swipe(12, 0, threshold=10), Direction.RIGHT)

    def test_diagonal_is_ambiguous(self):
        self.assertIsNone(resolve_swipe(80, 80))
        self.assertIsNone(resolve_swipe(-80, 80))


class TestSwipeDetector(TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.detector = SwipeDetector(threshold=30, cooldown=0.12, clock=self.clock)

    def test_one_swipe(self):
        self.detector.press(100, 100)
        self.assertIs(self.detector.release(40, 110), Direction.LEFT)

    def test_release_without_press(self):
        self.assertIsNone(self.detector.release(40, 110))

    def test_second_release_is_ignored(self):
        """A release event delivered twice for the same gesture counts once."""
        self.detector.press(0, 0)
        self.assertIs(self.detector.release(0, 100), Direction.DOWN)
        self.assertIsNone(self.detector.release(0, 100))

    def test_cooldown(self):
        self.detector.press(0, 0)
        self.assertIs(self.detector.release(100, 0), Direction.RIGHT)

        self.clock.now = 0.05
        self.detector.press(0, 0)
        self.assertIsNone(self.detector.release(100, 0))

        self.clock.now = 0.5
        self.detector.press(0, 0)
        self.assertIs(self.detector.release(100, 0), Direction.RIGHT)

    def test_short_drag_does_not_start_cooldown(self):
        self.detector.press(0, 0)
        self.assertIsNone(self.detector.release(5, 0))
        self.detector.press(0, 0)
        self.assertIs(self.detector.release(0, -60), Direction.UP)


class TestGameController(TestCase):
    def setUp(self):
        self.session = GameSession(spawner=TileSpawner(seed=0))
        self.session._board = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.clock = FakeClock()
        self.controller = GameController(self.session, SwipeDetector(clock=self.clock))

    def test_arrow_keys(self):
        outcome = self.controller.handle_key("left")
        self.assertTrue(outcome.moved)
        self.assertEqual(self.session.score, 4)

    def test_other_keys_are_ignored(self):
        self.assertIsNone(self.controller.handle_key("q"))
        self.assertIsNone(self.controller.handle_key(None))
        self.assertEqual(self.session.score, 0)

    def test_new_game_key(self):
        self.controller.handle_key("left")
        self.controller.handle_key("n")
        self.assertEqual(self.session.score, 0)
        self.assertEqual(np.count_nonzero(self.session.board), 2)

    def test_swipe_plays_one_move(self):
        self.controller.handle_press(200, 200)
        outcome = self.controller.handle_release(100, 205)
        self.assertIs(outcome.direction, Direction.LEFT)
        self.assertEqual(self.session.score, 4)

        # ##>: The duplicate release of the same gesture plays nothing.
        self.assertIsNone(self.controller.handle_release(100, 205))

    def test_input_dropped_while_turn_in_progress(self):
        self.controller._lock.acquire()
        try:
            self.assertIsNone(self.controller.play(Direction.LEFT))
        finally:
            self.controller._lock.release()
        self.assertEqual(self.session.score, 0)

    def test_swipes_ignored_after_game_over(self):
        self.session._state = GameState.GAME_OVER
        self.controller.handle_press(0, 0)
        self.assertIsNone(self.controller.handle_release(100, 0))


if __name__ == "__main__":
    main()
