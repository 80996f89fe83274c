"""
Tests for the random-play simulation script.
"""

import importlib.util
from pathlib import Path
from unittest import TestCase, main

import numpy as np

SCRIPT_PATH = Path(__file__).resolve().parent.parent / "scripts" / "simulate_games.py"


def load_script():
    """Import scripts/simulate_games.py as a module."""
    spec = importlib.util.spec_from_file_location("simulate_games", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestSimulateGames(TestCase):
    def setUp(self):
        self.script = load_script()

    def test_games_play_to_the_end(self):
        results = self.script.simulate(games=20, size=4, seed=0)

        self.assertEqual(len(results.scores), 20)
        self.assertTrue(all(turns > 0 for turns in results.turns))
        self.assertTrue(all(tile >= 4 for tile in results.max_tiles))
        self.assertIn("RANDOM PLAY OVER 20 GAMES", results.summary())

    def test_other_board_sizes(self):
        results = self.script.simulate(games=5, size=3, seed=1)
        self.assertEqual(len(results.turns), 5)

    def test_rejects_tiles_that_are_not_powers_of_two(self):
        with self.assertRaises(RuntimeError):
            self.script.check_invariants(np.array([[2, 6], [0, 4]]))
        self.script.check_invariants(np.array([[2, 0], [1024, 4]]))


if __name__ == "__main__":
    main()
