"""
Play random games headless and report score statistics.

Every turn picks a uniformly random legal direction and checks the board invariants: tiles are
powers of two, a move adds exactly one tile, the score never decreases, and the game ends exactly
when no direction is legal.

Usage:
    python scripts/simulate_games.py --games 200 --seed 7
"""

import argparse
from dataclasses import dataclass

import numpy as np
from tqdm import tqdm

from cyberpunk2048.core import TileSpawner, legal_actions, slide
from cyberpunk2048.game import GameSession


@dataclass
class SimulationResults:
    """Container for simulation results."""

    scores: list[int]
    max_tiles: list[int]
    turns: list[int]

    def summary(self) -> str:
        """Generate summary report."""
        tiles, counts = np.unique(self.max_tiles, return_counts=True)
        lines = [
            '=' * 60,
            f'RANDOM PLAY OVER {len(self.scores)} GAMES',
            '=' * 60,
            f'Score:        {np.mean(self.scores):>10.1f} ± {np.std(self.scores):.1f} (max {max(self.scores)})',
            f'Turns:        {np.mean(self.turns):>10.1f}',
            '-' * 60,
            'Max tile distribution:',
        ]
        lines += [f'  {tile:>6d}: {count / len(self.max_tiles):6.1%}' for tile, count in zip(tiles, counts)]
        lines.append('=' * 60)
        return '\n'.join(lines)


def check_invariants(board: np.ndarray):
    """Raise if a tile on the board is not a power of two."""
    tiles = board[board != 0]
    if np.any(tiles < 2) or np.any(tiles & (tiles - 1)):
        raise RuntimeError(f'Board holds a tile that is not a power of two:\n{board}')


def play_game(session: GameSession, rng: np.random.Generator) -> int:
    """
    Play one random game to the end.

    Returns
    -------
    int
        Number of turns played.
    """
    turns = 0
    while not session.is_over:
        legal = legal_actions(session.board)
        if not legal:
            raise RuntimeError('No legal direction left but the game is not over')
        direction = legal[rng.integers(len(legal))]
        name = direction.name.lower()

        score_before = session.score
        after_slide = slide(session.board, direction).board
        outcome = session.move(direction)
        if not outcome.moved:
            raise RuntimeError(f'Legal direction {name} did not move the board')

        # ##>: A successful move adds exactly one tile to the slid board.
        board = session.board
        if np.count_nonzero(board) != np.count_nonzero(after_slide) + 1:
            raise RuntimeError(f'Moving {name} did not spawn exactly one tile')
        if session.score < score_before:
            raise RuntimeError(f'Score decreased after moving {name}')
        check_invariants(board)
        turns += 1

    if legal_actions(session.board):
        raise RuntimeError('The game is over but a direction is still legal')
    return turns


def simulate(games: int, size: int, seed: int) -> SimulationResults:
    rng = np.random.default_rng(seed)
    session = GameSession(size=size, spawner=TileSpawner(rng=rng))
    results = SimulationResults(scores=[], max_tiles=[], turns=[])

    for _ in tqdm(range(games), desc='Simulating', unit='game'):
        session.new_game()
        results.turns.append(play_game(session, rng))
        results.scores.append(session.score)
        results.max_tiles.append(int(session.board.max()))
    return results


def main():
    parser = argparse.ArgumentParser(description='Simulate random 2048 games')
    parser.add_argument('--games', type=int, default=100, help='Number of games to play')
    parser.add_argument('--size', type=int, default=4, help='Size of the board')
    parser.add_argument('--seed', type=int, default=0, help='Random seed')
    args = parser.parse_args()

    print(simulate(args.games, args.size, args.seed).summary())


if __name__ == '__main__':
    main()
