"""
Move directions and legality checks for the 2048 board, computed without applying the move.
"""

from enum import IntEnum

from numpy import ndarray


class Direction(IntEnum):
    """
    The four cardinal moves.

    The value of each member is the number of counter-clockwise quarter turns that brings the
    direction onto ``LEFT``, which lets the move engine reduce every move to a left slide.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def parse(cls, token: 'Direction | str') -> 'Direction':
        """
        Convert a direction name into a ``Direction``.

        Parameters
        ----------
        token : Direction or str
            A member, or one of ``left``, ``up``, ``right``, ``down`` (case-insensitive).

        Returns
        -------
        Direction
            The matching member.

        Raises
        ------
        ValueError
            If the token names no direction.
        """
        if isinstance(token, cls):
            return token
        if isinstance(token, str):
            try:
                return cls[token.strip().upper()]
            except KeyError:
                pass
        raise ValueError(f'Unknown direction: {token!r}')


def legal_actions_mask(state: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move changes the board.
    """
    # ##>: Horizontal and vertical merges are shared by opposite directions.
    left_cols, right_cols = state[:, :-1], state[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    top_rows, bottom_rows = state[:-1, :], state[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    # ##>: A tile slides when the neighbour on the move side is empty.
    left = (left_cols == 0) & (right_cols != 0)
    right = (right_cols == 0) & (left_cols != 0)
    up = (top_rows == 0) & (bottom_rows != 0)
    down = (bottom_rows == 0) & (top_rows != 0)

    return (
        bool(left.any() or h_can_merge.any()),
        bool(up.any() or v_can_merge.any()),
        bool(right.any() or h_can_merge.any()),
        bool(down.any() or v_can_merge.any()),
    )


def legal_actions(state: ndarray) -> list[Direction]:
    """
    Directions that would change the board.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Legal directions, in ``Direction`` order.
    """
    mask = legal_actions_mask(state)
    return [direction for direction in Direction if mask[direction]]


def illegal_actions(state: ndarray) -> list[Direction]:
    """
    Directions that would leave the board untouched.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Illegal directions, in ``Direction`` order.
    """
    mask = legal_actions_mask(state)
    return [direction for direction in Direction if not mask[direction]]


def can_move(state: ndarray, direction: Direction) -> bool:
    """
    Check whether a single direction would change the board.

    Parameters
    ----------
    state : ndarray
        The game board to check.
    direction : Direction
        The direction to test.

    Returns
    -------
    bool
        True if at least one tile would slide or merge.
    """
    return legal_actions_mask(state)[Direction.parse(direction)]
