# -*- coding: utf-8 -*-
"""
Graphical window for the 2048 game.

The board is drawn with Matplotlib, one subplot per cell. The window also forwards keyboard and
mouse events so the game can be played with the arrow keys or by dragging across the board.
"""
from typing import Callable, Iterable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event
from numpy import ndarray


class WindowBoard:
    """
    A class for rendering the 2048 game board using Matplotlib.

    Notes
    -----
    - Cells that received a tile this turn get a bright outline.
    - Mouse coordinates are converted to screen coordinates (y growing downward) before being
      handed to the registered drag handlers.
    """

    # ##: Neon palette for the tile values.
    COLORS = {
        0: "#1A1A2E",
        2: "#16213E",
        4: "#0F3460",
        8: "#533483",
        16: "#7B2CBF",
        32: "#C77DFF",
        64: "#E94560",
        128: "#FF6B6B",
        256: "#F9C80E",
        512: "#F86624",
        1024: "#00F5D4",
        2048: "#00BBF9",
        4096: "#9B5DE5",
        8192: "#F15BB5",
    }
    TEXT_COLOR = "#E0E0FF"
    NEW_TILE_EDGE = "#00F5D4"
    BACKGROUND = "#0D0D1A"

    def __init__(self, title: str, size: int):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The size of the game board (e.g., 4 for a 4x4 board).
        """
        self.size = size
        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(title)
        self.fig.patch.set_facecolor(self.BACKGROUND)
        self._setup_axes(size)
        self.title = self.fig.suptitle("", color=self.TEXT_COLOR, fontweight="bold")
        self.banner = self.fig.text(
            0.5, 0.5, "", ha="center", va="center", fontsize="xx-large", fontweight="bold", color=self.NEW_TILE_EDGE
        )
        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_axes(self, size: int):
        """
        Create one subplot per cell, without ticks or labels.

        Parameters
        ----------
        size : int
            The size of the game board.
        """
        self.fig.subplots_adjust(left=0.02, bottom=0.02, right=0.98, top=0.9, wspace=0.05, hspace=0.05)
        self.axe.set_facecolor(self.BACKGROUND)
        self.axe.set_axis_off()

        self.texts = []
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        for ax in self.axes:
            text = ax.text(
                0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold", color=self.TEXT_COLOR
            )
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

    def _close_handler(self, event: Optional[Event] = None):
        """Set the closed flag when the window is closed."""
        self.closed = True

    def show_board(
        self,
        board: ndarray,
        new_tiles: Iterable[tuple[int, int]] = (),
        score: int = 0,
        best_score: int = 0,
        game_over: bool = False,
    ):
        """
        Show or update the game board.

        Parameters
        ----------
        board : ndarray
            The current state of the game board to be displayed.
        new_tiles : iterable of tuple
            Cells that received a tile since the last frame.
        score : int
            Current score.
        best_score : int
            Best score across sessions.
        game_over : bool
            Whether to display the game over banner.
        """
        fresh = set(new_tiles)
        for index, (ax, text, value) in enumerate(zip(self.axes, self.texts, board.flat)):
            value = int(value)
            cell = divmod(index, self.size)
            text.set_text(str(value) if value != 0 else "")
            ax.set_facecolor(self.COLORS.get(value, "#FFFFFF"))
            edge = self.NEW_TILE_EDGE if cell in fresh else self.BACKGROUND
            for spine in ax.spines.values():
                spine.set_edgecolor(edge)
                spine.set_linewidth(3 if cell in fresh else 1)

        self.title.set_text(f"SCORE {score}    BEST {best_score}")
        self.banner.set_text("GAME OVER\n[n] new game" if game_over else "")

        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

    def register_key_handler(self, key_handler: Callable[[Optional[str]], None]):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            Called with the Matplotlib key name (``"left"``, ``"n"``, ...) on every key press.
        """
        self.fig.canvas.mpl_connect("key_press_event", lambda event: key_handler(event.key))

    def register_drag_handlers(
        self,
        on_press: Callable[[float, float], None],
        on_release: Callable[[float, float], None],
    ):
        """
        Register mouse handlers receiving screen coordinates.

        Parameters
        ----------
        on_press : Callable
            Called with ``(x, y)`` when a mouse button goes down.
        on_release : Callable
            Called with ``(x, y)`` when the button is released.
        """
        # ##: Matplotlib measures y upward from the bottom of the canvas.
        self.fig.canvas.mpl_connect("button_press_event", lambda event: on_press(event.x, -event.y))
        self.fig.canvas.mpl_connect("button_release_event", lambda event: on_release(event.x, -event.y))

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """Close the game window."""
        plt.close(self.fig)
        self.closed = True
