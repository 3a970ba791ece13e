import logging
from collections.abc import Callable
from typing import Self, TypeAlias

import numpy as np
from numpy.typing import NDArray

from floodit.config import DEFAULT_COLOUR_COUNT, DEFAULT_HEIGHT, DEFAULT_WIDTH, GameConfig
from floodit.game_logic.components import Board
from floodit.game_logic.interfaces.listener import (
    CallbackPlayListener,
    CallbackWinListener,
    GamePlayListener,
    GameWinListener,
)
from floodit.game_logic.interfaces.listener_collection import ListenerCollection

LOGGER = logging.getLogger(__name__)

PlayListenerLike: TypeAlias = GamePlayListener | Callable[["Game", int], None]
WinListenerLike: TypeAlias = GameWinListener | Callable[["Game", int], None]


class Game:
    """A single Flood-It session.

    Every move floods the region connected to the top-left cell with a new colour and counts as one round. The game is
    won once the whole board has a single colour. Moves are still accepted after that; whether to block input is up to
    whoever drives the game.
    """

    DEFAULT_WIDTH = DEFAULT_WIDTH
    DEFAULT_HEIGHT = DEFAULT_HEIGHT
    DEFAULT_COLOUR_COUNT = DEFAULT_COLOUR_COUNT

    def __init__(self, board: Board) -> None:
        self._board = board
        self._round = 0
        # a board that starts out uniform is won without ever notifying the win listeners
        self._won = board.is_uniform()

        self._game_play_listeners: ListenerCollection[GamePlayListener] = ListenerCollection()
        self._game_win_listeners: ListenerCollection[GameWinListener] = ListenerCollection()

    @classmethod
    def create_random(
        cls,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        colour_count: int = DEFAULT_COLOUR_COUNT,
        seed: int | None = None,
    ) -> Self:
        return cls(Board.create_random(width=width, height=height, colour_count=colour_count, seed=seed))

    @classmethod
    def from_config(cls, config: GameConfig) -> Self:
        return cls.create_random(
            width=config.width, height=config.height, colour_count=config.colour_count, seed=config.seed
        )

    @property
    def width(self) -> int:
        return self._board.width

    @property
    def height(self) -> int:
        return self._board.height

    @property
    def colour_count(self) -> int:
        return self._board.colour_count

    @property
    def round(self) -> int:
        return self._round

    @property
    def board(self) -> Board:
        """A copy of the current board, e.g. for bots to try out moves on."""
        return self._board.copy()

    def as_array(self) -> NDArray[np.uint8]:
        return self._board.as_array()

    def get_color(self, x: int, y: int) -> int:
        return self._board.get_color(x, y)

    def is_won(self) -> bool:
        return self._board.is_uniform()

    def play_colour(self, colour: int) -> None:
        # the board validates the colour before touching any cell, so a rejected move leaves everything unchanged
        flooded = self._board.flood(colour)
        self._round += 1

        LOGGER.debug("Round %d: played colour %d, flooded %d cells", self._round, colour, flooded)
        self._notify_move(self._round)

        if not self._won and self._board.is_uniform():
            self._won = True
            LOGGER.info("Game won after %d rounds", self._round)
            self._notify_win(self._round)

    def add_game_play_listener(self, listener: PlayListenerLike) -> None:
        self._game_play_listeners.add(_as_play_listener(listener))

    def remove_game_play_listener(self, listener: PlayListenerLike) -> None:
        self._game_play_listeners.remove(_as_play_listener(listener))

    def add_game_win_listener(self, listener: WinListenerLike) -> None:
        self._game_win_listeners.add(_as_win_listener(listener))

    def remove_game_win_listener(self, listener: WinListenerLike) -> None:
        self._game_win_listeners.remove(_as_win_listener(listener))

    def _notify_move(self, current_round: int) -> None:
        for listener in self._game_play_listeners:
            listener.on_game_changed(self, current_round)

    def _notify_win(self, rounds: int) -> None:
        for listener in self._game_win_listeners:
            listener.on_won(self, rounds)


def _as_play_listener(listener: PlayListenerLike) -> GamePlayListener:
    return listener if isinstance(listener, GamePlayListener) else CallbackPlayListener(listener)


def _as_win_listener(listener: WinListenerLike) -> GameWinListener:
    return listener if isinstance(listener, GameWinListener) else CallbackWinListener(listener)
