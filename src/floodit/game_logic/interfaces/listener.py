"""Observer interfaces for the two kinds of game events."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from floodit.game_logic.game import Game


class GamePlayListener(ABC):
    @abstractmethod
    def on_game_changed(self, game: "Game", current_round: int) -> None:
        """Invoked after every move, with the round the game is now in."""


class GameWinListener(ABC):
    @abstractmethod
    def on_won(self, game: "Game", rounds: int) -> None:
        """Invoked once, with the number of rounds it took to win."""


# Plain callables are wrapped in these so they can live in the same registries as listener objects. Being frozen
# dataclasses, two wrappers around the same callable compare (and hash) equal, which keeps add/remove idempotent.


@dataclass(frozen=True, slots=True)
class CallbackPlayListener(GamePlayListener):
    callback: Callable[["Game", int], None]

    def on_game_changed(self, game: "Game", current_round: int) -> None:
        self.callback(game, current_round)


@dataclass(frozen=True, slots=True)
class CallbackWinListener(GameWinListener):
    callback: Callable[["Game", int], None]

    def on_won(self, game: "Game", rounds: int) -> None:
        self.callback(game, rounds)
