from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from floodit.game_logic.game import Game


class Controller(ABC):
    @abstractmethod
    def choose_colour(self, game: "Game") -> int: ...

    # short label shown next to the board so it's clear who is playing
    @property
    def symbol(self) -> str:
        return type(self).__name__.removesuffix("Controller").lower()
