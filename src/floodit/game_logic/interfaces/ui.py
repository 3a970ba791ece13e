from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray


class GameResult(NamedTuple):
    won: bool
    rounds: int


@dataclass
class UiElements:
    """Elements to be drawn on the UI."""

    board: NDArray[np.uint8]
    controller_symbol: str
    round: int = 0
    max_rounds: int | None = None
    result: GameResult | None = None


class UI(ABC):
    @abstractmethod
    def initialize(self, board_width: int, board_height: int, colour_count: int) -> None: ...

    @abstractmethod
    def draw(self, elements: UiElements) -> None: ...
