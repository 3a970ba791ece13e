from dataclasses import dataclass

from floodit.exceptions import InvalidConfigurationError
from floodit.game_logic.components.board import Board

DEFAULT_WIDTH = 15
DEFAULT_HEIGHT = 15
DEFAULT_COLOUR_COUNT = 6

# the classic round limit for the default board; scaled for other sizes
_REFERENCE_MAX_ROUNDS = 25


@dataclass(frozen=True, slots=True)
class GameConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    colour_count: int = DEFAULT_COLOUR_COUNT
    seed: int | None = None
    # enforced by the Runner, not by the Game itself
    max_rounds: int | None = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            msg = f"Board width and height need to be positive, got {self.width}x{self.height}"
            raise InvalidConfigurationError(msg)

        if not Board.MIN_COLOUR_COUNT <= self.colour_count <= Board.MAX_COLOUR_COUNT:
            msg = (
                f"colour_count must lie in [{Board.MIN_COLOUR_COUNT}, {Board.MAX_COLOUR_COUNT}], "
                f"got {self.colour_count}"
            )
            raise InvalidConfigurationError(msg)

        if self.max_rounds is not None and self.max_rounds < 1:
            msg = f"max_rounds has to be >= 1, got {self.max_rounds}"
            raise InvalidConfigurationError(msg)

    def suggested_max_rounds(self) -> int:
        """Round limit that scales linearly with board perimeter and palette size (25 for 15x15 with 6 colours)."""
        reference = (DEFAULT_WIDTH + DEFAULT_HEIGHT) * DEFAULT_COLOUR_COUNT
        return max(1, _REFERENCE_MAX_ROUNDS * (self.width + self.height) * self.colour_count // reference)

    def effective_max_rounds(self) -> int:
        return self.max_rounds if self.max_rounds is not None else self.suggested_max_rounds()
