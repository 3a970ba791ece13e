import numbers
import string
from collections import deque
from typing import Self

import numpy as np
from numpy.typing import NDArray

from floodit.exceptions import InvalidColourError, InvalidConfigurationError, OutOfBoundsError

# every flood starts here; coordinates are (x, y), i.e. (column, row)
ANCHOR = (0, 0)

_CELL_SYMBOLS = string.digits + string.ascii_lowercase


class Board:
    """Grid of colour indices in [0, colour_count). The array is indexed as [y, x]."""

    MIN_COLOUR_COUNT: int = 2
    MAX_COLOUR_COUNT: int = np.iinfo(np.uint8).max + 1  # 256
    # one symbol per colour in the string representation
    MAX_STRING_COLOUR_COUNT: int = len(_CELL_SYMBOLS)  # 36

    def __init__(self, board_array: NDArray[np.uint8], colour_count: int) -> None:
        if board_array.ndim != 2:  # noqa: PLR2004
            msg = f"Board array must be 2-dimensional, got shape {board_array.shape}"
            raise InvalidConfigurationError(msg)

        height, width = board_array.shape
        _validate_configuration(width=width, height=height, colour_count=colour_count)

        if np.any(board_array < 0) or np.any(board_array >= colour_count):
            msg = f"All cell colours must lie in [0, {colour_count})"
            raise InvalidConfigurationError(msg)

        self._board: NDArray[np.uint8] = board_array.astype(np.uint8, copy=False)
        self._colour_count = colour_count

    @classmethod
    def create_random(cls, width: int, height: int, colour_count: int, seed: int | None = None) -> Self:
        _validate_configuration(width=width, height=height, colour_count=colour_count)
        rng = np.random.default_rng(seed)
        return cls(rng.integers(0, colour_count, size=(height, width), dtype=np.uint8), colour_count)

    @classmethod
    def create_uniform(cls, width: int, height: int, colour_count: int, colour: int = 0) -> Self:
        _validate_configuration(width=width, height=height, colour_count=colour_count)
        _check_colour(colour, colour_count)
        return cls(np.full((height, width), colour, dtype=np.uint8), colour_count)

    @classmethod
    def from_string_representation(cls, string: str, colour_count: int | None = None) -> Self:
        """Parse a board with one symbol ('0'-'9', then 'a'-'z') per cell and one line per row.

        If `colour_count` is not given, it is the smallest valid count that covers all colours on the board.
        """
        rows: list[list[int]] = []
        width = 0
        for line in string.strip().splitlines():
            line = line.strip()  # noqa: PLW2901
            if not set(line) <= set(_CELL_SYMBOLS):
                msg = (
                    "Invalid string representation of board! "
                    f"Must consist of only digits and lowercase letters, but found {set(line) - set(_CELL_SYMBOLS)}"
                )
                raise InvalidConfigurationError(msg)

            if not width:
                width = len(line)
            elif len(line) != width:
                msg = "Invalid string representation of board (all lines must have the same width)"
                raise InvalidConfigurationError(msg)

            rows.append([_CELL_SYMBOLS.index(c) for c in line])

        if not rows:
            msg = "Invalid string representation of board (no rows)"
            raise InvalidConfigurationError(msg)

        array = np.array(rows, dtype=np.uint8)
        if colour_count is None:
            colour_count = max(cls.MIN_COLOUR_COUNT, int(array.max()) + 1)
        elif colour_count > cls.MAX_STRING_COLOUR_COUNT:
            msg = (
                f"The string representation supports at most {cls.MAX_STRING_COLOUR_COUNT} colours, "
                f"got {colour_count}"
            )
            raise InvalidConfigurationError(msg)

        return cls(array, colour_count)

    def copy(self) -> Self:
        return type(self)(self._board.copy(), self._colour_count)

    @property
    def width(self) -> int:
        return self._board.shape[1]

    @property
    def height(self) -> int:
        return self._board.shape[0]

    @property
    def colour_count(self) -> int:
        return self._colour_count

    @property
    def anchor_colour(self) -> int:
        x, y = ANCHOR
        return int(self._board[y, x])

    def as_array(self) -> NDArray[np.uint8]:
        return self._board.copy()

    def __str__(self) -> str:
        if self._colour_count > self.MAX_STRING_COLOUR_COUNT:
            # not enough symbols; fall back to space-separated indices
            return "\n".join(" ".join(str(c) for c in row) for row in self._board)
        return "\n".join("".join(_CELL_SYMBOLS[c] for c in row) for row in self._board)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._colour_count == other._colour_count and np.array_equal(self._board, other._board)

    def get_color(self, x: int, y: int) -> int:
        self._check_in_bounds(x, y)
        return int(self._board[y, x])

    def set_color(self, x: int, y: int, colour: int) -> None:
        self._check_in_bounds(x, y)
        _check_colour(colour, self._colour_count)
        self._board[y, x] = colour

    def flood(self, colour: int) -> int:
        """Recolour the anchor region with `colour`. Return the number of recoloured cells."""
        _check_colour(colour, self._colour_count)

        if colour == self.anchor_colour:
            return 0

        region = self.region_mask()
        self._board[region] = colour
        return int(np.count_nonzero(region))

    def region_mask(self) -> NDArray[np.bool_]:
        """Boolean mask of the maximal 4-connected region of the anchor colour that contains the anchor."""
        height, width = self._board.shape
        anchor_x, anchor_y = ANCHOR
        colour = self._board[anchor_y, anchor_x]

        mask = np.zeros((height, width), dtype=np.bool_)
        mask[anchor_y, anchor_x] = True
        queue = deque([(anchor_y, anchor_x)])

        # breadth-first; a cell is marked when enqueued so that it is never enqueued twice
        while queue:
            y, x = queue.popleft()
            for ny, nx in ((y - 1, x), (y + 1, x), (y, x - 1), (y, x + 1)):
                if 0 <= ny < height and 0 <= nx < width and not mask[ny, nx] and self._board[ny, nx] == colour:
                    mask[ny, nx] = True
                    queue.append((ny, nx))

        return mask

    def region_size(self) -> int:
        return int(np.count_nonzero(self.region_mask()))

    def colours_adjacent_to_region(self) -> list[int]:
        """Colours of the cells that border the anchor region, in ascending order."""
        region = self.region_mask()

        grown = region.copy()
        grown[1:, :] |= region[:-1, :]
        grown[:-1, :] |= region[1:, :]
        grown[:, 1:] |= region[:, :-1]
        grown[:, :-1] |= region[:, 1:]

        return [int(c) for c in np.unique(self._board[grown & ~region])]

    def is_uniform(self) -> bool:
        return bool(np.all(self._board == self.anchor_colour))

    def _check_in_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            msg = f"Cell ({x}, {y}) is outside of the {self.width}x{self.height} board"
            raise OutOfBoundsError(msg)


def _validate_configuration(*, width: int, height: int, colour_count: int) -> None:
    if width <= 0 or height <= 0:
        msg = f"Board width and height need to be positive, got {width}x{height}"
        raise InvalidConfigurationError(msg)

    if not Board.MIN_COLOUR_COUNT <= colour_count <= Board.MAX_COLOUR_COUNT:
        msg = f"Colour count must lie in [{Board.MIN_COLOUR_COUNT}, {Board.MAX_COLOUR_COUNT}], got {colour_count}"
        raise InvalidConfigurationError(msg)


def _check_colour(colour: int, colour_count: int) -> None:
    # bool is Integral, but not a colour
    if not isinstance(colour, numbers.Integral) or isinstance(colour, bool):
        msg = f"Colour {colour!r} is not an integer"
        raise InvalidColourError(msg)

    if not 0 <= colour < colour_count:
        msg = f"Colour {colour} is not in [0, {colour_count})"
        raise InvalidColourError(msg)
