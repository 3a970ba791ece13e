import logging

from ansi import color, cursor

from floodit.game_logic.interfaces.ui import UI, UiElements
from floodit.ui.cli.color_palette import ColorPalette

LOGGER = logging.getLogger(__name__)

_ERASE_TO_END_OF_LINE = "\x1b[K"


class CLI(UI):
    _PIXEL_WIDTH = 2  # how many terminal characters together form one cell

    def __init__(self, *, truecolor: bool = False, show_colour_legend: bool = True) -> None:
        self._truecolor = truecolor
        self._show_colour_legend = show_colour_legend
        self._palette: ColorPalette | None = None
        self._board_height = 0

    def initialize(self, board_width: int, board_height: int, colour_count: int) -> None:
        self._palette = ColorPalette.for_colour_count(colour_count, truecolor=self._truecolor)
        self._board_height = board_height
        LOGGER.debug("Initialized CLI for a %dx%d board with %d colours", board_width, board_height, colour_count)

        print(cursor.erase("") + cursor.goto(1, 1), end="")

    def draw(self, elements: UiElements) -> None:
        print(cursor.goto(1, 1) + self.render(elements), end="", flush=True)

    def render(self, elements: UiElements) -> str:
        if self._palette is None:
            msg = "CLI has not been initialized"
            raise RuntimeError(msg)

        lines = [
            "".join(self._palette.background(c) + " " * self._PIXEL_WIDTH for c in row) + str(color.fx.reset)
            for row in elements.board
        ]

        round_text = f"Round {elements.round}"
        if elements.max_rounds is not None:
            round_text += f"/{elements.max_rounds}"
        lines.append(f"{round_text}  [{elements.controller_symbol}]" + _ERASE_TO_END_OF_LINE)

        if self._show_colour_legend:
            lines.append(
                " ".join(
                    self._palette.background(i) + f"{i:^{self._PIXEL_WIDTH}}" + str(color.fx.reset)
                    for i in range(len(self._palette))
                )
            )

        if elements.result is not None:
            outcome = "Won" if elements.result.won else "Out of rounds"
            lines.append(str(color.fx.bold) + f"{outcome} after {elements.result.rounds} rounds" + str(color.fx.reset))

        return "\n".join(lines) + "\n"
