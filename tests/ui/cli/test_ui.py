import numpy as np
import pytest

from floodit.game_logic.interfaces.ui import GameResult, UiElements
from floodit.ui.cli import CLI
from floodit.ui.cli.color_palette import ColorPalette, rgb_palette


def test_palette_has_one_colour_per_board_colour() -> None:
    for colour_count in (2, 6, 7, 36):
        assert len(ColorPalette.for_colour_count(colour_count)) == colour_count


def test_palette_colours_are_background_escape_sequences() -> None:
    palette = ColorPalette.for_colour_count(6)
    assert all(palette.background(i).startswith("\x1b[48;5;") for i in range(6))
    assert ColorPalette.for_colour_count(6, truecolor=True).background(0).startswith("\x1b[48;2;")


def test_rgb_palette_extremes() -> None:
    assert rgb_palette(0, 0, 0) == "\x1b[48;5;16m"
    assert rgb_palette(255, 255, 255) == "\x1b[48;5;231m"


def test_render_contains_board_and_status() -> None:
    ui = CLI(show_colour_legend=False)
    ui.initialize(board_width=3, board_height=2, colour_count=3)
    palette = ColorPalette.for_colour_count(3)

    rendered = ui.render(
        UiElements(
            board=np.array([[0, 1, 2], [2, 2, 2]], dtype=np.uint8),
            controller_symbol="bot",
            round=4,
            max_rounds=10,
            result=GameResult(won=True, rounds=4),
        )
    )

    lines = rendered.splitlines()
    assert lines[0].count(palette.background(2)) == 1
    assert lines[1].count(palette.background(2)) == 3  # noqa: PLR2004
    assert "Round 4/10  [bot]" in rendered
    assert "Won after 4 rounds" in rendered


def test_render_before_initialize() -> None:
    with pytest.raises(RuntimeError, match="not been initialized"):
        CLI().render(UiElements(board=np.zeros((1, 1), dtype=np.uint8), controller_symbol="you"))
