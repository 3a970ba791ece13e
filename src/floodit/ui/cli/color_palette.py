import colorsys
from collections.abc import Sequence
from typing import Self

# classic Flood-It colours, used for the first colours of every palette
_CLASSIC_RGB: tuple[tuple[int, int, int], ...] = (
    (237, 112, 161),  # pink
    (96, 92, 168),  # purple
    (243, 246, 29),  # yellow
    (220, 74, 32),  # red
    (70, 177, 226),  # blue
    (126, 157, 30),  # green
)


def rgb_palette(r: int, g: int, b: int) -> str:
    """Background escape sequence for the closest colour of the 256 colour palette."""
    return f"\x1b[48;5;{16 + int(r / 256 * 6) * 36 + int(g / 256 * 6) * 6 + int(b / 256 * 6)}m"


def rgb_truecolor(r: int, g: int, b: int) -> str:
    return f"\x1b[48;2;{r};{g};{b}m"


class ColorPalette:
    def __init__(self, backgrounds: Sequence[str]) -> None:
        self._backgrounds = tuple(backgrounds)

    def __len__(self) -> int:
        return len(self._backgrounds)

    @classmethod
    def for_colour_count(cls, colour_count: int, *, truecolor: bool = False) -> Self:
        to_escape = rgb_truecolor if truecolor else rgb_palette
        rgbs = list(_CLASSIC_RGB[:colour_count])

        # any colours beyond the classic ones get evenly spaced hues, offset so they don't collide with the classics
        extra = colour_count - len(rgbs)
        for i in range(extra):
            r, g, b = colorsys.hsv_to_rgb((i + 0.5) / extra, 0.6 + 0.4 * (i % 2), 0.95)
            rgbs.append((int(r * 255), int(g * 255), int(b * 255)))

        return cls([to_escape(*rgb) for rgb in rgbs])

    def background(self, colour: int) -> str:
        return self._backgrounds[colour]
