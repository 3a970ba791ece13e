import pytest

from floodit.config import DEFAULT_COLOUR_COUNT, DEFAULT_HEIGHT, DEFAULT_WIDTH, GameConfig
from floodit.exceptions import InvalidConfigurationError


def test_defaults() -> None:
    config = GameConfig()
    assert (config.width, config.height, config.colour_count) == (DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_COLOUR_COUNT)
    assert config.seed is None
    assert config.max_rounds is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0},
        {"height": -1},
        {"colour_count": 1},
        {"colour_count": 257},
        {"max_rounds": 0},
    ],
)
def test_invalid_config(kwargs: dict[str, int]) -> None:
    with pytest.raises(InvalidConfigurationError):
        GameConfig(**kwargs)


@pytest.mark.parametrize(
    ("width", "height", "colour_count", "expected"),
    [
        (15, 15, 6, 25),
        (30, 30, 6, 50),
        (15, 15, 3, 12),
        (1, 1, 2, 1),
    ],
)
def test_suggested_max_rounds(width: int, height: int, colour_count: int, expected: int) -> None:
    assert GameConfig(width=width, height=height, colour_count=colour_count).suggested_max_rounds() == expected


def test_effective_max_rounds_prefers_explicit_limit() -> None:
    assert GameConfig(max_rounds=7).effective_max_rounds() == 7  # noqa: PLR2004
    assert GameConfig().effective_max_rounds() == 25  # noqa: PLR2004
