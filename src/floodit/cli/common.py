import functools
from collections.abc import Callable
from typing import Any, Literal, TypeAlias

import click

from floodit.config import DEFAULT_COLOUR_COUNT, DEFAULT_HEIGHT, DEFAULT_WIDTH, GameConfig
from floodit.controllers.greedy_bot import GreedyBotController
from floodit.controllers.keyboard import KeyboardController
from floodit.controllers.random import RandomController
from floodit.exceptions import InvalidConfigurationError
from floodit.game_logic.interfaces.controller import Controller

ControllerParameter: TypeAlias = Literal["keyboard", "random", "greedy"]


class BoardSize(click.ParamType):
    name = "board_size"

    def convert(
        self,
        value: str | tuple[int, int],
        param: click.Parameter | None,  # noqa: ARG002
        ctx: click.Context | None,  # noqa: ARG002
    ) -> tuple[int, int]:
        if isinstance(value, tuple):
            return value

        try:
            width, height = map(int, value.lower().split("x"))
        except (TypeError, ValueError) as e:
            msg = "Expected two integers separated by 'x' (e.g. '15x15')."
            raise click.BadParameter(msg) from e

        if height <= 0 or width <= 0:
            msg = "Board width and height need to be positive."
            raise click.BadParameter(msg)

        return width, height


def game_config_options(command: Callable[..., Any]) -> Callable[..., Any]:
    """Add board options to a command and hand it an assembled `GameConfig` instead."""

    @click.option(
        "--board-size",
        type=BoardSize(),
        default=f"{DEFAULT_WIDTH}x{DEFAULT_HEIGHT}",
        show_default=True,
        help="Width and height of the board, separated by 'x'.",
    )
    @click.option(
        "--colours",
        type=click.IntRange(min=2),
        default=DEFAULT_COLOUR_COUNT,
        show_default=True,
        help="Number of different colours on the board. More colours is more difficult.",
    )
    @click.option("--seed", type=int, default=None, help="Seed for the board generation.")
    @click.option(
        "--max-rounds",
        type=click.IntRange(min=1),
        default=None,
        help="Round limit. Defaults to a limit that scales with board size and number of colours.",
    )
    @functools.wraps(command)
    def wrapper(
        *args: Any,  # noqa: ANN401
        board_size: tuple[int, int],
        colours: int,
        seed: int | None,
        max_rounds: int | None,
        **kwargs: Any,  # noqa: ANN401
    ) -> Any:  # noqa: ANN401
        width, height = board_size
        try:
            config = GameConfig(width=width, height=height, colour_count=colours, seed=seed, max_rounds=max_rounds)
        except InvalidConfigurationError as e:
            raise click.BadParameter(str(e)) from e

        return command(*args, config=config, **kwargs)

    return wrapper


def create_controller(controller: ControllerParameter, seed: int | None = None) -> Controller:
    match controller:
        case "keyboard":
            return KeyboardController()
        case "random":
            return RandomController(seed)
        case "greedy":
            return GreedyBotController()
