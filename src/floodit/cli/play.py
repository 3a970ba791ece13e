import logging

import click

from floodit.cli.common import ControllerParameter, create_controller, game_config_options
from floodit.config import GameConfig
from floodit.game_logic.game import Game
from floodit.game_logic.runner import Runner
from floodit.ui.cli import CLI

LOGGER = logging.getLogger(__name__)


@click.command()
@game_config_options
@click.option(
    "--controller",
    type=click.Choice(["keyboard", "random", "greedy"]),
    default="keyboard",
    show_default=True,
    help="Who picks the colours.",
)
@click.option("--no-ui", is_flag=True, help="Don't draw the board; only print the result.")
def play(config: GameConfig, controller: ControllerParameter, *, no_ui: bool) -> None:
    """Play a game of Flood-It."""
    game = Game.from_config(config)
    max_rounds = config.effective_max_rounds()
    LOGGER.info("Starting game: %s, round limit %d", config, max_rounds)

    runner = Runner(
        game,
        create_controller(controller, seed=config.seed),
        ui=None if no_ui else CLI(),
        max_rounds=max_rounds,
    )
    result = runner.run()

    if no_ui:
        click.echo(f"{'Won' if result.won else 'Lost'} after {result.rounds} rounds")
