import logging
import statistics

import click

from floodit.cli.common import ControllerParameter, create_controller, game_config_options
from floodit.config import GameConfig
from floodit.game_logic.game import Game
from floodit.game_logic.interfaces.ui import GameResult
from floodit.game_logic.runner import Runner

LOGGER = logging.getLogger(__name__)


@click.command()
@game_config_options
@click.option(
    "--controller",
    type=click.Choice(["random", "greedy"]),
    default="greedy",
    show_default=True,
    help="Bot to evaluate.",
)
@click.option(
    "--num-games", type=click.IntRange(min=1), default=50, show_default=True, help="Number of games for evaluation."
)
def evaluate(config: GameConfig, controller: ControllerParameter, num_games: int) -> None:
    """Let a bot play a number of seeded games and report how well it did."""
    base_seed = config.seed if config.seed is not None else 0
    max_rounds = config.effective_max_rounds()

    results: list[GameResult] = []
    for i in range(num_games):
        seed = base_seed + i
        game = Game.create_random(
            width=config.width, height=config.height, colour_count=config.colour_count, seed=seed
        )
        results.append(Runner(game, create_controller(controller, seed=seed), max_rounds=max_rounds).run())

    wins = [r.rounds for r in results if r.won]
    LOGGER.info("Evaluated %s on %d games: %d wins", controller, num_games, len(wins))

    click.echo(f"Win rate: {len(wins) / num_games:.1%} ({len(wins)}/{num_games}, limit {max_rounds} rounds)")
    if wins:
        click.echo(f"Mean rounds to win: {statistics.mean(wins):.2f}")
