from pathlib import Path

import click

from floodit.cli.evaluate import evaluate
from floodit.cli.play import play
from floodit.logging_config import LOG_LEVELS, configure_logging


@click.group()
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default="logs",
    show_default=True,
    help="Directory for the log files.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="INFO",
    show_default=True,
    help="Level for floodit.log. DEBUG logs every single move.",
)
def cli(log_dir: Path, log_level: str) -> None:
    """A command-line interface for the Flood-It project."""
    configure_logging(log_dir, level=log_level.upper())


cli.add_command(play)
cli.add_command(evaluate)
