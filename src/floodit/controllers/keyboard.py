import click

from floodit.game_logic.game import Game
from floodit.game_logic.interfaces.controller import Controller


class KeyboardController(Controller):
    """Asks the player for the next colour on the terminal."""

    @property
    def symbol(self) -> str:
        return "you"

    def choose_colour(self, game: Game) -> int:
        return click.prompt(
            f"Colour (0-{game.colour_count - 1})",
            type=click.IntRange(0, game.colour_count - 1),
        )
