import random

from floodit.game_logic.game import Game
from floodit.game_logic.interfaces.controller import Controller


class RandomController(Controller):
    def __init__(self, seed: int | None = None, *, allow_wasted_moves: bool = False) -> None:
        """Initialize the random controller.

        Args:
            seed: Seed for the controller's own random number generator.
            allow_wasted_moves: Whether the colour currently at the anchor may be chosen. Playing it changes nothing
                on the board but still costs a round.
        """
        self._random = random.Random(seed)
        self._allow_wasted_moves = allow_wasted_moves

    def choose_colour(self, game: Game) -> int:
        colours = list(range(game.colour_count))
        if not self._allow_wasted_moves:
            colours.remove(game.get_color(0, 0))
        return self._random.choice(colours)
