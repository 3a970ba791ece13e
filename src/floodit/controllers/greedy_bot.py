"""An automated controller that always picks the colour which makes the flooded region grow the most."""

import logging

from floodit.game_logic.game import Game
from floodit.game_logic.interfaces.controller import Controller

LOGGER = logging.getLogger(__name__)


class GreedyBotController(Controller):
    @property
    def symbol(self) -> str:
        return "bot"

    def choose_colour(self, game: Game) -> int:
        board = game.board
        # only colours touching the region can make it grow; anything else would be a wasted move
        candidates = board.colours_adjacent_to_region()
        if not candidates:
            # the board is already uniform, nothing left to gain
            return board.anchor_colour

        best_colour, best_size = candidates[0], -1
        for colour in candidates:
            trial = board.copy()
            trial.flood(colour)
            size = trial.region_size()
            if size > best_size:
                best_colour, best_size = colour, size

        LOGGER.debug("Chose colour %d, region grows to %d cells", best_colour, best_size)
        return best_colour
