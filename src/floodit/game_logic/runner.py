import logging

from floodit.game_logic.game import Game
from floodit.game_logic.interfaces.controller import Controller
from floodit.game_logic.interfaces.listener import GamePlayListener
from floodit.game_logic.interfaces.ui import UI, GameResult, UiElements

LOGGER = logging.getLogger(__name__)


class Runner(GamePlayListener):
    """Plays a game to the end: until it is won or the round limit is reached."""

    def __init__(
        self,
        game: Game,
        controller: Controller,
        ui: UI | None = None,
        *,
        max_rounds: int | None = None,
    ) -> None:
        if max_rounds is not None and max_rounds < 1:
            msg = "max_rounds has to be >= 1"
            raise ValueError(msg)

        self._game = game
        self._controller = controller
        self._ui = ui
        self._max_rounds = max_rounds

        self._ui_elements = UiElements(
            board=game.as_array(),
            controller_symbol=controller.symbol,
            round=game.round,
            max_rounds=max_rounds,
        )

    @property
    def ui_elements(self) -> UiElements:
        return self._ui_elements

    def on_game_changed(self, game: Game, current_round: int) -> None:
        self._ui_elements.board = game.as_array()
        self._ui_elements.round = current_round
        if self._ui is not None:
            self._ui.draw(self._ui_elements)

    def run(self) -> GameResult:
        if self._ui is not None:
            self._ui.initialize(self._game.width, self._game.height, self._game.colour_count)
            self._ui.draw(self._ui_elements)

        self._game.add_game_play_listener(self)
        try:
            while not self._game.is_won() and not self._out_of_rounds():
                self._game.play_colour(self._controller.choose_colour(self._game))
        finally:
            self._game.remove_game_play_listener(self)

        result = GameResult(won=self._game.is_won(), rounds=self._game.round)
        LOGGER.info("Game finished: %s", result)

        self._ui_elements.result = result
        if self._ui is not None:
            self._ui.draw(self._ui_elements)

        return result

    def _out_of_rounds(self) -> bool:
        return self._max_rounds is not None and self._game.round >= self._max_rounds
