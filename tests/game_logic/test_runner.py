from itertools import cycle
from unittest.mock import Mock

import pytest

from floodit.controllers.greedy_bot import GreedyBotController
from floodit.game_logic.components import Board
from floodit.game_logic.game import Game
from floodit.game_logic.interfaces.ui import UI, GameResult
from floodit.game_logic.runner import Runner


def test_runs_until_won() -> None:
    game = Game(Board.from_string_representation("012\n222"))
    controller = Mock(choose_colour=Mock(side_effect=[1, 2]), symbol="mock")

    result = Runner(game, controller).run()

    assert result == GameResult(won=True, rounds=2)
    assert controller.choose_colour.call_count == 2  # noqa: PLR2004


def test_stops_at_round_limit() -> None:
    game = Game(Board.from_string_representation("0123\n3210"))
    controller = Mock(choose_colour=Mock(side_effect=cycle([1, 0])), symbol="mock")

    result = Runner(game, controller, max_rounds=5).run()

    assert result == GameResult(won=False, rounds=5)
    assert game.round == 5  # noqa: PLR2004


def test_already_won_game_plays_no_rounds() -> None:
    game = Game(Board.create_uniform(width=2, height=2, colour_count=2))
    controller = Mock(symbol="mock")

    assert Runner(game, controller).run() == GameResult(won=True, rounds=0)
    controller.choose_colour.assert_not_called()


def test_ui_is_drawn_initially_after_every_round_and_at_the_end() -> None:
    game = Game(Board.from_string_representation("0112\n2222"))
    ui = Mock(spec=UI)

    runner = Runner(game, GreedyBotController(), ui=ui)
    result = runner.run()

    ui.initialize.assert_called_once_with(4, 2, 3)
    assert ui.draw.call_count == result.rounds + 2
    assert runner.ui_elements.result == result
    assert runner.ui_elements.round == result.rounds
    assert runner.ui_elements.board.tolist() == game.as_array().tolist()


def test_runner_unregisters_itself() -> None:
    game = Game(Board.from_string_representation("01"))
    ui = Mock(spec=UI)
    Runner(game, GreedyBotController(), ui=ui).run()
    draw_count = ui.draw.call_count

    game.play_colour(0)

    assert ui.draw.call_count == draw_count


def test_invalid_max_rounds() -> None:
    with pytest.raises(ValueError, match="max_rounds"):
        Runner(Game.create_random(seed=0), GreedyBotController(), max_rounds=0)
