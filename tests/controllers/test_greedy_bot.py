from floodit.controllers.greedy_bot import GreedyBotController
from floodit.game_logic.components import Board
from floodit.game_logic.game import Game


def test_chooses_colour_with_largest_gain() -> None:
    # GIVEN a board where flooding with 2 gains more cells than flooding with 1
    game = Game(
        Board.from_string_representation(
            """
                0122
                2222
                1111
            """,
        ),
    )

    # THEN the bot chooses 2
    assert GreedyBotController().choose_colour(game) == 2  # noqa: PLR2004


def test_ties_go_to_lowest_colour() -> None:
    game = Game(Board.from_string_representation("031\n200", colour_count=4))
    assert GreedyBotController().choose_colour(game) == 2  # noqa: PLR2004


def test_only_adjacent_colours_are_considered() -> None:
    game = Game(Board.from_string_representation("0133\n1333\n3333", colour_count=4))
    assert GreedyBotController().choose_colour(game) == 1


def test_does_not_mutate_game() -> None:
    game = Game(Board.from_string_representation("0122\n2222"))
    GreedyBotController().choose_colour(game)
    assert str(game.board) == "0122\n2222"
    assert game.round == 0


def test_uniform_board_returns_anchor_colour() -> None:
    game = Game(Board.create_uniform(width=3, height=3, colour_count=3, colour=2))
    assert GreedyBotController().choose_colour(game) == 2  # noqa: PLR2004


def test_wins_random_board() -> None:
    game = Game.create_random(width=10, height=10, colour_count=4, seed=11)
    bot = GreedyBotController()
    # every greedy move grows the region by at least one cell
    for _ in range(game.width * game.height):
        if game.is_won():
            break
        game.play_colour(bot.choose_colour(game))
    assert game.is_won()
