from floodit.game_logic.components.board import ANCHOR, Board

__all__ = ["ANCHOR", "Board"]
