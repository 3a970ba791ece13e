import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from types import TracebackType

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_FORMATTER = logging.Formatter(
    "%(asctime)s.%(msecs)03d - %(levelname)s - %(name)s:%(lineno)d - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def configure_logging(log_dir: Path = Path("logs"), level: str = "INFO") -> None:
    """Log to `<log_dir>/floodit.log` at `level`, and keep a separate history of finished games in `games.log`.

    The terminal is left alone, since it is where the board is drawn.
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    main_handler = RotatingFileHandler(log_dir / "floodit.log", maxBytes=1_000_000, backupCount=3, encoding="utf-8")
    main_handler.setLevel(level)
    main_handler.setFormatter(_FORMATTER)

    # wins and game results are logged at INFO by the game logic; those are kept regardless of `level`
    games_handler = RotatingFileHandler(log_dir / "games.log", maxBytes=1_000_000, backupCount=1, encoding="utf-8")
    games_handler.setLevel(logging.INFO)
    games_handler.setFormatter(_FORMATTER)
    games_handler.addFilter(logging.Filter("floodit.game_logic"))

    root_logger = logging.getLogger()
    root_logger.setLevel(min(logging.getLevelName(level), logging.INFO))
    root_logger.handlers = []
    root_logger.addHandler(main_handler)
    root_logger.addHandler(games_handler)

    sys.excepthook = _log_uncaught_exception


def _log_uncaught_exception(
    exctype: type[BaseException], value: BaseException, traceback: TracebackType | None
) -> None:
    if issubclass(exctype, KeyboardInterrupt):
        # the usual way to quit in the middle of a game
        logging.getLogger(__name__).info("Game aborted by the player")
    else:
        logging.getLogger(__name__).error("Uncaught exception:", exc_info=(exctype, value, traceback))

    sys.__excepthook__(exctype, value, traceback)
