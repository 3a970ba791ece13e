from floodit.ui.cli.ui import CLI

__all__ = ["CLI"]
