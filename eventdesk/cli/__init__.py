from eventdesk.cli.console import main

__all__ = ["main"]
