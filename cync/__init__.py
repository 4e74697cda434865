"""Watch the system clipboard and report changes to its text."""

__version__ = "0.1.0"
__all__ = ["clipboard", "watcher", "cli"]