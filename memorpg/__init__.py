"""MEMO-RPG: a turn-based memory labyrinth game for the terminal."""

__version__ = "1.0.0"

__all__ = ["__version__"]