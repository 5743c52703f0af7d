"""CrissCross: a 5x5 symbol-placing puzzle game with a pygame window."""

__version__ = "0.1.0"
__all__ = ["board", "button", "clicks", "display", "game"]