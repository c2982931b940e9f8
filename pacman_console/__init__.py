"""A Pac-Man style maze game for the terminal: board, rule variants, game state, rendering and command line."""

__version__ = "0.1.0"
__all__ = ["__version__"]