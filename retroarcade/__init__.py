"""Snake and Minesweeper on a grid, with curses and pygame displays that can be switched at run time."""

__version__ = "0.1.0"
__all__ = ["__version__"]