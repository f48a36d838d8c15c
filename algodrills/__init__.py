"""Algorithm exercises on arrays, strings, linked lists, binary trees, grids and dynamic programming."""

__version__ = "0.1.0"