"""Solutions to classic algorithm puzzles: Roman numerals, strings, counting, sequences, dynamic programming, Sudoku and shortest paths."""

__version__ = "0.1.0"