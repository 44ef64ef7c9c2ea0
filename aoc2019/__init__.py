"""Solutions to days 1 to 7 of the 2019 Advent of Code puzzles, with a day-by-day command line."""

__version__ = "0.1.0"