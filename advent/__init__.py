"""Solutions to a selection of Advent of Code puzzles from 2017 to 2020."""

__version__ = "0.1.0"