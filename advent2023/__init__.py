"""Puzzle solutions for days 19 to 25 with tools to run, time and benchmark them."""

__version__ = "0.11.0"