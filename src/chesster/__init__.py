"""Chesster: a two-player chess rules engine with a random-move opponent."""

__version__ = "0.1.0"
