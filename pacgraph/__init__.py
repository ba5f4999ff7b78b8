"""Maze-chase arcade game with greedy monster strategies on a maze graph, played in a Tkinter window."""

__version__ = "0.1.0"