"""Neon Maze: a perfect-maze game with level progression."""
