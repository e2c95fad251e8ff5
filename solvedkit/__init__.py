"""Solved algorithm challenges: lists, trees, tries, disjoint sets, graphs, grids, arrays, sorting, searching and strings."""

__version__ = "0.1.0"