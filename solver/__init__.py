"""Sudoku solving engine: candidate propagation, region claims and backtracking search."""

from .search import SearchEngine, solve

__all__ = ["SearchEngine", "solve"]
