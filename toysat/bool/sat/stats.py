# coding: utf-8
"""Diagnostic counters, threaded through evaluation and search."""
from dataclasses import dataclass


@dataclass
class SearchStats:
    """Counters gathered while checking one formula. Advisory only."""

    evaluations: int = 0  # whole-formula evaluations requested by the search
    expressions: int = 0  # expr productions entered, brackets included
    lookups: int = 0      # literal values read
    max_depth: int = 0    # deepest search recursion reached

    def reached(self, depth: int) -> None:
        if depth > self.max_depth:
            self.max_depth = depth
