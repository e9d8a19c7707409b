# coding: utf-8
"""
Shared result types.
"""
from enum import Enum


class SolverResult(Enum):
    """Verdict of a satisfiability check."""

    SAT = 0
    UNSAT = 1
    ERROR = 2

    def __str__(self) -> str:
        return self.name.lower()
