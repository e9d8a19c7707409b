# coding: utf-8
"""Configuration for a satisfiability check."""

from dataclasses import dataclass


@dataclass
class CheckerConfig:
    """Configuration for check_formula."""

    # Both the evaluator and the search recurse: formula nesting depth plus
    # literal count bounds the stack. Python's limit is raised to at least this.
    recursion_limit: int = 10000
    # Verify the verdict with the z3 oracle and warn on disagreement.
    cross_check: bool = False

    def __post_init__(self) -> None:
        if self.recursion_limit <= 0:
            raise ValueError("recursion_limit must be positive")
