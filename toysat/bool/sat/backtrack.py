# coding: utf-8
"""
Exhaustive backtracking search over literal assignments.

Each call evaluates the whole formula. If it is false and some literal is
still thawed, the next thawed literal (in discovery order) is frozen to True,
then to False, and the search recurses. No propagation, no learning: the
worst case is 2^n evaluations for n literals.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from toysat.bool.sat.assignment import Assignment
from toysat.bool.sat.evaluator import evaluate
from toysat.bool.sat.stats import SearchStats
from toysat.bool.sat.tokenizer import Token
from toysat.utils.types import SolverResult

logger = logging.getLogger(__name__)

# Trial order for a newly frozen literal.
VALUE_ORDER = (True, False)


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a search: exactly one of SAT, UNSAT or ERROR."""

    status: SolverResult
    assignment: Optional[Assignment] = None
    error: Optional[str] = None

    @classmethod
    def satisfied(cls, assignment: Assignment) -> "SearchResult":
        return cls(SolverResult.SAT, assignment=assignment)

    @classmethod
    def unsatisfiable(cls) -> "SearchResult":
        return cls(SolverResult.UNSAT)

    @classmethod
    def failure(cls, error: str) -> "SearchResult":
        return cls(SolverResult.ERROR, error=error)

    @property
    def is_satisfied(self) -> bool:
        return self.status is SolverResult.SAT

    @property
    def is_error(self) -> bool:
        return self.status is SolverResult.ERROR

    def __str__(self) -> str:
        if self.status is SolverResult.ERROR:
            return self.error
        if self.status is SolverResult.UNSAT:
            return "Unstatisfied"
        return "Satisfied with " + str(self.assignment)


def solve(tokens: Sequence[Token], assignment: Assignment,
          stats: Optional[SearchStats] = None, depth: int = 0) -> SearchResult:
    """Search for an extension of `assignment` that makes `tokens` true.

    The first satisfying assignment found is returned as is, thawed suffix
    included. An evaluation error stops the whole search.
    """
    if stats is None:
        stats = SearchStats()
    stats.reached(depth)

    stats.evaluations += 1
    result = evaluate(tokens, assignment, stats)
    if result.is_error:
        return SearchResult.failure(result.error)

    if result.value:
        return SearchResult.satisfied(assignment)

    if not assignment.has_thawed():
        return SearchResult.unsatisfiable()

    name = assignment.universe[assignment.frozen_boundary]
    for value in VALUE_ORDER:
        logger.debug("depth %d: trying %s=%s", depth + 1, name, value)
        outcome = solve(tokens, assignment.freeze_next(value), stats, depth + 1)
        if outcome.status is not SolverResult.UNSAT:
            return outcome

    return SearchResult.unsatisfiable()
