# coding: utf-8
"""
End-to-end check of one formula: tokenize, collect literals, pre-check the
syntax once, then run the backtracking search.
"""
import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from toysat.bool.sat.assignment import Assignment
from toysat.bool.sat.backtrack import SearchResult, solve
from toysat.bool.sat.config import CheckerConfig
from toysat.bool.sat.evaluator import evaluate
from toysat.bool.sat.literals import LiteralUniverse, collect_literals, resolve_literals
from toysat.bool.sat.stats import SearchStats
from toysat.bool.sat.tokenizer import Token, render_tokens, tokenize
from toysat.utils.exceptions import EmptyFormulaError, NoLiteralsError, NoTokensError
from toysat.utils.types import SolverResult

logger = logging.getLogger(__name__)


@dataclass
class CheckReport:
    """Everything known after checking one formula."""

    tokens: Tuple[Token, ...]
    universe: LiteralUniverse
    result: SearchResult
    stats: SearchStats
    runtime_sec: float = 0.0
    cross_checked: Optional[bool] = None  # None when no cross-check was run
    too_deep: bool = False  # recursion limit hit; result is ERROR

    @property
    def status(self) -> SolverResult:
        return self.result.status

    @property
    def parsed_input(self) -> str:
        return render_tokens(self.tokens)


@contextmanager
def recursion_limit(limit: int) -> Iterator[None]:
    """Raise the interpreter's recursion limit to at least `limit` for a block."""
    old = sys.getrecursionlimit()
    if limit > old:
        sys.setrecursionlimit(limit)
    try:
        yield
    finally:
        sys.setrecursionlimit(old)


def cross_check(tokens: Tuple[Token, ...], result: SearchResult) -> bool:
    """Compare a search verdict (and its model) against z3."""
    # z3 is only needed here
    from toysat.bool.sat.z3sat_solver import Z3SATSolver  # pylint: disable=import-outside-toplevel

    oracle = Z3SATSolver()
    oracle.from_tokens(tokens)
    expected = oracle.check_sat()
    if expected is not result.status:
        logger.warning("Search says %s but z3 says %s", result.status, expected)
        return False
    if result.is_satisfied:
        confirmed = oracle.check_sat_assuming(result.assignment.as_dict())
        if confirmed is not SolverResult.SAT:
            logger.warning("z3 rejects the reported model: %s", result.assignment)
            return False
    return True


def check_formula(text: str, config: Optional[CheckerConfig] = None) -> CheckReport:
    """Decide satisfiability of the formula in `text`.

    Raises a NothingToSolveError subclass for empty input, input without
    tokens and formulas without literals. Syntax errors come back as a report
    whose result has status ERROR; no assignment is attempted for them.
    Running out of recursion depth is also reported as ERROR, with too_deep set.
    """
    if config is None:
        config = CheckerConfig()
    if not text:
        raise EmptyFormulaError()

    tokens = tokenize(text)
    if not tokens:
        raise NoTokensError()
    logger.info("Parsed input: %s", render_tokens(tokens))

    universe = collect_literals(tokens)
    if len(universe) == 0:
        raise NoLiteralsError()
    tokens = resolve_literals(tokens, universe)
    logger.info("Unique literals: %s", universe)

    stats = SearchStats()
    start = time.perf_counter()
    too_deep = False
    with recursion_limit(config.recursion_limit):
        try:
            # One evaluation up front so malformed input is reported as such
            # rather than surfacing somewhere inside the search.
            syntax = evaluate(tokens, Assignment.all_thawed(universe), stats)
            if syntax.is_error:
                logger.info("Formula has invalid syntax -- %s", syntax.error)
                result = SearchResult.failure(syntax.error)
            else:
                result = solve(tokens, Assignment.all_thawed(universe), stats)
        except RecursionError:
            too_deep = True
            logger.warning("Recursion limit %d exceeded", config.recursion_limit)
            result = SearchResult.failure(
                f"Formula is nested too deeply for recursion limit {config.recursion_limit}"
                " -- raise --recursion-limit")
        runtime = time.perf_counter() - start

        logger.info("%s after %d evaluations, max depth %d",
                    result.status, stats.evaluations, stats.max_depth)

        report = CheckReport(tokens, universe, result, stats, runtime, too_deep=too_deep)
        if config.cross_check and not result.is_error:
            report.cross_checked = cross_check(tokens, result)
    return report
