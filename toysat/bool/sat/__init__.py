# coding: utf-8
"""
Backtracking satisfiability check of propositional formulas over named literals.
"""
from .tokenizer import Token, TokType, Tokenizer, tokenize, render_tokens
from .literals import LiteralUniverse, collect_literals, resolve_literals
from .assignment import Assignment
from .evaluator import EvalResult, Evaluator, TokenCursor, evaluate
from .stats import SearchStats
from .backtrack import SearchResult, solve
from .config import CheckerConfig
from .checker import CheckReport, check_formula

__all__ = [
    "Token", "TokType", "Tokenizer", "tokenize", "render_tokens",
    "LiteralUniverse", "collect_literals", "resolve_literals",
    "Assignment",
    "EvalResult", "Evaluator", "TokenCursor", "evaluate",
    "SearchStats",
    "SearchResult", "solve",
    "CheckerConfig",
    "CheckReport", "check_formula",
]
