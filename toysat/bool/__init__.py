# coding: utf-8
from .sat import check_formula, solve, evaluate, tokenize

# Export
__all__ = ["check_formula", "solve", "evaluate", "tokenize"]
