# coding: utf-8
from .types import SolverResult
from .exceptions import (
    ToysatException,
    FormulaSyntaxError,
    NothingToSolveError,
    EmptyFormulaError,
    NoTokensError,
    NoLiteralsError,
)
