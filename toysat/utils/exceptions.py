# coding: utf-8
"""
Public subclasses of different Exceptions
"""


class ToysatException(Exception):
    """Base class for toysat exceptions"""

    pass


class FormulaSyntaxError(ToysatException):
    """Raised by the evaluator where a malformed formula is detected."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NothingToSolveError(ToysatException):
    """The input holds nothing the search could work on."""

    pass


class EmptyFormulaError(NothingToSolveError):
    """The input text is empty."""

    def __init__(self):
        super().__init__("Contents is empty -- cannot solve")


class NoTokensError(NothingToSolveError):
    """The input text has no tokens (only whitespace)."""

    def __init__(self):
        super().__init__("No tokens found -- cannot solve")


class NoLiteralsError(NothingToSolveError):
    """The formula references no literal at all."""

    def __init__(self):
        super().__init__("There are no literals -- nothing to solve")
