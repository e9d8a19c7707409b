# coding: utf-8
"""
Recursive-descent evaluator. Parsing and evaluation are one walk over the
token cursor; there is no separate syntax tree.

    <expr>    = <clause> <op> <clause> <op> ...
    <clause>  = ~ <clause>
              = <literal>
              = ( <expr> )
    <op>      = &
              = |
    <literal> = <letter> <alnum> ...

AND and OR share one precedence level; NOT binds tighter because it is
handled inside <clause>. Both operands of a connector are always walked, so
an error on the right is never hidden by the value on the left.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Optional, Sequence, TypeVar

from toysat.bool.sat.assignment import Assignment, bool_to_string
from toysat.bool.sat.stats import SearchStats
from toysat.bool.sat.tokenizer import EOF_TOKEN, Token, TokType
from toysat.utils.exceptions import FormulaSyntaxError

V = TypeVar("V")


class TokenCursor:
    """Position over a token sequence. Reads past the end yield EOF."""

    def __init__(self, tokens: Sequence[Token]):
        self.tokens = tokens
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    @property
    def current(self) -> Token:
        if self.at_end():
            return EOF_TOKEN
        return self.tokens[self.pos]

    def next(self) -> Token:
        """Consume and return the current token."""
        tok = self.current
        if not self.at_end():
            self.pos += 1
        return tok

    def retreat(self) -> None:
        """Unget the token consumed last."""
        if self.pos == 0:
            raise IndexError("cursor is already at the start")
        self.pos -= 1


class FormulaWalker(ABC, Generic[V]):
    """Walks a formula's tokens, combining values through the hooks below.

    Raises FormulaSyntaxError at the first malformed spot.
    """

    def __init__(self, tokens: Sequence[Token], stats: Optional[SearchStats] = None):
        self.tokens = tokens
        self.stats = stats if stats is not None else SearchStats()
        self.cursor = TokenCursor(tokens)

    # value hooks
    @abstractmethod
    def literal(self, tok: Token) -> V:
        """Value of a literal token."""

    @abstractmethod
    def negate(self, value: V) -> V:
        """Value of ~value."""

    @abstractmethod
    def conjoin(self, left: V, right: V) -> V:
        """Value of left & right."""

    @abstractmethod
    def disjoin(self, left: V, right: V) -> V:
        """Value of left | right."""

    def walk(self) -> V:
        """Walk the whole formula from its first token."""
        self.cursor = TokenCursor(self.tokens)
        value = self.expr()
        if not self.cursor.at_end():
            # expr only stops early in front of a close bracket
            raise FormulaSyntaxError("Unexpected Close Bracket")
        return value

    def expr(self) -> V:
        self.stats.expressions += 1
        cursor = self.cursor

        result = self.clause()
        while True:
            tok = cursor.next()
            if tok.kind is TokType.EOF:
                return result
            if tok.kind is TokType.CLOSE_BRACKET:
                cursor.retreat()
                return result
            if tok.kind not in (TokType.AND, TokType.OR):
                raise FormulaSyntaxError(
                    f"Unexpected {tok} -- Only And/Or can connect clauses")
            if cursor.at_end():
                raise FormulaSyntaxError("Expected something after an And/Or")

            right = self.clause()
            if tok.kind is TokType.AND:
                result = self.conjoin(result, right)
            else:
                result = self.disjoin(result, right)

    def clause(self) -> V:
        cursor = self.cursor
        tok = cursor.next()
        kind = tok.kind

        if kind is TokType.NOT:
            if cursor.at_end():
                raise FormulaSyntaxError("Expected something after a Not")
            return self.negate(self.clause())

        if kind is TokType.LITERAL:
            self.stats.lookups += 1
            return self.literal(tok)

        if kind is TokType.OPEN_BRACKET:
            if cursor.at_end():
                raise FormulaSyntaxError("Expected something after an Open Bracket")
            value = self.expr()
            if not cursor.next().is_close_bracket():
                raise FormulaSyntaxError("Expected Close Bracket")
            return value

        if kind is TokType.AND:
            raise FormulaSyntaxError("A clause cannot begin with an &")
        if kind is TokType.OR:
            raise FormulaSyntaxError("A clause cannot begin with an |")
        if kind is TokType.CLOSE_BRACKET:
            raise FormulaSyntaxError("Unexpected Close Bracket")
        if kind is TokType.EOF:
            raise FormulaSyntaxError("Unexpected Eof")
        raise FormulaSyntaxError("Encountered Unknown token")


class Evaluator(FormulaWalker[bool]):
    """Evaluates a formula under an assignment."""

    def __init__(self, tokens: Sequence[Token], assignment: Assignment,
                 stats: Optional[SearchStats] = None):
        super().__init__(tokens, stats)
        self.assignment = assignment

    def literal(self, tok: Token) -> bool:
        universe = self.assignment.universe
        index = tok.index
        if not (0 <= index < len(universe) and universe[index] == tok.text):
            # not resolved against this universe; fall back to the name
            index = universe.index_of(tok.text)
            if index is None:
                raise FormulaSyntaxError(f"Unknown Literal {tok.text}")
        return self.assignment.value_at(index)

    def negate(self, value: bool) -> bool:
        return not value

    def conjoin(self, left: bool, right: bool) -> bool:
        return left and right

    def disjoin(self, left: bool, right: bool) -> bool:
        return left or right


@dataclass(frozen=True)
class EvalResult:
    """Either a truth value or an error message, never both."""

    value: Optional[bool] = None
    error: Optional[str] = None

    @classmethod
    def of(cls, value: bool) -> "EvalResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "EvalResult":
        return cls(error=error)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def is_satisfied(self) -> bool:
        return not self.is_error and bool(self.value)

    def __str__(self) -> str:
        if self.is_error:
            return self.error
        return bool_to_string(bool(self.value))


def evaluate(tokens: Sequence[Token], assignment: Assignment,
             stats: Optional[SearchStats] = None) -> EvalResult:
    """Evaluate the formula `tokens` under `assignment`."""
    try:
        return EvalResult.of(Evaluator(tokens, assignment, stats).walk())
    except FormulaSyntaxError as e:
        return EvalResult.failure(e.message)
