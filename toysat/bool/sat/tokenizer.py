# coding: utf-8
"""
Tokenizer for propositional formulas.

    &   and          |   or          ~   not
    ( ) brackets     letters/digits  literal names (must start with a letter)

Tokenizing never fails: any other character becomes an Unknown token and is
reported later by the evaluator.
"""
import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Sequence, Tuple

LETTERS = frozenset(string.ascii_letters)
ALNUM = frozenset(string.ascii_letters + string.digits)
WHITESPACE = frozenset(string.whitespace)


class TokType(Enum):
    """Token tags."""

    UNKNOWN = auto()
    AND = auto()
    OR = auto()
    NOT = auto()
    LITERAL = auto()
    OPEN_BRACKET = auto()
    CLOSE_BRACKET = auto()
    EOF = auto()


_SYMBOLS = {
    "&": TokType.AND,
    "|": TokType.OR,
    "~": TokType.NOT,
    "(": TokType.OPEN_BRACKET,
    ")": TokType.CLOSE_BRACKET,
}


@dataclass(frozen=True)
class Token:
    """A token of a formula.

    `text` is the literal's name for LITERAL tokens, the raw character for
    UNKNOWN tokens and the operator symbol otherwise. `index` is the literal's
    position in the literal universe, -1 until it has been resolved.
    """

    kind: TokType
    text: str = ""
    index: int = -1

    def is_literal(self) -> bool:
        return self.kind is TokType.LITERAL

    def is_close_bracket(self) -> bool:
        return self.kind is TokType.CLOSE_BRACKET

    def is_eof(self) -> bool:
        return self.kind is TokType.EOF

    def __str__(self) -> str:
        if self.kind is TokType.EOF:
            return "Eof"
        return self.text


EOF_TOKEN = Token(TokType.EOF)


class Tokenizer:
    """Single pass, left to right scanner over one line of text."""

    def __init__(self, line: str):
        self.line = line
        self.pos = 0

    def get_token(self) -> Token:
        """Return the next token, EOF once the text is exhausted."""
        line = self.line
        while self.pos < len(line):
            ch = line[self.pos]
            if ch in WHITESPACE:
                self.pos += 1
                continue

            if ch in _SYMBOLS:
                self.pos += 1
                return Token(_SYMBOLS[ch], ch)

            if ch in LETTERS:
                start = self.pos
                self.pos += 1
                # maximal munch
                while self.pos < len(line) and line[self.pos] in ALNUM:
                    self.pos += 1
                return Token(TokType.LITERAL, line[start:self.pos])

            self.pos += 1
            return Token(TokType.UNKNOWN, ch)
        return EOF_TOKEN


def tokenize(text: str) -> Tuple[Token, ...]:
    """Tokenize `text`. The terminating EOF is not part of the result."""
    tokenizer = Tokenizer(text)
    tokens: List[Token] = []
    while True:
        tok = tokenizer.get_token()
        if tok.is_eof():
            break
        tokens.append(tok)
    return tuple(tokens)


def render_tokens(tokens: Sequence[Token]) -> str:
    """Join the text forms of `tokens` with single spaces."""
    return " ".join(str(tok) for tok in tokens)
