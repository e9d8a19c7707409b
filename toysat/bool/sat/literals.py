# coding: utf-8
"""
The literal universe: distinct literal names of a formula in the order they
first occur. A name's position is its index into every assignment vector.
"""
import dataclasses
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from toysat.bool.sat.tokenizer import Token


class LiteralUniverse:
    """Ordered set of literal names, read-only once built.

    One instance is shared by reference by every assignment derived from the
    same formula.
    """

    __slots__ = ("_names", "_index")

    def __init__(self, names: Iterable[str] = ()):
        self._names: List[str] = []
        self._index: Dict[str, int] = {}
        for name in names:
            if name not in self._index:
                self._index[name] = len(self._names)
                self._names.append(name)

    @classmethod
    def from_tokens(cls, tokens: Sequence[Token]) -> "LiteralUniverse":
        return cls(tok.text for tok in tokens if tok.is_literal())

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._names)

    def index_of(self, name: str) -> Optional[int]:
        """Index of `name`, None when the name is not part of the universe."""
        return self._index.get(name)

    def __getitem__(self, index: int) -> str:
        return self._names[index]

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __eq__(self, other) -> bool:
        if not isinstance(other, LiteralUniverse):
            return False
        return self._names == other._names

    def __hash__(self) -> int:
        return hash(tuple(self._names))

    def __repr__(self) -> str:
        return f"LiteralUniverse({self._names!r})"

    def __str__(self) -> str:
        return " ".join(self._names)


def collect_literals(tokens: Sequence[Token]) -> LiteralUniverse:
    """Build the universe of `tokens` in first-occurrence order."""
    return LiteralUniverse.from_tokens(tokens)


def resolve_literals(tokens: Sequence[Token], universe: LiteralUniverse) -> Tuple[Token, ...]:
    """Return `tokens` with each literal's universe index attached.

    Names absent from `universe` keep index -1.
    """
    resolved = []
    for tok in tokens:
        if tok.is_literal():
            index = universe.index_of(tok.text)
            tok = dataclasses.replace(tok, index=-1 if index is None else index)
        resolved.append(tok)
    return tuple(resolved)
