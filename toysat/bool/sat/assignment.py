# coding: utf-8
"""
Working assignment used by the backtracking search.

Values at indices [0, frozen_boundary) are fixed for the current branch
("frozen"); the rest are placeholders ("thawed"), conventionally False.
"""
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from toysat.bool.sat.literals import LiteralUniverse


def bool_to_string(value: bool) -> str:
    return "True" if value else "False"


class Assignment:
    """A value vector over a shared literal universe.

    Extending an assignment never touches it: `freeze_next` copies the value
    vector, so sibling branches of the search cannot see each other's values.
    """

    __slots__ = ("universe", "_values", "frozen_boundary")

    def __init__(self, universe: LiteralUniverse,
                 values: Optional[Sequence[bool]] = None,
                 frozen_boundary: int = 0):
        if values is None:
            values = [False] * len(universe)
        if len(values) != len(universe):
            raise ValueError(
                f"{len(values)} values given for {len(universe)} literals")
        if not 0 <= frozen_boundary <= len(universe):
            raise ValueError(f"frozen boundary {frozen_boundary} out of range")
        self.universe = universe
        self._values: List[bool] = list(values)
        self.frozen_boundary = frozen_boundary

    @classmethod
    def all_thawed(cls, universe: LiteralUniverse) -> "Assignment":
        """The starting point of a search: nothing decided, everything False."""
        return cls(universe)

    @property
    def thawed_count(self) -> int:
        return len(self._values) - self.frozen_boundary

    def has_thawed(self) -> bool:
        return self.frozen_boundary < len(self._values)

    def freeze_next(self, value: bool) -> "Assignment":
        """New assignment with the first thawed literal frozen to `value`."""
        if not self.has_thawed():
            raise ValueError("no thawed literal left to freeze")
        values = list(self._values)
        values[self.frozen_boundary] = value
        return Assignment(self.universe, values, self.frozen_boundary + 1)

    def value_at(self, index: int) -> bool:
        return self._values[index]

    def value_of(self, name: str) -> bool:
        index = self.universe.index_of(name)
        if index is None:
            raise KeyError(name)
        return self._values[index]

    @property
    def values(self) -> Tuple[bool, ...]:
        return tuple(self._values)

    @property
    def frozen_names(self) -> Tuple[str, ...]:
        return self.universe.names[:self.frozen_boundary]

    @property
    def thawed_names(self) -> Tuple[str, ...]:
        return self.universe.names[self.frozen_boundary:]

    def as_dict(self) -> Dict[str, bool]:
        """Name -> value for every literal, in discovery order."""
        return dict(zip(self.universe, self._values))

    def items(self) -> Iterator[Tuple[str, bool]]:
        return zip(self.universe, self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Assignment):
            return False
        return (self.universe == other.universe
                and self._values == other._values
                and self.frozen_boundary == other.frozen_boundary)

    def __hash__(self) -> int:
        return hash((self.universe, tuple(self._values), self.frozen_boundary))

    def __repr__(self) -> str:
        return (f"Assignment({self}, frozen_boundary={self.frozen_boundary})")

    def __str__(self) -> str:
        return " ".join(f"{name}={bool_to_string(value)}" for name, value in self.items())
