"""Combinators and the CombinedSelector node."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol


class Combinator(StrEnum):
    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


class Stringifiable(Protocol):
    """Anything that renders itself as selector text."""

    def stringify(self) -> str: ...


@dataclass(frozen=True)
class CombinedSelector:
    """Two rendered selectors joined by a combinator.

    Operands are captured as text when the node is built, so later changes
    to a SimpleSelector do not leak into an existing combination.  With
    ``pad_combinator`` set (the default) the combinator is always surrounded
    by single spaces, so a descendant combinator renders as three spaces.
    """

    left: str
    combinator: str
    right: str
    pad_combinator: bool = True

    @classmethod
    def of(
        cls,
        selector1: Stringifiable,
        combinator: str,
        selector2: Stringifiable,
        *,
        pad_combinator: bool = True,
    ) -> CombinedSelector:
        """Build a node from two selector-like operands."""
        return cls(
            left=selector1.stringify(),
            combinator=str(combinator),
            right=selector2.stringify(),
            pad_combinator=pad_combinator,
        )

    def stringify(self) -> str:
        if self.pad_combinator:
            return f"{self.left} {self.combinator} {self.right}"
        token = self.combinator.strip() or " "
        return f"{self.left}{token}{self.right}"

    def __str__(self) -> str:
        return self.stringify()
