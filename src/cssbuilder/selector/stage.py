"""Fragment stages of a simple selector, in their required order."""

from __future__ import annotations

from enum import IntEnum


class Stage(IntEnum):
    """Ordinal position of a fragment kind.

    A simple selector only accepts fragments whose stage is not behind the
    latest stage already appended.
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_name(cls, name: str) -> Stage:
        """Look up a stage by its fragment name (``class``, ``pseudo-class`` ...)."""
        key = name.strip().lower().replace("_", "-")
        if key in _ALIASES:
            return _ALIASES[key]
        # camelCase spellings: pseudoClass, pseudoElement
        key = name.strip().replace("_", "")
        for stage in cls:
            if key.lower() == stage.label.replace("-", ""):
                return stage
        raise ValueError(f"Unknown fragment kind: {name!r}")


_LABELS: dict[Stage, str] = {
    Stage.ELEMENT: "element",
    Stage.ID: "id",
    Stage.CLASS: "class",
    Stage.ATTRIBUTE: "attr",
    Stage.PSEUDO_CLASS: "pseudo-class",
    Stage.PSEUDO_ELEMENT: "pseudo-element",
}

_ALIASES: dict[str, Stage] = {label: stage for stage, label in _LABELS.items()}
_ALIASES["attribute"] = Stage.ATTRIBUTE

# Stages that hold at most one fragment.
SINGLETON_STAGES = frozenset({Stage.ELEMENT, Stage.ID, Stage.PSEUDO_ELEMENT})
