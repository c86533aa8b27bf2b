"""Error hierarchy for the selector builder."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from cssbuilder.selector.stage import Stage

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)


class SelectorError(Exception):
    """Base error for all cssbuilder errors."""

    def __init__(self, message: str, *, stage: Stage | None = None) -> None:
        super().__init__(message)
        self.stage = stage


class OrderViolationError(SelectorError):
    """A fragment was appended after a fragment of a later stage."""

    def __init__(self, message: str = ORDER_MESSAGE, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class DuplicateFragmentError(SelectorError):
    """A second element, id or pseudo-element was appended."""

    def __init__(self, message: str = DUPLICATE_MESSAGE, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
