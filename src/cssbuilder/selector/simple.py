"""SimpleSelector: a fluent, order-checked compound selector."""

from __future__ import annotations

import logging

from cssbuilder.config import BuilderConfig
from cssbuilder.errors import DuplicateFragmentError, OrderViolationError
from cssbuilder.selector.stage import SINGLETON_STAGES, Stage

logger = logging.getLogger(__name__)


class SimpleSelector:
    """Accumulates selector fragments in the order

        element, id, class, attribute, pseudo-class, pseudo-element

    Each append method returns the selector itself so calls can be chained.
    Element, id and pseudo-element may be set once; classes, attributes and
    pseudo-classes may repeat.  Appending a fragment whose stage is behind
    the latest stage raises :class:`OrderViolationError`; setting a singleton
    fragment twice raises :class:`DuplicateFragmentError`.
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self._config = config or BuilderConfig()
        self._stage: Stage | None = None
        self._element: str | None = None
        self._id: str | None = None
        self._classes: list[str] = []
        self._attributes: list[str] = []
        self._pseudo_classes: list[str] = []
        self._pseudo_element: str | None = None

    # --- state ------------------------------------------------------------------

    @property
    def stage(self) -> Stage | None:
        """The latest stage appended, or None for an empty selector."""
        return self._stage

    @property
    def element_name(self) -> str | None:
        return self._element

    @property
    def id_name(self) -> str | None:
        return self._id

    @property
    def class_names(self) -> list[str]:
        return list(self._classes)

    @property
    def attributes(self) -> list[str]:
        return list(self._attributes)

    @property
    def pseudo_classes(self) -> list[str]:
        return list(self._pseudo_classes)

    @property
    def pseudo_element_name(self) -> str | None:
        return self._pseudo_element

    # --- fragments --------------------------------------------------------------

    def element(self, value: str) -> SimpleSelector:
        """Set the type selector (``div``, ``a``)."""
        self._advance(Stage.ELEMENT, self._element)
        self._element = value
        return self

    def id(self, value: str) -> SimpleSelector:
        """Set the id selector, rendered as ``#value``."""
        self._advance(Stage.ID, self._id)
        self._id = value
        return self

    def class_(self, value: str) -> SimpleSelector:
        """Add a class selector, rendered as ``.value``."""
        self._advance(Stage.CLASS)
        self._classes.append(value)
        return self

    def attr(self, value: str) -> SimpleSelector:
        """Add an attribute selector; *value* is the text inside the brackets."""
        self._advance(Stage.ATTRIBUTE)
        self._attributes.append(value)
        return self

    def pseudo_class(self, value: str) -> SimpleSelector:
        """Add a pseudo-class, rendered as ``:value``."""
        self._advance(Stage.PSEUDO_CLASS)
        self._pseudo_classes.append(value)
        return self

    def pseudo_element(self, value: str) -> SimpleSelector:
        """Set the pseudo-element, rendered as ``::value``."""
        self._advance(Stage.PSEUDO_ELEMENT, self._pseudo_element)
        self._pseudo_element = value
        return self

    def _advance(self, target: Stage, current: str | None = None) -> None:
        """Check *target* against the stage pointer and move the pointer up.

        *current* is the existing value of a singleton slot; None means unset.
        """
        if self._stage is not None and self._stage > target:
            logger.debug(
                "Rejected %s fragment after %s", target.label, self._stage.label
            )
            raise OrderViolationError(stage=target)
        if target in SINGLETON_STAGES and current is not None:
            logger.debug("Rejected second %s fragment", target.label)
            raise DuplicateFragmentError(stage=target)
        self._stage = target

    # --- output -----------------------------------------------------------------

    def stringify(self) -> str:
        """Render the selector text; repeated calls return the same string."""
        parts = [
            self._element or "",
            f"#{self._id}" if self._id is not None else "",
            "".join(f".{name}" for name in self._classes),
            self._config.attribute_separator.join(
                f"[{expr}]" for expr in self._attributes
            ),
            "".join(f":{name}" for name in self._pseudo_classes),
            f"::{self._pseudo_element}" if self._pseudo_element is not None else "",
        ]
        return "".join(parts)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SimpleSelector({self.stringify()!r})"
