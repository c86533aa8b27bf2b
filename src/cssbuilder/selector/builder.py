"""Entry-point facade for building selectors."""

from __future__ import annotations

import logging

from cssbuilder.config import BuilderConfig
from cssbuilder.selector.combined import CombinedSelector, Stringifiable
from cssbuilder.selector.simple import SimpleSelector

logger = logging.getLogger(__name__)


class CssSelectorBuilder:
    """Factory for selectors.

    Every fragment method returns a new :class:`SimpleSelector` seeded with
    that fragment; chain further fragments on the result.

    Example::

        builder = CssSelectorBuilder()
        builder.id("main").class_("container").class_("editable").stringify()
        # '#main.container.editable'
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()

    def _new(self) -> SimpleSelector:
        return SimpleSelector(self.config)

    def element(self, value: str) -> SimpleSelector:
        return self._new().element(value)

    def id(self, value: str) -> SimpleSelector:
        return self._new().id(value)

    def class_(self, value: str) -> SimpleSelector:
        return self._new().class_(value)

    def attr(self, value: str) -> SimpleSelector:
        return self._new().attr(value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return self._new().pseudo_class(value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return self._new().pseudo_element(value)

    def combine(
        self, selector1: Stringifiable, combinator: str, selector2: Stringifiable
    ) -> CombinedSelector:
        """Join two selectors with *combinator* (``" "``, ``">"``, ``"+"``, ``"~"``)."""
        combined = CombinedSelector.of(
            selector1,
            combinator,
            selector2,
            pad_combinator=self.config.pad_combinator,
        )
        logger.debug(
            "Combined %r %r %r", combined.left, combined.combinator, combined.right
        )
        return combined


css_selector_builder = CssSelectorBuilder()
