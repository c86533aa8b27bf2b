"""cssbuilder: fluent CSS selector construction."""
from __future__ import annotations

__version__ = "0.1.0"

from cssbuilder.config import BuilderConfig
from cssbuilder.errors import (
    DuplicateFragmentError,
    OrderViolationError,
    SelectorError,
)
from cssbuilder.model import Rectangle
from cssbuilder.selector import (
    Combinator,
    CombinedSelector,
    CssSelectorBuilder,
    SimpleSelector,
    Stage,
    css_selector_builder,
)
from cssbuilder.serialization import from_json, to_json

__all__ = [
    "__version__",
    "BuilderConfig",
    "DuplicateFragmentError",
    "OrderViolationError",
    "SelectorError",
    "Rectangle",
    "Combinator",
    "CombinedSelector",
    "CssSelectorBuilder",
    "SimpleSelector",
    "Stage",
    "css_selector_builder",
    "from_json",
    "to_json",
]
