from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuilderConfig:
    attribute_separator: str = "."  # between consecutive [attr] fragments
    pad_combinator: bool = True  # always surround the combinator with spaces

    @classmethod
    def normalized(cls) -> BuilderConfig:
        """Config producing standard CSS text: ``[a][b]`` and ``div>p``."""
        return cls(attribute_separator="", pad_combinator=False)
