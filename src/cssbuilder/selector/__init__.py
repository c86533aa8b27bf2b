from cssbuilder.selector.stage import SINGLETON_STAGES, Stage
from cssbuilder.selector.simple import SimpleSelector
from cssbuilder.selector.combined import Combinator, CombinedSelector, Stringifiable
from cssbuilder.selector.builder import CssSelectorBuilder, css_selector_builder

__all__ = [
    "SINGLETON_STAGES",
    "Stage",
    "SimpleSelector",
    "Combinator",
    "CombinedSelector",
    "Stringifiable",
    "CssSelectorBuilder",
    "css_selector_builder",
]
