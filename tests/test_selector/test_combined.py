"""Tests for CombinedSelector and Combinator."""

from __future__ import annotations

import pytest

from cssbuilder.selector import Combinator, CombinedSelector, SimpleSelector


class _Fixed:
    """Minimal selector-like operand."""

    def __init__(self, text: str):
        self.text = text
        self.calls = 0

    def stringify(self) -> str:
        self.calls += 1
        return self.text


class TestCombinator:
    def test_tokens(self):
        assert Combinator.DESCENDANT == " "
        assert Combinator.CHILD == ">"
        assert Combinator.ADJACENT_SIBLING == "+"
        assert Combinator.GENERAL_SIBLING == "~"


class TestCombinedSelector:
    def test_padded_output(self):
        node = CombinedSelector.of(_Fixed("div"), "+", _Fixed("table"))
        assert node.stringify() == "div + table"

    def test_descendant_gives_three_spaces(self):
        node = CombinedSelector.of(_Fixed("tr"), " ", _Fixed("td"))
        assert node.stringify() == "tr   td"

    def test_enum_combinator(self):
        node = CombinedSelector.of(_Fixed("ul"), Combinator.CHILD, _Fixed("li"))
        assert node.stringify() == "ul > li"
        assert node.combinator == ">"

    def test_arbitrary_combinator_string(self):
        node = CombinedSelector.of(_Fixed("a"), "||", _Fixed("b"))
        assert node.stringify() == "a || b"

    def test_operands_captured_eagerly(self):
        left = SimpleSelector().element("div")
        node = CombinedSelector.of(left, "~", SimpleSelector().element("p"))
        left.class_("late")
        assert node.left == "div"
        assert node.stringify() == "div ~ p"

    def test_operands_stringified_once(self):
        left, right = _Fixed("a"), _Fixed("b")
        node = CombinedSelector.of(left, ">", right)
        node.stringify()
        node.stringify()
        assert left.calls == 1
        assert right.calls == 1

    def test_frozen(self):
        node = CombinedSelector(left="a", combinator="+", right="b")
        with pytest.raises(AttributeError):
            node.left = "c"  # type: ignore[misc]

    def test_nested(self):
        inner = CombinedSelector.of(_Fixed("b"), "~", _Fixed("c"))
        outer = CombinedSelector.of(_Fixed("a"), "+", inner)
        assert outer.stringify() == "a + " + inner.stringify()
        assert outer.stringify() == "a + b ~ c"

    def test_idempotent(self):
        node = CombinedSelector.of(_Fixed("a"), "+", _Fixed("b"))
        assert node.stringify() == node.stringify()
        assert str(node) == "a + b"


class TestUnpadded:
    def test_child(self):
        node = CombinedSelector.of(
            _Fixed("ul"), ">", _Fixed("li"), pad_combinator=False
        )
        assert node.stringify() == "ul>li"

    def test_descendant_single_space(self):
        node = CombinedSelector.of(
            _Fixed("tr"), " ", _Fixed("td"), pad_combinator=False
        )
        assert node.stringify() == "tr td"

    def test_padded_combinator_token_is_trimmed(self):
        node = CombinedSelector(left="a", combinator=" + ", right="b", pad_combinator=False)
        assert node.stringify() == "a+b"
