"""Tests for the Stage ordering enum."""

import pytest

from cssbuilder.selector import SINGLETON_STAGES, Stage


class TestStageOrder:
    def test_ordinals_follow_fragment_order(self):
        assert list(Stage) == sorted(Stage)
        assert Stage.ELEMENT < Stage.ID < Stage.CLASS < Stage.ATTRIBUTE
        assert Stage.ATTRIBUTE < Stage.PSEUDO_CLASS < Stage.PSEUDO_ELEMENT

    def test_singletons(self):
        assert SINGLETON_STAGES == {Stage.ELEMENT, Stage.ID, Stage.PSEUDO_ELEMENT}


class TestFromName:
    @pytest.mark.parametrize(
        "name, stage",
        [
            ("element", Stage.ELEMENT),
            ("id", Stage.ID),
            ("class", Stage.CLASS),
            ("attr", Stage.ATTRIBUTE),
            ("attribute", Stage.ATTRIBUTE),
            ("pseudo-class", Stage.PSEUDO_CLASS),
            ("pseudo_class", Stage.PSEUDO_CLASS),
            ("pseudoClass", Stage.PSEUDO_CLASS),
            ("pseudoElement", Stage.PSEUDO_ELEMENT),
            ("PSEUDO-ELEMENT", Stage.PSEUDO_ELEMENT),
        ],
    )
    def test_known_names(self, name, stage):
        assert Stage.from_name(name) is stage

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown fragment kind"):
            Stage.from_name("combinator")

    def test_label(self):
        assert Stage.PSEUDO_CLASS.label == "pseudo-class"
