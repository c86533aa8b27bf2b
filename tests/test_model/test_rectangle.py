from __future__ import annotations

from cssbuilder.model import Rectangle


class TestRectangle:
    def test_fields(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self):
        assert Rectangle(10, 20).area() == 200

    def test_area_follows_mutation(self):
        r = Rectangle(2, 3)
        r.width = 5
        assert r.area() == 15

    def test_float_area(self):
        assert Rectangle(1.5, 2).area() == 3.0
