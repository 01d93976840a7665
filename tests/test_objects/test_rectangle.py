"""Tests for the Rectangle model."""

from fundamentals.objects import Rectangle


class TestRectangle:
    def test_dimensions(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self):
        assert Rectangle(10, 20).area() == 200

    def test_area_follows_updates(self):
        r = Rectangle(10, 20)
        r.width = 5
        assert r.area() == 100

    def test_zero_area(self):
        assert Rectangle(0, 7).area() == 0

    def test_float_dimensions(self):
        assert Rectangle(1.5, 2).area() == 3.0
