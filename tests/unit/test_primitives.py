"""Unit tests for primitive outlines."""

import math

import pytest

from edgebeam.core.pathdata import parse_path_data
from edgebeam.core.primitives import (
    circle_path,
    circle_perimeter,
    rounded_rect_path,
    rounded_rect_perimeter,
    safe_corner_radius,
)


class TestCircle:
    """Tests for the circle primitive."""

    def test_circle_path(self) -> None:
        """Test the exact two-arc circle outline."""
        assert circle_path(30, 30, 10) == (
            "M 40,30 A 10,10 0 1,1 20,30 A 10,10 0 1,1 40,30 Z"
        )

    def test_circle_uses_two_arcs(self) -> None:
        """Test the outline is two semicircles starting at the rightmost point."""
        commands = parse_path_data(circle_path(0, 0, 4))
        assert [c for c, _ in commands] == ["M", "A", "A", "Z"]
        assert commands[0][1] == (4.0, 0.0)
        assert commands[1][1][-2:] == (-4.0, 0.0)

    @pytest.mark.parametrize("r", [0.5, 1.0, 10.0, 63.0])
    def test_circle_perimeter(self, r: float) -> None:
        """Test circumference formula."""
        assert circle_perimeter(r) == pytest.approx(2 * math.pi * r)


class TestRoundedRect:
    """Tests for the rounded rectangle primitive."""

    def test_rounded_rect_path(self) -> None:
        """Test the clockwise outline from the end of the top-left arc."""
        assert rounded_rect_path(0, 0, 100, 40, 10) == (
            "M 10,0 L 90,0 A 10,10 0 0,1 100,10 L 100,30 "
            "A 10,10 0 0,1 90,40 L 10,40 A 10,10 0 0,1 0,30 "
            "L 0,10 A 10,10 0 0,1 10,0 Z"
        )

    def test_radius_clamped_to_half_height(self) -> None:
        """Test a pill shape when the radius exceeds half the height."""
        path = rounded_rect_path(0, 0, 126, 37, 50)
        assert path.startswith("M 18.5,0 L 107.5,0 A 18.5,18.5 0 0,1 126,18.5")

    def test_safe_corner_radius(self) -> None:
        """Test radius clamping rules."""
        assert safe_corner_radius(20, 126, 37) == 18.5
        assert safe_corner_radius(5, 126, 37) == 5
        assert safe_corner_radius(-3, 10, 10) == 0

    def test_perimeter_formula(self) -> None:
        """Test straight edges plus one full circle of corners."""
        expected = 2 * (100 - 20) + 2 * (40 - 20) + 2 * math.pi * 10
        assert rounded_rect_perimeter(100, 40, 10) == pytest.approx(expected)

    def test_square_corners(self) -> None:
        """Test a zero radius gives the plain rectangle perimeter."""
        assert rounded_rect_perimeter(30, 20, 0) == pytest.approx(100.0)

    def test_full_pill_is_a_circle(self) -> None:
        """Test a square with maximal radius measures as a circle."""
        assert rounded_rect_perimeter(20, 20, 50) == pytest.approx(circle_perimeter(10))

    @pytest.mark.parametrize(
        ("w", "h", "r"),
        [(10, 10, 100), (126, 37, 20), (1, 50, 3), (80, 80, -5)],
    )
    def test_straight_segments_never_negative(self, w: float, h: float, r: float) -> None:
        """Test the perimeter is at least the straight-edge lower bound."""
        sr = safe_corner_radius(r, w, h)
        assert rounded_rect_perimeter(w, h, r) >= 2 * (w + h) - 8 * sr
