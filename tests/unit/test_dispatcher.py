"""Unit tests for cutout category dispatch."""

import math

import pytest

from edgebeam.config import GeometryConfig
from edgebeam.core.dispatcher import build_path_spec, cached_path_spec, classify
from edgebeam.domain import Cutout, CutoutType, FillRule, ShapeFamily, Viewport


@pytest.fixture
def notch() -> Cutout:
    """A centred notch with rounded corners."""
    return Cutout(CutoutType.NOTCH, x=100.0, y=0.0, width=160.0, height=30.0, radius=10.0)


@pytest.fixture
def island() -> Cutout:
    """A pill-shaped island below the top edge."""
    return Cutout(CutoutType.ISLAND, x=120.0, y=10.0, width=120.0, height=40.0, radius=20.0)


@pytest.fixture
def punch_hole() -> Cutout:
    """A round camera hole."""
    return Cutout(CutoutType.PUNCH_HOLE, x=170.0, y=20.0, width=20.0, height=20.0)


class TestClassify:
    """Tests for category to family mapping."""

    @pytest.mark.parametrize(
        ("cutout_type", "family"),
        [
            (CutoutType.NONE, ShapeFamily.BAR),
            (CutoutType.NOTCH, ShapeFamily.BAR),
            (CutoutType.PUNCH_HOLE, ShapeFamily.ORBIT),
            (CutoutType.TEARDROP, ShapeFamily.ORBIT),
            (CutoutType.ISLAND, ShapeFamily.ORBIT),
            ("island", ShapeFamily.ORBIT),
        ],
    )
    def test_known_types(self, cutout_type: CutoutType | str, family: ShapeFamily) -> None:
        """Test each known category maps to its family."""
        assert classify(cutout_type) is family

    def test_unknown_type(self) -> None:
        """Test unknown categories have no family."""
        assert classify("waterfall") is None


class TestNoResult:
    """Tests for inputs that produce nothing to render."""

    def test_unknown_type(self) -> None:
        """Test an unrecognized category yields no result."""
        cutout = Cutout("waterfall", x=0.0, y=0.0, width=10.0, height=10.0)
        assert build_path_spec(cutout) is None

    @pytest.mark.parametrize(
        "cutout_type",
        [CutoutType.NOTCH, CutoutType.PUNCH_HOLE, CutoutType.TEARDROP, CutoutType.ISLAND],
    )
    def test_missing_dimensions(self, cutout_type: CutoutType) -> None:
        """Test a shaped category without a size yields no result."""
        assert build_path_spec(Cutout(cutout_type, x=10.0, y=10.0, width=30.0)) is None
        assert build_path_spec(Cutout(cutout_type, x=10.0, y=10.0, height=30.0)) is None


class TestClearBar:
    """Tests for screens without a cutout."""

    def test_none(self) -> None:
        """Test the straight bar across the default screen."""
        spec = build_path_spec(Cutout.none())
        assert spec is not None
        assert spec.family is ShapeFamily.BAR
        assert spec.path_d == "M 0,0 L 360,0"
        assert spec.perimeter == 360.0
        assert (spec.svg_left, spec.svg_top) == (0.0, 0.0)
        assert spec.svg_width == 360.0
        assert spec.svg_height == 20.0
        assert spec.mask_d == "M 0,0 L 360,0 L 360,20 L 0,20 Z"
        assert spec.mask_fill_rule is FillRule.NONZERO

    def test_none_ignores_dimensions(self) -> None:
        """Test that a size reported with no cutout is ignored."""
        spec = build_path_spec(Cutout(CutoutType.NONE, width=50.0, height=50.0))
        assert spec is not None
        assert spec.path_d == "M 0,0 L 360,0"

    def test_viewport_width(self) -> None:
        """Test the bar spans the given viewport."""
        spec = build_path_spec(Cutout.none(), viewport=Viewport(412.0, 915.0))
        assert spec is not None
        assert spec.path_d == "M 0,0 L 412,0"
        assert spec.perimeter == 412.0

    def test_padding_lowers_bar(self) -> None:
        """Test positive padding moves the bar down and grows the canvas."""
        spec = build_path_spec(Cutout.none(), 4.0)
        assert spec is not None
        assert spec.path_d == "M 0,4 L 360,4"
        assert spec.svg_height == 24.0


class TestNotch:
    """Tests for the notch category."""

    def test_notch_spec(self, notch: Cutout) -> None:
        """Test the detour, canvas and mask for a centred notch."""
        spec = build_path_spec(notch)
        assert spec is not None
        assert spec.family is ShapeFamily.BAR
        assert spec.path_d == (
            "M 0,0 L 90,0 A 10,10 0 0,1 100,10 L 100,20 A 10,10 0 0,0 110,30 "
            "L 250,30 A 10,10 0 0,0 260,20 L 260,10 A 10,10 0 0,1 270,0 L 360,0"
        )
        assert spec.perimeter == pytest.approx(340 + 20 * math.pi)
        assert spec.svg_height == 50.0
        assert spec.mask_d == spec.path_d + " L 360,50 L 0,50 Z"
        assert spec.mask_fill_rule is FillRule.NONZERO

    def test_padding_grows_detour(self, notch: Cutout) -> None:
        """Test positive padding widens and deepens the detour."""
        spec = build_path_spec(notch, 5.0)
        assert spec is not None
        assert spec.path_d.startswith("M 0,5 L 80,5 A 15,15 0 0,1 95,20")
        assert spec.perimeter == pytest.approx(310 + 30 * math.pi)
        assert spec.svg_height == 60.0

    def test_default_radius(self) -> None:
        """Test the default notch radius is used when none is reported."""
        cutout = Cutout(CutoutType.NOTCH, x=100.0, y=0.0, width=160.0, height=30.0)
        spec = build_path_spec(cutout)
        assert spec is not None
        assert "A 4,4 0 0,1 100,4" in spec.path_d

    def test_left_edge(self) -> None:
        """Test a notch flush with the left edge."""
        cutout = Cutout(CutoutType.NOTCH, x=0.0, y=0.0, width=50.0, height=30.0, radius=4.0)
        spec = build_path_spec(cutout)
        assert spec is not None
        assert spec.path_d.startswith("M 0,0 L 0,26 A 4,4 0 0,0 4,30")
        assert spec.path_d.endswith("L 360,0")
        assert spec.perimeter == pytest.approx(396 + 6 * math.pi)

    def test_near_left_edge_reaches_screen_edge(self) -> None:
        """Test a notch just inside the left edge still starts the bar at x=0."""
        cutout = Cutout(CutoutType.NOTCH, x=5.0, y=0.0, width=50.0, height=30.0, radius=10.0)
        spec = build_path_spec(cutout)
        assert spec is not None
        assert spec.path_d.startswith("M 0,0 A 5,5 0 0,1 5,5 L 5,20")
        assert spec.path_d.endswith("L 360,0")
        assert spec.perimeter == pytest.approx(350 + 17.5 * math.pi)


class TestIsland:
    """Tests for the island category."""

    def test_island_spec(self, island: Cutout) -> None:
        """Test a padded island in its local canvas."""
        spec = build_path_spec(island, 5.0)
        assert spec is not None
        assert spec.family is ShapeFamily.ORBIT
        assert (spec.svg_left, spec.svg_top) == (95.0, 0.0)
        assert (spec.svg_width, spec.svg_height) == (170.0, 90.0)
        assert spec.path_d.startswith("M 45,5 L 125,5 A 25,25 0 0,1 150,30")
        assert spec.path_d.endswith("Z")
        assert spec.perimeter == pytest.approx(160 + 50 * math.pi)

    def test_orbit_mask(self, island: Cutout) -> None:
        """Test the mask subtracts the shape from the canvas."""
        spec = build_path_spec(island, 5.0)
        assert spec is not None
        assert spec.mask_d == "M 0,0 L 170,0 L 170,90 L 0,90 Z " + spec.path_d
        assert spec.mask_fill_rule is FillRule.EVENODD

    def test_default_radius(self) -> None:
        """Test the default island radius is used when none is reported."""
        cutout = Cutout(CutoutType.ISLAND, x=120.0, y=30.0, width=120.0, height=40.0)
        spec = build_path_spec(cutout)
        assert spec is not None
        assert spec.path_d.startswith("M 28,20 L 132,20 A 8,8 0 0,1 140,28")

    def test_negative_padding_shrinks(self, island: Cutout) -> None:
        """Test negative padding draws inside the cutout."""
        spec = build_path_spec(island, -5.0)
        assert spec is not None
        assert spec.perimeter == pytest.approx(2 * (110 - 30) + 2 * (30 - 30) + 30 * math.pi)

    def test_missing_origin_defaults_to_zero(self) -> None:
        """Test an island without a position is placed at the origin."""
        cutout = Cutout(CutoutType.ISLAND, width=120.0, height=40.0, radius=20.0)
        spec = build_path_spec(cutout)
        assert spec is not None
        assert (spec.svg_left, spec.svg_top) == (0.0, 0.0)


class TestDot:
    """Tests for the punch hole and teardrop categories."""

    def test_punch_hole_spec(self, punch_hole: Cutout) -> None:
        """Test a circle centred in its local canvas."""
        spec = build_path_spec(punch_hole)
        assert spec is not None
        assert spec.family is ShapeFamily.ORBIT
        assert spec.path_d == "M 40,30 A 10,10 0 1,1 20,30 A 10,10 0 1,1 40,30 Z"
        assert spec.perimeter == pytest.approx(20 * math.pi)
        assert (spec.svg_left, spec.svg_top) == (150.0, 0.0)
        assert (spec.svg_width, spec.svg_height) == (60.0, 60.0)

    def test_teardrop_is_drawn_as_circle(self, punch_hole: Cutout) -> None:
        """Test a teardrop uses the same outline as a punch hole."""
        teardrop = Cutout(
            CutoutType.TEARDROP,
            x=punch_hole.x,
            y=punch_hole.y,
            width=punch_hole.width,
            height=punch_hole.height,
        )
        assert build_path_spec(teardrop) == build_path_spec(punch_hole)

    def test_oval_uses_larger_dimension(self) -> None:
        """Test an oval reading is enclosed by a circle on its larger side."""
        cutout = Cutout(CutoutType.PUNCH_HOLE, x=100.0, y=100.0, width=30.0, height=20.0)
        spec = build_path_spec(cutout)
        assert spec is not None
        assert spec.perimeter == pytest.approx(30 * math.pi)

    def test_padding_grows_radius(self, punch_hole: Cutout) -> None:
        """Test padding adds to the radius."""
        spec = build_path_spec(punch_hole, 3.0)
        assert spec is not None
        assert spec.perimeter == pytest.approx(26 * math.pi)

    def test_min_extent_floor(self, punch_hole: Cutout) -> None:
        """Test a huge negative padding keeps a visible circle."""
        spec = build_path_spec(punch_hole, -50.0)
        assert spec is not None
        assert spec.perimeter == pytest.approx(math.pi)


class TestConfig:
    """Tests for geometry settings."""

    def test_bleed(self, punch_hole: Cutout) -> None:
        """Test bleed only grows the canvas."""
        plain = build_path_spec(punch_hole, config=GeometryConfig(bleed=0.0))
        wide = build_path_spec(punch_hole, config=GeometryConfig(bleed=40.0))
        assert plain is not None and wide is not None
        assert plain.perimeter == wide.perimeter
        assert plain.svg_width == 20.0
        assert wide.svg_width == 100.0

    def test_mask_disabled(self, island: Cutout) -> None:
        """Test the mask can be switched off."""
        spec = build_path_spec(island, config=GeometryConfig(directional_mask=False))
        assert spec is not None
        assert spec.mask_d is None
        assert spec.mask_fill_rule is None


class TestDeterminism:
    """Tests for repeatable output."""

    def test_same_input_same_output(self, notch: Cutout) -> None:
        """Test identical inputs produce identical specs."""
        assert build_path_spec(notch, 2.5) == build_path_spec(notch, 2.5)

    def test_cached(self, island: Cutout) -> None:
        """Test the memoized builder returns the same spec."""
        assert cached_path_spec(island, 5.0) == build_path_spec(island, 5.0)
        assert cached_path_spec(island, 5.0) is cached_path_spec(island, 5.0)
