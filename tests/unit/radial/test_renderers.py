"""Unit tests for arc and label rendering."""

import math
import xml.etree.ElementTree as ET

import pytest

from blogcharts.radial.base import ArcGeometry, ChartVariant
from blogcharts.radial.config import GRADIENTS, get_style_profile
from blogcharts.radial.renderers import (
    arc_path,
    fmt,
    format_value,
    render_arc,
    render_background,
    render_labels,
)


def _geometry(label="A", value=30, inner=50.0, outer=120.0) -> ArcGeometry:
    return ArcGeometry(
        label=label,
        value=value,
        start_angle=0.2,
        end_angle=1.8,
        mid_angle=1.0,
        inner_radius=inner,
        outer_radius=outer,
        text_radius=outer + 20,
        label_x=100.0,
        label_y=-50.0,
        value_x=60.0,
        value_y=-30.0,
        label_rotation=57.29578,
    )


class TestFormatting:
    def test_fmt_trims_trailing_zeros(self):
        assert fmt(100.0) == "100"
        assert fmt(10.5) == "10.5"
        assert fmt(1 / 3) == "0.333"

    def test_fmt_negative_zero(self):
        assert fmt(-0.0001) == "0"

    def test_format_value(self):
        assert format_value(30) == "30"
        assert format_value(30.0) == "30"
        assert format_value(12.5) == "12.5"

    def test_format_value_keeps_large_integers(self):
        assert format_value(1234567) == "1234567"
        assert format_value(1234567.0) == "1234567"

    def test_format_value_keeps_long_decimals(self):
        assert format_value(12.3456789) == "12.3456789"


class TestArcPath:
    def test_sharp_arc_has_two_arcs(self):
        path = arc_path(0.2, 1.8, 50.0, 120.0, corner_radius=0)

        assert path.startswith("M")
        assert path.endswith("Z")
        assert path.count("A") == 2

    def test_rounded_arc_has_four_corners(self):
        path = arc_path(0.2, 1.8, 50.0, 120.0, corner_radius=4)
        assert path.count("A") == 6

    def test_zero_thickness_does_not_raise(self):
        path = arc_path(0.2, 1.8, 50.0, 50.0, corner_radius=4)

        assert path.startswith("M")
        assert path.endswith("Z")
        assert path.count("A") == 2

    def test_zero_outer_radius(self):
        assert arc_path(0.2, 1.8, 0.0, 0.0, corner_radius=4) == "M0,0Z"

    def test_zero_span(self):
        path = arc_path(1.0, 1.0, 50.0, 120.0)
        assert "A" not in path

    def test_full_circle_is_a_ring(self):
        path = arc_path(0.0, 2 * math.pi, 50.0, 120.0, corner_radius=4)
        assert path.count("M") == 2

    def test_large_arc_flag(self):
        path = arc_path(0.0, 1.6 * math.pi, 50.0, 120.0, corner_radius=0)
        assert "A120,120 0 1 1" in path
        assert "A50,50 0 1 0" in path

    def test_starts_at_twelve_oclock(self):
        path = arc_path(0.0, math.pi / 2, 50.0, 100.0, corner_radius=0)

        assert path.startswith("M0,-100A100,100 0 0 1 100,0")
        assert path.endswith("A50,50 0 0 0 0,-50Z")

    def test_corner_radius_clamped_to_thickness(self):
        path = arc_path(0.2, 1.8, 50.0, 52.0, corner_radius=4)
        assert "A1,1 0 0 1" in path

    def test_pie_slice_when_inner_radius_is_zero(self):
        path = arc_path(0.2, 1.8, 0.0, 100.0, corner_radius=0)
        assert "L0,0" in path


class TestRenderArc:
    def test_static_arc(self):
        element = render_arc(_geometry(), "#93F9B9", corner_radius=4)

        assert element.startswith("<path ")
        assert 'fill="#93F9B9"' in element
        assert "data-label" not in element

    def test_interactive_arc_is_hit_region(self):
        element = render_arc(_geometry(label="Volume & Volatility"), "#93F9B9", interactive=True)

        assert 'class="radial-bar"' in element
        assert 'data-label="Volume &amp; Volatility"' in element
        assert 'data-value="30"' in element

    def test_zero_thickness_arc_renders(self):
        element = render_arc(_geometry(inner=50.0, outer=50.0), "#93F9B9", corner_radius=4)
        ET.fromstring(element)


class TestRenderLabels:
    def test_category_label_rotated_and_colored(self):
        profile = get_style_profile(ChartVariant.STATIC)

        markup = render_labels(_geometry(), profile, "#93F9B9", "#ffffff")
        root = ET.fromstring(f"<g>{markup}</g>")
        label, value = root.findall("text")

        assert label.text == "A"
        assert label.get("transform") == "rotate(57.296, 100, -50)"
        assert label.get("fill") == "#93F9B9"
        assert label.get("font-size") == "20"
        assert label.get("text-anchor") == "middle"
        assert label.get("dominant-baseline") == "middle"

        assert value.text == "30"
        assert value.get("transform") is None
        assert value.get("fill") == "#ffffff"
        assert value.get("font-size") == "10"
        assert (value.get("x"), value.get("y")) == ("60", "-30")

    def test_interactive_profile_is_compact(self):
        profile = get_style_profile(ChartVariant.INTERACTIVE)

        markup = render_labels(_geometry(), profile, "#93F9B9", "#ffffff")
        label, value = ET.fromstring(f"<g>{markup}</g>").findall("text")

        assert int(label.get("font-size")) < 20
        assert int(value.get("font-size")) < 10

    def test_label_text_is_escaped(self):
        profile = get_style_profile(ChartVariant.STATIC)

        markup = render_labels(_geometry(label="<b>"), profile, "#93F9B9", "#ffffff")

        assert "&lt;b&gt;" in markup
        assert "<b>" not in markup


class TestRenderBackground:
    def test_gradient_plate(self):
        markup = render_background(740, 800, "radial-bars-static", GRADIENTS["lightgreen_green"])
        root = ET.fromstring(f"<g>{markup}</g>")

        gradient = root.find("defs/linearGradient")
        rect = root.find("rect")

        assert gradient.get("id") == "radial-bars-static"
        assert [s.get("stop-color") for s in gradient.findall("stop")] == ["#42E695", "#3BB2B8"]
        assert rect.get("fill") == "url(#radial-bars-static)"
        assert rect.get("rx") == "14"
        assert (rect.get("width"), rect.get("height")) == ("740", "800")


@pytest.mark.parametrize("value", [0, 1, 25, 99.5])
def test_value_label_matches_record(value):
    profile = get_style_profile(ChartVariant.STATIC)
    markup = render_labels(_geometry(value=value), profile, "#93F9B9", "#ffffff")
    assert f">{format_value(value)}</text>" in markup
