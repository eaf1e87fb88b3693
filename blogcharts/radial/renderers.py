"""SVG rendering of arcs, labels and the background plate."""

import html
import math

from blogcharts.radial.base import ArcGeometry, StyleProfile
from blogcharts.radial.geometry import polar_to_cartesian

TAU = 2 * math.pi
_EPSILON = 1e-12


def escape(text: object) -> str:
    """Escape text for use in SVG content and attribute values."""
    return html.escape(str(text), quote=True)


def fmt(value: float) -> str:
    """Compact number formatting for path data and attributes."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def format_value(value: float) -> str:
    """Print a record value in full; whole numbers drop the trailing ``.0``."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def _point(radius: float, angle: float) -> str:
    x, y = polar_to_cartesian(radius, angle)
    return f"{fmt(x)},{fmt(y)}"


def _outer_corner_limit(radius: float, half_span: float) -> float:
    """Largest corner radius whose outer corners fit in the angular span."""
    if half_span >= math.pi / 2:
        return math.inf
    s = math.sin(half_span)
    return radius * s / (1 + s)


def _inner_corner_limit(radius: float, half_span: float) -> float:
    """Largest corner radius whose inner corners fit in the angular span."""
    if half_span >= math.pi / 2:
        return math.inf
    s = math.sin(half_span)
    return radius * s / (1 - s)


def _ring_path(inner_radius: float, outer_radius: float) -> str:
    # Two half-circle arcs per ring; the inner ring runs counter-clockwise to cut the hole
    r1, r0 = fmt(outer_radius), fmt(inner_radius)
    path = (
        f"M0,{fmt(-outer_radius)}"
        f"A{r1},{r1} 0 1 1 0,{fmt(outer_radius)}"
        f"A{r1},{r1} 0 1 1 0,{fmt(-outer_radius)}"
    )
    if inner_radius > 0:
        path += (
            f"M0,{fmt(-inner_radius)}"
            f"A{r0},{r0} 0 1 0 0,{fmt(inner_radius)}"
            f"A{r0},{r0} 0 1 0 0,{fmt(-inner_radius)}"
        )
    return path + "Z"


def arc_path(
    start_angle: float,
    end_angle: float,
    inner_radius: float,
    outer_radius: float,
    corner_radius: float = 0.0,
) -> str:
    """SVG path data for an annular sector centred on the origin.

    Angles are in radians, measured clockwise from 12 o'clock. Corner
    rounding is clamped to half the arc thickness and to what the angular
    span can hold, so a zero-thickness arc renders as a sharp, degenerate
    wedge.
    """
    if end_angle < start_angle:
        start_angle, end_angle = end_angle, start_angle
    r0, r1 = sorted((max(inner_radius, 0.0), max(outer_radius, 0.0)))
    span = end_angle - start_angle

    if r1 <= _EPSILON:
        return "M0,0Z"
    if span <= _EPSILON:
        return f"M{_point(r0, start_angle)}L{_point(r1, start_angle)}Z"
    if span >= TAU - _EPSILON:
        return _ring_path(r0, r1)

    half_span = span / 2
    rc = min(max(corner_radius, 0.0), (r1 - r0) / 2)
    rc1 = min(rc, _outer_corner_limit(r1, half_span))
    rc0 = min(rc, _inner_corner_limit(r0, half_span)) if r0 > 0 else 0.0

    parts = []
    if rc1 > _EPSILON:
        phi1 = math.asin(rc1 / (r1 - rc1))
        d1 = (r1 - rc1) * math.cos(phi1)
        large = 1 if span - 2 * phi1 > math.pi else 0
        c = fmt(rc1)
        parts.append(f"M{_point(d1, start_angle)}")
        parts.append(f"A{c},{c} 0 0 1 {_point(r1, start_angle + phi1)}")
        parts.append(f"A{fmt(r1)},{fmt(r1)} 0 {large} 1 {_point(r1, end_angle - phi1)}")
        parts.append(f"A{c},{c} 0 0 1 {_point(d1, end_angle)}")
    else:
        large = 1 if span > math.pi else 0
        parts.append(f"M{_point(r1, start_angle)}")
        parts.append(f"A{fmt(r1)},{fmt(r1)} 0 {large} 1 {_point(r1, end_angle)}")

    if r0 <= 0:
        parts.append("L0,0")
    elif rc0 > _EPSILON:
        phi0 = math.asin(rc0 / (r0 + rc0))
        d0 = (r0 + rc0) * math.cos(phi0)
        large = 1 if span - 2 * phi0 > math.pi else 0
        c = fmt(rc0)
        parts.append(f"L{_point(d0, end_angle)}")
        parts.append(f"A{c},{c} 0 0 1 {_point(r0, end_angle - phi0)}")
        parts.append(f"A{fmt(r0)},{fmt(r0)} 0 {large} 0 {_point(r0, start_angle + phi0)}")
        parts.append(f"A{c},{c} 0 0 1 {_point(d0, start_angle)}")
    else:
        large = 1 if span > math.pi else 0
        parts.append(f"L{_point(r0, end_angle)}")
        parts.append(f"A{fmt(r0)},{fmt(r0)} 0 {large} 0 {_point(r0, start_angle)}")

    parts.append("Z")
    return "".join(parts)


def render_arc(
    geometry: ArcGeometry,
    fill: str,
    corner_radius: float = 0.0,
    interactive: bool = False,
) -> str:
    """Render one arc; interactive arcs carry the attributes hover handlers key on."""
    d = arc_path(
        geometry.start_angle,
        geometry.end_angle,
        geometry.inner_radius,
        geometry.outer_radius,
        corner_radius,
    )
    if interactive:
        return (
            f'<path class="radial-bar" d="{d}" fill="{escape(fill)}" '
            f'data-label="{escape(geometry.label)}" '
            f'data-value="{escape(format_value(geometry.value))}" cursor="pointer"/>'
        )
    return f'<path d="{d}" fill="{escape(fill)}"/>'


def render_labels(
    geometry: ArcGeometry,
    profile: StyleProfile,
    label_color: str,
    value_color: str,
) -> str:
    """Render the rotated category label and the value label of one arc."""
    lx, ly = fmt(geometry.label_x), fmt(geometry.label_y)
    vx, vy = fmt(geometry.value_x), fmt(geometry.value_y)
    rotation = fmt(geometry.label_rotation)

    lines = [
        f'<text x="{lx}" y="{ly}" dominant-baseline="middle" text-anchor="middle" '
        f'font-size="{profile.label_font_size}" fill="{escape(label_color)}" '
        f'transform="rotate({rotation}, {lx}, {ly})">{escape(geometry.label)}</text>',
        f'<text x="{vx}" y="{vy}" dominant-baseline="middle" text-anchor="middle" '
        f'font-size="{profile.value_font_size}" fill="{escape(value_color)}">'
        f"{escape(format_value(geometry.value))}</text>",
    ]
    return "\n".join(lines)


def render_background(
    width: int,
    height: int,
    gradient_id: str,
    gradient: dict[str, str],
    corner_radius: float = 14.0,
) -> str:
    """Render the gradient definition and the rounded background plate."""
    lines = [
        "<defs>",
        f'<linearGradient id="{escape(gradient_id)}" x1="0" y1="0" x2="0" y2="1">',
        f'<stop offset="0%" stop-color="{escape(gradient["from"])}"/>',
        f'<stop offset="100%" stop-color="{escape(gradient["to"])}"/>',
        "</linearGradient>",
        "</defs>",
        f'<rect width="{width}" height="{height}" fill="url(#{escape(gradient_id)})" '
        f'rx="{fmt(corner_radius)}"/>',
    ]
    return "\n".join(lines)


__all__ = [
    "escape",
    "fmt",
    "format_value",
    "arc_path",
    "render_arc",
    "render_labels",
    "render_background",
]
