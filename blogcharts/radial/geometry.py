"""Per-record arc geometry and label placement."""

import math

from blogcharts.radial.base import ArcGeometry, DataRecord, Dataset, StyleProfile
from blogcharts.radial.scales import ChartScales


def polar_to_cartesian(radius: float, angle: float) -> tuple[float, float]:
    """Convert a clock-style angle (0 at 12 o'clock, clockwise) to x, y."""
    return (
        radius * math.cos(angle - math.pi / 2),
        radius * math.sin(angle - math.pi / 2),
    )


def compute_geometry(
    record: DataRecord,
    scales: ChartScales,
    label_offset: float,
) -> ArcGeometry:
    """Compute the arc and label anchors of one record.

    The category label sits ``label_offset`` pixels past the outer radius on
    the ray bisecting the band, rotated so it reads outward from the centre.
    The value label sits halfway between the inner radius and the category
    label on the same ray.
    """
    start_angle, end_angle = scales.angular.band(record.label)
    mid_angle = start_angle + (end_angle - start_angle) / 2

    inner_radius = scales.inner_radius
    outer_radius = scales.radial(record.value)
    text_radius = outer_radius + label_offset

    label_x, label_y = polar_to_cartesian(text_radius, mid_angle)
    value_x, value_y = polar_to_cartesian((inner_radius + text_radius) / 2, mid_angle)

    return ArcGeometry(
        label=record.label,
        value=record.value,
        start_angle=start_angle,
        end_angle=end_angle,
        mid_angle=mid_angle,
        inner_radius=inner_radius,
        outer_radius=outer_radius,
        text_radius=text_radius,
        label_x=label_x,
        label_y=label_y,
        value_x=value_x,
        value_y=value_y,
        label_rotation=math.degrees(mid_angle),
    )


def compute_layout(
    dataset: Dataset,
    scales: ChartScales,
    profile: StyleProfile,
) -> tuple[ArcGeometry, ...]:
    """Geometry for every record, in angular (alphabetical) order."""
    return tuple(
        compute_geometry(record, scales, profile.label_offset)
        for record in dataset.sorted_records()
    )


__all__ = [
    "polar_to_cartesian",
    "compute_geometry",
    "compute_layout",
]
