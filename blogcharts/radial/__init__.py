"""Radial Bar Chart Module.

This module renders a small categorical dataset as a circular bar chart:
- Angular band and square-root radial scales over the dataset
- Pure per-record geometry (angles, radii, label anchors and rotation)
- SVG arcs with rounded corners, rotated category labels and value labels
- An interactive variant with a hover state machine and tooltip overlay
- A static variant with larger fonts for embedding in blog posts

Both variants share the same geometry and differ only by style profile.
"""

from blogcharts.radial.base import (
    # Errors
    DatasetError,
    RadialChartError,
    UnknownLabelError,
    # Enums
    ChartVariant,
    # Dataset
    DataRecord,
    Dataset,
    # Style and geometry
    ArcGeometry,
    StyleProfile,
    # Interaction and output
    HoverState,
    RenderedChart,
)
from blogcharts.radial.composer import (
    ChartConfig,
    RadialBarChart,
    RadialChartComposer,
    create_interactive_chart,
    create_static_chart,
    get_chart_composer,
    render,
)
from blogcharts.radial.config import (
    FEATURE_IMPORTANCE_DATASET,
    GRADIENTS,
    RadialChartSettings,
    get_settings,
    get_style_profile,
)
from blogcharts.radial.geometry import compute_geometry, compute_layout, polar_to_cartesian
from blogcharts.radial.interaction import HoverStateMachine, render_tooltip
from blogcharts.radial.renderers import arc_path, render_arc, render_background, render_labels
from blogcharts.radial.scales import BandScale, ChartScales, RadialScale, build_scales

__all__ = [
    # Config
    "get_settings",
    "get_style_profile",
    "RadialChartSettings",
    "GRADIENTS",
    "FEATURE_IMPORTANCE_DATASET",
    # Errors
    "RadialChartError",
    "DatasetError",
    "UnknownLabelError",
    # Data classes
    "ChartVariant",
    "DataRecord",
    "Dataset",
    "StyleProfile",
    "ArcGeometry",
    "HoverState",
    "RenderedChart",
    # Scales
    "BandScale",
    "RadialScale",
    "ChartScales",
    "build_scales",
    # Geometry
    "polar_to_cartesian",
    "compute_geometry",
    "compute_layout",
    # Renderers
    "arc_path",
    "render_arc",
    "render_labels",
    "render_background",
    # Interaction
    "HoverStateMachine",
    "render_tooltip",
    # Composer
    "ChartConfig",
    "RadialChartComposer",
    "RadialBarChart",
    "create_interactive_chart",
    "create_static_chart",
    "render",
    "get_chart_composer",
]
