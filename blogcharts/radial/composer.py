"""Composition of scales, geometry and renderers into a chart."""

from dataclasses import dataclass, replace
from functools import lru_cache

from blogcharts.radial.base import (
    ChartVariant,
    DataRecord,
    Dataset,
    HoverState,
    RenderedChart,
)
from blogcharts.radial.config import (
    FEATURE_IMPORTANCE_DATASET,
    GRADIENTS,
    get_settings,
    get_style_profile,
)
from blogcharts.radial.geometry import compute_layout
from blogcharts.radial.interaction import HoverStateMachine, render_tooltip
from blogcharts.radial.renderers import (
    escape,
    fmt,
    render_arc,
    render_background,
    render_labels,
)
from blogcharts.radial.scales import build_scales
from blogcharts.shared.utils.logging import LoggerMixin, get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ChartConfig:
    """Everything a render depends on. Hashable, so renders can be memoized."""

    dataset: Dataset
    width: int
    height: int
    variant: ChartVariant = ChartVariant.STATIC

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Chart size must be non-negative, got {self.width}x{self.height}")


def wrap_html(svg: str, overlay: str = "") -> str:
    """Wrap chart SVG in a relatively positioned container for overlays."""
    parts = ['<div class="radial-bar-chart" style="position: relative;">', svg]
    if overlay:
        parts.append(overlay)
    parts.append("</div>")
    return "\n".join(parts)


class RadialChartComposer:
    """Renders chart configurations to SVG, memoized by configuration equality."""

    def __init__(self, cache_size: int | None = None) -> None:
        self._settings = get_settings()
        size = self._settings.render_cache_size if cache_size is None else cache_size
        self._render_cached = lru_cache(maxsize=size)(self._render)

    def render(self, config: ChartConfig) -> RenderedChart:
        """Render a configuration; identical configurations return the cached chart."""
        return self._render_cached(config)

    def cache_info(self):
        return self._render_cached.cache_info()

    def clear_cache(self) -> None:
        self._render_cached.cache_clear()

    def _render(self, config: ChartConfig) -> RenderedChart:
        settings = self._settings
        profile = get_style_profile(config.variant)
        width, height = config.width, config.height

        if width < settings.min_render_width:
            logger.debug("radial_chart_skipped", variant=config.variant.value, width=width)
            return RenderedChart(variant=config.variant, width=width, height=height)

        margin = settings.margin
        x_max = width - 2 * margin
        y_max = height - 2 * margin
        radius_max = max(min(x_max, y_max) / 2, 0)
        inner_radius = radius_max / 3

        dataset = config.dataset
        scales = build_scales(
            dataset.labels,
            dataset.values,
            inner_radius,
            radius_max,
            padding=settings.padding,
        )
        geometries = compute_layout(dataset, scales, profile)

        gradient_id = f"radial-bars-{config.variant.value}"
        gradient = GRADIENTS[settings.gradient]

        svg = [f'<svg width="{width}" height="{height}" xmlns="http://www.w3.org/2000/svg">']
        svg.append(
            render_background(
                width, height, gradient_id, gradient, settings.background_radius
            )
        )
        svg.append(f'<g transform="translate({fmt(x_max / 2 + margin)}, {fmt(y_max / 2 + margin)})">')

        for geometry in geometries:
            svg.append(f'<g data-key="bar-{escape(geometry.label)}">')
            svg.append(
                render_arc(
                    geometry,
                    settings.bar_color,
                    settings.corner_radius,
                    interactive=profile.show_tooltip,
                )
            )
            svg.append(
                render_labels(geometry, profile, settings.bar_color, settings.value_color)
            )
            svg.append("</g>")

        svg.append("</g>")
        svg.append("</svg>")
        rendered_svg = "\n".join(svg)

        logger.info(
            "radial_chart_rendered",
            variant=config.variant.value,
            width=width,
            height=height,
            records=len(dataset),
        )

        return RenderedChart(
            variant=config.variant,
            width=width,
            height=height,
            svg=rendered_svg,
            html=wrap_html(rendered_svg),
            geometries=geometries,
        )


class RadialBarChart(LoggerMixin):
    """Interactive radial bar chart: the rendered chart plus hover state."""

    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        dataset: Dataset | None = None,
        composer: RadialChartComposer | None = None,
    ) -> None:
        profile = get_style_profile(ChartVariant.INTERACTIVE)
        self._config = ChartConfig(
            dataset=dataset if dataset is not None else FEATURE_IMPORTANCE_DATASET,
            width=width if width is not None else profile.default_width,
            height=height if height is not None else profile.default_height,
            variant=ChartVariant.INTERACTIVE,
        )
        self._composer = composer or get_chart_composer()
        self._hover = HoverStateMachine(self._config.dataset)

    def log_context(self) -> dict:
        return {
            "variant": self._config.variant.value,
            "width": self._config.width,
            "height": self._config.height,
        }

    @property
    def config(self) -> ChartConfig:
        return self._config

    @property
    def dataset(self) -> Dataset:
        return self._config.dataset

    @property
    def hover_state(self) -> HoverState:
        return self._hover.state

    def on_enter(self, target: DataRecord | str, x: float, y: float) -> HoverState:
        return self._hover.on_enter(target, x, y)

    def on_leave(self, target: DataRecord | str | None = None) -> HoverState:
        return self._hover.on_leave(target)

    def resize(self, width: int, height: int) -> None:
        """Change the chart size; geometry is recomputed on the next render."""
        previous = (self._config.width, self._config.height)
        self._config = replace(self._config, width=width, height=height)
        self.logger.info("radial_chart_resized", previous=list(previous))

    def teardown(self) -> None:
        self._hover.reset()
        self.logger.debug("radial_chart_teardown")

    def render(self) -> RenderedChart:
        """Render the chart, with the tooltip overlay while a record is hovered."""
        chart = self._composer.render(self._config)
        if chart.is_empty:
            return chart

        tooltip = render_tooltip(self._hover.state, get_settings().tooltip_offset_y)
        if not tooltip:
            return chart
        return replace(chart, html=wrap_html(chart.svg, tooltip), tooltip=tooltip)


def create_interactive_chart(
    width: int | None = None,
    height: int | None = None,
    dataset: Dataset | None = None,
) -> RadialBarChart:
    """Create the interactive (tooltip) variant."""
    return RadialBarChart(width=width, height=height, dataset=dataset)


def create_static_chart(
    width: int | None = None,
    height: int | None = None,
    dataset: Dataset | None = None,
) -> RenderedChart:
    """Render the static (print) variant."""
    profile = get_style_profile(ChartVariant.STATIC)
    config = ChartConfig(
        dataset=dataset if dataset is not None else FEATURE_IMPORTANCE_DATASET,
        width=width if width is not None else profile.default_width,
        height=height if height is not None else profile.default_height,
        variant=ChartVariant.STATIC,
    )
    return get_chart_composer().render(config)


def render(config: ChartConfig) -> RenderedChart:
    """Render a configuration with the shared composer."""
    return get_chart_composer().render(config)


# Singleton instance
_chart_composer: RadialChartComposer | None = None


def get_chart_composer() -> RadialChartComposer:
    """Get or create chart composer singleton."""
    global _chart_composer
    if _chart_composer is None:
        _chart_composer = RadialChartComposer()
    return _chart_composer


__all__ = [
    "ChartConfig",
    "wrap_html",
    "RadialChartComposer",
    "RadialBarChart",
    "create_interactive_chart",
    "create_static_chart",
    "render",
    "get_chart_composer",
]
