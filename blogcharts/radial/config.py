"""Configuration for radial bar charts."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from blogcharts.radial.base import ChartVariant, DataRecord, Dataset, StyleProfile


class RadialChartSettings(BaseSettings):
    """Settings for radial bar chart rendering."""

    model_config = {"env_prefix": "RADIAL_CHART_", "case_sensitive": False}

    # Colors
    bar_color: str = Field(
        default="#93F9B9",
        description="Fill color of the arcs and their category labels",
    )
    value_color: str = Field(
        default="#ffffff",
        description="Color of the numeric value labels",
    )
    gradient: str = Field(
        default="lightgreen_green",
        description="Background plate gradient (key of GRADIENTS)",
    )

    # Geometry
    corner_radius: float = Field(
        default=4.0,
        ge=0,
        description="Corner rounding applied to every arc",
    )
    padding: float = Field(
        default=0.2,
        ge=0,
        lt=1,
        description="Fraction of each angular band left as gap",
    )
    margin: int = Field(
        default=20,
        ge=0,
        description="Margin around the chart on every side, in pixels",
    )
    background_radius: float = Field(
        default=14.0,
        ge=0,
        description="Corner radius of the background plate",
    )

    # Interactive variant
    interactive_width: int = Field(default=500, gt=0, description="Default interactive chart width")
    interactive_height: int = Field(default=500, gt=0, description="Default interactive chart height")
    interactive_label_font_size: int = Field(default=12, gt=0)
    interactive_value_font_size: int = Field(default=9, gt=0)
    interactive_label_offset: float = Field(default=12.0, ge=0)
    tooltip_offset_y: float = Field(
        default=12.0,
        description="How far above the captured pointer position the tooltip sits",
    )

    # Static variant
    static_width: int = Field(default=740, gt=0, description="Default static chart width")
    static_height: int = Field(default=800, gt=0, description="Default static chart height")
    static_label_font_size: int = Field(default=20, gt=0)
    static_value_font_size: int = Field(default=10, gt=0)
    static_label_offset: float = Field(default=20.0, ge=0)

    # Rendering
    render_cache_size: int = Field(
        default=64,
        ge=0,
        description="Number of rendered charts kept by the memoized renderer",
    )
    min_render_width: int = Field(
        default=10,
        ge=0,
        description="Charts narrower than this render nothing",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_json: bool = Field(default=True, description="Emit JSON logs")

    @field_validator("gradient")
    @classmethod
    def validate_gradient(cls, v: str) -> str:
        key = v.strip().lower()
        if key not in GRADIENTS:
            raise ValueError(
                f"Unknown gradient '{v}' - must be one of {', '.join(sorted(GRADIENTS))}"
            )
        return key


@lru_cache
def get_settings() -> RadialChartSettings:
    """Get cached radial chart settings."""
    return RadialChartSettings()


def get_style_profile(variant: ChartVariant) -> StyleProfile:
    """Build the style profile of a variant from settings."""
    settings = get_settings()
    if variant is ChartVariant.INTERACTIVE:
        return StyleProfile(
            name=variant.value,
            label_font_size=settings.interactive_label_font_size,
            value_font_size=settings.interactive_value_font_size,
            label_offset=settings.interactive_label_offset,
            show_tooltip=True,
            default_width=settings.interactive_width,
            default_height=settings.interactive_height,
        )
    return StyleProfile(
        name=variant.value,
        label_font_size=settings.static_label_font_size,
        value_font_size=settings.static_value_font_size,
        label_offset=settings.static_label_offset,
        show_tooltip=False,
        default_width=settings.static_width,
        default_height=settings.static_height,
    )


# Vertical two-stop gradients for the background plate
GRADIENTS = {
    "lightgreen_green": {"from": "#42E695", "to": "#3BB2B8"},
    "darkgreen_green": {"from": "#184E86", "to": "#57CA85"},
    "orange_red": {"from": "#FCE38A", "to": "#F38181"},
    "pink_blue": {"from": "#F02FC2", "to": "#6094EA"},
    "steel_purple": {"from": "#566270", "to": "#A3A1FF"},
}

# Feature importance labels from the "understanding labels" post
FEATURE_IMPORTANCE_DATASET = Dataset(
    records=(
        DataRecord(
            label="Short-Term Price Change",
            value=30,
            description="The percentage change in price over a short period.",
        ),
        DataRecord(
            label="Medium-Term Price Change",
            value=50,
            description="The percentage change in price over a medium period.",
        ),
        DataRecord(
            label="Long-Term Price Change",
            value=70,
            description="The percentage change in price over a long period.",
        ),
        DataRecord(
            label="Short-Term Volatility",
            value=60,
            description="The fluctuation in price over a short period.",
        ),
        DataRecord(
            label="Medium-Term Volatility",
            value=80,
            description="The fluctuation in price over a medium period.",
        ),
        DataRecord(
            label="Short-Term Volume",
            value=40,
            description="The trading volume over a short period.",
        ),
        DataRecord(
            label="Medium-Term Volume",
            value=90,
            description="The trading volume over a medium period.",
        ),
    )
)
