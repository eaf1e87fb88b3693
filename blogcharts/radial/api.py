"""REST API endpoints for radial bar charts."""

from typing import Literal

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import Response
from pydantic import BaseModel, Field

from blogcharts.radial.base import (
    ChartVariant,
    Dataset,
    DatasetError,
    RenderedChart,
    UnknownLabelError,
)
from blogcharts.radial.composer import (
    ChartConfig,
    create_interactive_chart,
    get_chart_composer,
)
from blogcharts.radial.config import FEATURE_IMPORTANCE_DATASET, get_style_profile
from blogcharts.shared.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/charts", tags=["charts"])

SVG_MEDIA_TYPE = "image/svg+xml"


# ===========================================
# REQUEST/RESPONSE MODELS
# ===========================================


class RecordModel(BaseModel):
    """One chart record."""

    label: str = Field(..., min_length=1, description="Category label, unique per dataset")
    value: float = Field(..., ge=0, description="Non-negative magnitude")
    description: str = Field(default="", description="Tooltip text")


class RenderRequest(BaseModel):
    """Request to render a caller-supplied dataset."""

    records: list[RecordModel] = Field(..., description="Chart records")
    variant: Literal["interactive", "static"] = Field(default="static", description="Chart variant")
    width: int | None = Field(default=None, ge=0, description="Chart width")
    height: int | None = Field(default=None, ge=0, description="Chart height")


class HoverEvent(BaseModel):
    """A pointer event on one arc."""

    type: Literal["enter", "leave"] = Field(..., description="Event type")
    label: str | None = Field(default=None, description="Label of the arc")
    x: float = Field(default=0.0, description="Pointer x at entry")
    y: float = Field(default=0.0, description="Pointer y at entry")


class HoverReplayRequest(BaseModel):
    """Request to replay pointer events against the interactive chart."""

    events: list[HoverEvent] = Field(default=[], description="Events in arrival order")
    width: int | None = Field(default=None, ge=0, description="Chart width")
    height: int | None = Field(default=None, ge=0, description="Chart height")


# ===========================================
# HELPERS
# ===========================================


def _variant(name: str) -> ChartVariant:
    try:
        return ChartVariant(name)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown chart variant: {name}")


def _render_default(variant: ChartVariant, width: int | None, height: int | None) -> RenderedChart:
    profile = get_style_profile(variant)
    config = ChartConfig(
        dataset=FEATURE_IMPORTANCE_DATASET,
        width=width if width is not None else profile.default_width,
        height=height if height is not None else profile.default_height,
        variant=variant,
    )
    return get_chart_composer().render(config)


# ===========================================
# CHART ENDPOINTS
# ===========================================


@router.get("/radial-bar/{variant}")
async def get_radial_bar_chart(
    variant: str,
    width: int | None = Query(default=None, ge=0, description="Chart width"),
    height: int | None = Query(default=None, ge=0, description="Chart height"),
):
    """Render the feature importance chart as SVG."""
    chart = _render_default(_variant(variant), width, height)
    return Response(content=chart.svg, media_type=SVG_MEDIA_TYPE)


@router.get("/radial-bar/{variant}/geometry")
async def get_radial_bar_geometry(
    variant: str,
    width: int | None = Query(default=None, ge=0, description="Chart width"),
    height: int | None = Query(default=None, ge=0, description="Chart height"),
):
    """Render the feature importance chart and return it with its geometry."""
    chart = _render_default(_variant(variant), width, height)
    return chart.to_dict()


@router.post("/radial-bar/render")
async def render_radial_bar_chart(request: RenderRequest):
    """Render a caller-supplied dataset."""
    try:
        dataset = Dataset.from_records(r.model_dump() for r in request.records)
    except DatasetError as e:
        logger.warning("radial_chart_rejected", reason=str(e))
        raise HTTPException(status_code=422, detail=str(e))

    variant = ChartVariant(request.variant)
    profile = get_style_profile(variant)
    config = ChartConfig(
        dataset=dataset,
        width=request.width if request.width is not None else profile.default_width,
        height=request.height if request.height is not None else profile.default_height,
        variant=variant,
    )
    return get_chart_composer().render(config).to_dict()


@router.post("/radial-bar/interactive/hover")
async def replay_hover(request: HoverReplayRequest):
    """Replay pointer events and return the resulting hover state and markup."""
    chart = create_interactive_chart(width=request.width, height=request.height)

    for event in request.events:
        try:
            if event.type == "enter":
                if event.label is None:
                    raise HTTPException(status_code=422, detail="Enter events require a label")
                chart.on_enter(event.label, event.x, event.y)
            else:
                chart.on_leave(event.label)
        except UnknownLabelError as e:
            raise HTTPException(status_code=404, detail=str(e))

    rendered = chart.render()
    return {
        "hover": chart.hover_state.to_dict(),
        "html": rendered.html,
        "tooltip": rendered.tooltip,
    }
