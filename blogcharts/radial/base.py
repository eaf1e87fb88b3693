"""Base classes and data structures for radial bar charts."""

import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4


# ===========================================
# ERRORS
# ===========================================


class RadialChartError(Exception):
    """Base error for radial chart rendering."""


class DatasetError(RadialChartError, ValueError):
    """Raised when a dataset violates the record contract."""


class UnknownLabelError(RadialChartError, KeyError):
    """Raised when a label is looked up outside the current domain."""

    def __str__(self) -> str:
        # KeyError repr-quotes its argument
        return str(self.args[0]) if self.args else ""


# ===========================================
# ENUMS
# ===========================================


class ChartVariant(Enum):
    """Rendering variant of the radial bar chart."""

    INTERACTIVE = "interactive"
    STATIC = "static"


# ===========================================
# DATASET
# ===========================================


@dataclass(frozen=True)
class DataRecord:
    """One category of the chart."""

    label: str
    value: float
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "value": self.value,
            "description": self.description,
        }


def label_sort_key(label: str) -> tuple[str, str]:
    """Case-insensitive alphabetical ordering, raw label as tie-breaker."""
    return (label.casefold(), label)


@dataclass(frozen=True)
class Dataset:
    """An immutable, validated collection of records.

    Labels must be unique and values finite and non-negative; violations
    raise DatasetError at construction rather than producing wrong geometry.
    """

    records: tuple[DataRecord, ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for record in self.records:
            if not isinstance(record.label, str) or not record.label:
                raise DatasetError(f"Record label must be a non-empty string: {record.label!r}")
            if record.label in seen:
                raise DatasetError(f"Duplicate label in dataset: {record.label!r}")
            seen.add(record.label)

            value = record.value
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise DatasetError(f"Value for {record.label!r} must be a number, got {value!r}")
            if not math.isfinite(value) or value < 0:
                raise DatasetError(
                    f"Value for {record.label!r} must be finite and non-negative, got {value!r}"
                )

    @classmethod
    def from_records(cls, records: Iterable[DataRecord | Mapping[str, Any]]) -> "Dataset":
        """Build a dataset from records or plain mappings."""
        items = []
        for record in records:
            if isinstance(record, DataRecord):
                items.append(record)
                continue
            try:
                items.append(
                    DataRecord(
                        label=record["label"],
                        value=record["value"],
                        description=record.get("description", ""),
                    )
                )
            except KeyError as e:
                raise DatasetError(f"Record is missing required key: {e.args[0]}") from e
        return cls(records=tuple(items))

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[DataRecord]:
        return iter(self.records)

    @property
    def labels(self) -> list[str]:
        return [r.label for r in self.records]

    @property
    def values(self) -> list[float]:
        return [r.value for r in self.records]

    @property
    def max_value(self) -> float:
        return max(self.values, default=0)

    def sorted_records(self) -> list[DataRecord]:
        """Records in alphabetical label order."""
        return sorted(self.records, key=lambda r: label_sort_key(r.label))

    def get(self, label: str) -> DataRecord:
        for record in self.records:
            if record.label == label:
                return record
        raise UnknownLabelError(f"Label not in dataset: {label!r}")

    def to_dict(self) -> dict[str, Any]:
        return {"records": [r.to_dict() for r in self.records]}


# ===========================================
# STYLE AND GEOMETRY
# ===========================================


@dataclass(frozen=True)
class StyleProfile:
    """Constants that distinguish the interactive and static variants."""

    name: str
    label_font_size: int
    value_font_size: int
    label_offset: float
    show_tooltip: bool
    default_width: int
    default_height: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "label_font_size": self.label_font_size,
            "value_font_size": self.value_font_size,
            "label_offset": self.label_offset,
            "show_tooltip": self.show_tooltip,
            "default_width": self.default_width,
            "default_height": self.default_height,
        }


@dataclass(frozen=True)
class ArcGeometry:
    """Derived coordinates for one record, relative to the chart centre."""

    label: str
    value: float
    start_angle: float
    end_angle: float
    mid_angle: float
    inner_radius: float
    outer_radius: float
    text_radius: float
    label_x: float
    label_y: float
    value_x: float
    value_y: float
    label_rotation: float  # degrees

    @property
    def thickness(self) -> float:
        return self.outer_radius - self.inner_radius

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "value": self.value,
            "start_angle": self.start_angle,
            "end_angle": self.end_angle,
            "mid_angle": self.mid_angle,
            "inner_radius": self.inner_radius,
            "outer_radius": self.outer_radius,
            "text_radius": self.text_radius,
            "label_x": self.label_x,
            "label_y": self.label_y,
            "value_x": self.value_x,
            "value_y": self.value_y,
            "label_rotation": self.label_rotation,
        }


# ===========================================
# INTERACTION AND OUTPUT
# ===========================================


@dataclass(frozen=True)
class HoverState:
    """Either idle (no record) or hovering a record at a captured position."""

    record: DataRecord | None = None
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def idle(cls) -> "HoverState":
        return cls()

    @property
    def is_hovering(self) -> bool:
        return self.record is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "state": "hovering" if self.is_hovering else "idle",
            "record": self.record.to_dict() if self.record else None,
            "x": self.x,
            "y": self.y,
        }


@dataclass(frozen=True)
class RenderedChart:
    """A rendered radial bar chart."""

    chart_id: str = field(default_factory=lambda: str(uuid4()))
    variant: ChartVariant = ChartVariant.STATIC
    width: int = 0
    height: int = 0
    svg: str = ""
    html: str = ""
    geometries: tuple[ArcGeometry, ...] = ()
    tooltip: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_empty(self) -> bool:
        return not self.svg

    def to_dict(self) -> dict[str, Any]:
        return {
            "chart_id": self.chart_id,
            "variant": self.variant.value,
            "width": self.width,
            "height": self.height,
            "svg": self.svg,
            "html": self.html,
            "geometries": [g.to_dict() for g in self.geometries],
            "tooltip": self.tooltip,
            "created_at": self.created_at.isoformat(),
        }


__all__ = [
    # Errors
    "RadialChartError",
    "DatasetError",
    "UnknownLabelError",
    # Enums
    "ChartVariant",
    # Dataset
    "DataRecord",
    "Dataset",
    "label_sort_key",
    # Style and geometry
    "StyleProfile",
    "ArcGeometry",
    # Interaction and output
    "HoverState",
    "RenderedChart",
]
