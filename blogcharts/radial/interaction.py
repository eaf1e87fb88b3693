"""Hover tracking and tooltip overlay for the interactive chart.

States: idle -> hovering(record) -> idle
        also: hovering(A) -> hovering(B) on entering another arc
"""

from blogcharts.radial.base import DataRecord, Dataset, HoverState
from blogcharts.radial.renderers import escape, fmt
from blogcharts.shared.utils.logging import LoggerMixin


class HoverStateMachine(LoggerMixin):
    """Tracks which record, if any, the pointer is over.

    The tooltip position is captured once on entry and not updated while
    hovering. Enter and leave handlers are independent: the most recent
    entry wins, and a leave from an arc that is no longer active is ignored.
    """

    def __init__(self, dataset: Dataset) -> None:
        self._dataset = dataset
        self._state = HoverState.idle()

    def log_context(self) -> dict:
        return {"records": len(self._dataset)}

    @property
    def state(self) -> HoverState:
        return self._state

    @property
    def is_hovering(self) -> bool:
        return self._state.is_hovering

    @property
    def active_record(self) -> DataRecord | None:
        return self._state.record

    def _resolve(self, target: DataRecord | str) -> DataRecord:
        label = target.label if isinstance(target, DataRecord) else target
        return self._dataset.get(label)

    def on_enter(self, target: DataRecord | str, x: float, y: float) -> HoverState:
        """Pointer entered an arc; capture its record and position."""
        record = self._resolve(target)
        previous = self._state.record
        self._state = HoverState(record=record, x=x, y=y)
        self.logger.debug(
            "hover_enter",
            label=record.label,
            previous=previous.label if previous else None,
            x=x,
            y=y,
        )
        return self._state

    def on_leave(self, target: DataRecord | str | None = None) -> HoverState:
        """Pointer left an arc.

        Without a target the machine returns to idle unconditionally. With a
        target, only a leave from the active arc clears the state.
        """
        active = self._state.record
        if active is None:
            return self._state

        if target is not None:
            label = target.label if isinstance(target, DataRecord) else target
            if label != active.label:
                self.logger.debug("hover_leave_ignored", label=label, active=active.label)
                return self._state

        self._state = HoverState.idle()
        self.logger.debug("hover_leave", label=active.label)
        return self._state

    def reset(self) -> None:
        """Drop any pending hover, e.g. when the chart is torn down."""
        self._state = HoverState.idle()


def render_tooltip(state: HoverState, offset_y: float = 12.0) -> str:
    """Render the tooltip overlay for a hover state; idle renders nothing."""
    if not state.is_hovering:
        return ""

    record = state.record
    style = (
        f"position: absolute; left: {fmt(state.x)}px; top: {fmt(state.y - offset_y)}px; "
        "transform: translate(-50%, -100%); pointer-events: none; "
        "background: white; color: #333; padding: 6px 10px; border-radius: 4px; "
        "box-shadow: 0 1px 4px rgba(0, 0, 0, 0.25); max-width: 240px;"
    )
    return (
        f'<div class="radial-bar-tooltip" data-label="{escape(record.label)}" style="{style}">\n'
        f"<strong>{escape(record.label)}</strong>\n"
        f'<div style="font-size: 12px;">{escape(record.description)}</div>\n'
        "</div>"
    )


__all__ = [
    "HoverStateMachine",
    "render_tooltip",
]
