"""Angular band and radial magnitude scales."""

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from blogcharts.radial.base import UnknownLabelError, label_sort_key


class BandScale:
    """Maps an ordered set of labels to equal, padded angular bands.

    The range is divided into ``len(domain)`` equal steps. Each band is its
    step shrunk by ``padding``, with the gap split evenly between the leading
    and trailing edge, so consecutive steps tile the whole range.
    """

    def __init__(
        self,
        domain: Sequence[str],
        start: float = 0.0,
        stop: float = 2 * math.pi,
        padding: float = 0.2,
    ) -> None:
        if not 0 <= padding < 1:
            raise ValueError(f"Band padding must be in [0, 1), got {padding}")

        self._domain = tuple(domain)
        self._index = {label: i for i, label in enumerate(self._domain)}
        if len(self._index) != len(self._domain):
            raise ValueError("Band scale domain must not contain duplicates")

        self._start = start
        self._stop = stop
        self._padding = padding

        n = len(self._domain)
        self._step = (stop - start) / n if n else 0.0
        self._bandwidth = self._step * (1 - padding)

    @property
    def domain(self) -> tuple[str, ...]:
        return self._domain

    @property
    def range(self) -> tuple[float, float]:
        return (self._start, self._stop)

    @property
    def padding(self) -> float:
        return self._padding

    @property
    def step(self) -> float:
        return self._step

    @property
    def bandwidth(self) -> float:
        return self._bandwidth

    def __len__(self) -> int:
        return len(self._domain)

    def __contains__(self, label: object) -> bool:
        return label in self._index

    def __call__(self, label: str) -> float:
        """Start angle of the band for ``label``."""
        try:
            i = self._index[label]
        except KeyError:
            raise UnknownLabelError(f"Label not in band scale domain: {label!r}") from None
        return self._start + i * self._step + self._step * self._padding / 2

    def band(self, label: str) -> tuple[float, float]:
        start = self(label)
        return start, start + self._bandwidth

    def slot(self, label: str) -> tuple[float, float]:
        """The band with its padding, i.e. the full step owned by ``label``."""
        start = self(label) - self._step * self._padding / 2
        return start, start + self._step


class RadialScale:
    """Square-root scale from values to radii.

    Radius grows with the square root of the value so that arc area, not
    length, is proportional to magnitude. ``domain[0]`` maps to ``range[0]``
    and ``domain[1]`` to ``range[1]``; a degenerate domain maps everything
    to ``range[0]``.
    """

    def __init__(
        self,
        domain: tuple[float, float],
        range: tuple[float, float],
    ) -> None:
        self._d0, self._d1 = domain
        self._r0, self._r1 = range

    @property
    def domain(self) -> tuple[float, float]:
        return (self._d0, self._d1)

    @property
    def range(self) -> tuple[float, float]:
        return (self._r0, self._r1)

    def _normalize(self, value: float) -> float:
        span = self._d1 - self._d0
        if span == 0:
            return 0.0
        return (value - self._d0) / span

    def __call__(self, value: float) -> float:
        t = self._normalize(value)
        # Endpoints map exactly
        if t == 0:
            return self._r0
        if t == 1:
            return self._r1
        squared = self._r0 * self._r0 + (self._r1 * self._r1 - self._r0 * self._r0) * t
        return math.sqrt(max(0.0, squared))

    def invert(self, radius: float) -> float:
        r0_sq = self._r0 * self._r0
        span = self._r1 * self._r1 - r0_sq
        if span == 0:
            return self._d0
        t = (radius * radius - r0_sq) / span
        return self._d0 + t * (self._d1 - self._d0)

    def ticks(self, count: int = 4) -> list[tuple[float, float]]:
        """Evenly spaced ``(value, radius)`` pairs across the domain, for legend rings."""
        if count < 1 or self._d1 == self._d0:
            return [(self._d0, self(self._d0))]
        step = (self._d1 - self._d0) / count
        values = [self._d0 + i * step for i in range(count + 1)]
        return [(v, self(v)) for v in values]


@dataclass(frozen=True)
class ChartScales:
    """The angular and radial scales of one render."""

    angular: BandScale
    radial: RadialScale

    @property
    def inner_radius(self) -> float:
        return self.radial.range[0]

    @property
    def outer_radius_max(self) -> float:
        return self.radial.range[1]


def build_scales(
    labels: Iterable[str],
    values: Iterable[float],
    inner_radius: float,
    outer_radius_max: float,
    padding: float = 0.2,
) -> ChartScales:
    """Build the angular scale over the sorted labels and the radial scale over [0, max(values)]."""
    domain = sorted(labels, key=label_sort_key)
    max_value = max(values, default=0)

    angular = BandScale(domain, start=0.0, stop=2 * math.pi, padding=padding)
    radial = RadialScale(domain=(0, max_value), range=(inner_radius, outer_radius_max))
    return ChartScales(angular=angular, radial=radial)


__all__ = [
    "BandScale",
    "RadialScale",
    "ChartScales",
    "build_scales",
]
