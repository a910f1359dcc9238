# bikeflow/viz/scales.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from bikeflow.constants import (
    FILTERED_RADIUS_RANGE,
    FLOW_LEVELS,
    UNFILTERED_RADIUS_RANGE,
)
from bikeflow.traffic.types import StationTraffic, Unfiltered, time_filter_from_slider


@dataclass(frozen=True)
class SqrtScale:
    """
    Square-root scale [0, domain_max] -> [lo, hi].

    Not clamped. A [0, 0] domain maps everything to lo.
    """
    domain_max: float
    range: Tuple[float, float]

    def __call__(self, value):
        lo, hi = self.range
        v = np.sqrt(np.asarray(value, dtype=np.float64))

        d = np.sqrt(float(self.domain_max))
        if d == 0.0:
            out = np.full_like(v, float(lo))
        else:
            out = lo + (v / d) * (hi - lo)

        if out.ndim == 0:
            return float(out)
        return out


@dataclass(frozen=True)
class QuantizeScale:
    """
    Quantize scale over [lo, hi] -> discrete levels.

    The domain is cut into len(levels) equal segments; values
    outside the domain fall into the first / last level.
    """
    levels: Tuple[float, ...] = FLOW_LEVELS
    domain: Tuple[float, float] = (0.0, 1.0)

    def __call__(self, value: float) -> float:
        lo, hi = self.domain
        n = len(self.levels)
        idx = int(np.floor((float(value) - lo) / (hi - lo) * n))
        idx = max(0, min(n - 1, idx))
        return self.levels[idx]


@dataclass(frozen=True)
class StationVisual:
    short_name: str
    radius: float
    flow: float


station_flow = QuantizeScale()


def radius_range_for(
    time_filter,
    *,
    unfiltered_range: Tuple[float, float] = UNFILTERED_RADIUS_RANGE,
    filtered_range: Tuple[float, float] = FILTERED_RADIUS_RANGE,
) -> Tuple[float, float]:
    # filtered windows are sparser: raise the floor so small stations stay visible
    if isinstance(time_filter_from_slider(time_filter), Unfiltered):
        return unfiltered_range
    return filtered_range


def max_total_traffic(snapshot: Sequence[StationTraffic]) -> int:
    return max((s.total_traffic for s in snapshot), default=0)


def radius_scale(domain_max: float, time_filter, **ranges) -> SqrtScale:
    """
    domain_max is the all-day (unfiltered) max total traffic. Only the
    range follows the filter, so a sparse window stays small relative
    to the busiest station of the day.
    """
    return SqrtScale(domain_max=domain_max, range=radius_range_for(time_filter, **ranges))


def flow_ratio(departures: int, total_traffic: int) -> float:
    return departures / (total_traffic or 1)


def station_visuals(
    snapshot: Sequence[StationTraffic],
    scale: SqrtScale,
    *,
    flow: QuantizeScale = station_flow,
) -> List[StationVisual]:
    visuals: List[StationVisual] = []
    for s in snapshot:
        visuals.append(
            StationVisual(
                short_name=s.short_name,
                radius=scale(s.total_traffic),
                flow=flow(flow_ratio(s.departures, s.total_traffic)),
            )
        )
    return visuals
