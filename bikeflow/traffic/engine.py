# bikeflow/traffic/engine.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from colorama import Fore, Style

from bikeflow.traffic.aggregate import compute_station_traffic
from bikeflow.traffic.buckets import bucketize
from bikeflow.traffic.types import (
    UNFILTERED,
    MinuteBuckets,
    Station,
    StationTraffic,
    TimeFilter,
    Trip,
    Unfiltered,
    time_filter_from_slider,
)
from bikeflow.viz.scales import (
    SqrtScale,
    StationVisual,
    max_total_traffic,
    radius_scale,
    station_visuals,
)


@dataclass(frozen=True)
class TrafficFrame:
    """Everything a renderer needs for one time selection."""
    time_filter: TimeFilter
    stations: List[StationTraffic]
    scale: SqrtScale
    visuals: List[StationVisual]

    @property
    def max_total_traffic(self) -> int:
        return max_total_traffic(self.stations)


class TrafficView:
    """
    Buckets trips once, then answers time selections.

    States:
      "unfiltered"  -> full trip set, radius range (0, 25)
      "filtered"    -> ±60 min window, radius range (3, 50)
    """

    def __init__(self, stations: Sequence[Station], buckets: MinuteBuckets):
        self.stations = list(stations)
        self.buckets = buckets
        self.current: Optional[TrafficFrame] = None

        # radius domain stays at the all-day max for every selection
        self.all_day_max = max_total_traffic(
            compute_station_traffic(self.stations, self.buckets, UNFILTERED)
        )

    @classmethod
    def from_trips(
        cls,
        stations: Sequence[Station],
        trips: Sequence[Trip],
        *,
        progress: bool = False,
    ) -> "TrafficView":
        if progress:
            print(
                f"{Fore.CYAN}Building traffic view for "
                f"{len(stations):,} stations…{Style.RESET_ALL}"
            )
        return cls(stations, bucketize(trips, progress=progress))

    @property
    def state(self) -> str:
        if self.current is None or isinstance(self.current.time_filter, Unfiltered):
            return "unfiltered"
        return "filtered"

    def select(self, time_filter=UNFILTERED) -> TrafficFrame:
        time_filter = time_filter_from_slider(time_filter)

        snapshot = compute_station_traffic(self.stations, self.buckets, time_filter)
        scale = radius_scale(self.all_day_max, time_filter)

        frame = TrafficFrame(
            time_filter=time_filter,
            stations=snapshot,
            scale=scale,
            visuals=station_visuals(snapshot, scale),
        )
        self.current = frame
        return frame
