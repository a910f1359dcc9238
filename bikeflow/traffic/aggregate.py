# bikeflow/traffic/aggregate.py
from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Sequence

from bikeflow.traffic.types import (
    UNFILTERED,
    MinuteBuckets,
    Station,
    StationTraffic,
    Trip,
)
from bikeflow.traffic.window import filter_by_minute


def count_by_station(trips: Iterable[Trip], key: Callable[[Trip], str]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for trip in trips:
        sid = str(key(trip))
        counts[sid] = counts.get(sid, 0) + 1
    return counts


def compute_station_traffic(
    stations: Sequence[Station],
    buckets: MinuteBuckets,
    time_filter=UNFILTERED,
) -> List[StationTraffic]:
    """
    Departures / arrivals / total traffic per station for one time filter.

    Stations keep their input order. Stations with no trips get zeros.
    Returns a fresh snapshot each call; nothing is accumulated.
    """
    departures = count_by_station(
        filter_by_minute(buckets.departures, time_filter),
        key=lambda t: t.start_station_id,
    )
    arrivals = count_by_station(
        filter_by_minute(buckets.arrivals, time_filter),
        key=lambda t: t.end_station_id,
    )

    snapshot: List[StationTraffic] = []
    for station in stations:
        sid = str(station.short_name)
        arr = arrivals.get(sid, 0)
        dep = departures.get(sid, 0)
        snapshot.append(
            StationTraffic(
                station=station,
                arrivals=arr,
                departures=dep,
                total_traffic=arr + dep,
            )
        )

    return snapshot
