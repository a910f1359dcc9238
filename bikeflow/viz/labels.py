# bikeflow/viz/labels.py
from __future__ import annotations

from bikeflow.traffic.types import StationTraffic, Unfiltered, time_filter_from_slider

ANY_TIME_LABEL = "any time"


def format_time(minute: int) -> str:
    """Slider label, e.g. 5 -> '12:05 AM', 810 -> '1:30 PM'."""
    hour, mins = divmod(int(minute), 60)
    suffix = "AM" if hour < 12 else "PM"
    return f"{hour % 12 or 12}:{mins:02d} {suffix}"


def format_time_filter(time_filter) -> str:
    time_filter = time_filter_from_slider(time_filter)
    if isinstance(time_filter, Unfiltered):
        return ANY_TIME_LABEL
    return format_time(time_filter.minute)


def station_summary(s: StationTraffic) -> str:
    return (
        f"{s.name}: "
        f"{s.total_traffic:,} total trips, "
        f"{s.departures:,} departures, "
        f"{s.arrivals:,} arrivals"
    )
