# bikeflow/traffic/window.py
from __future__ import annotations

from typing import List, Sequence

from bikeflow.constants import MINUTES_PER_DAY, WINDOW_HALF_WIDTH
from bikeflow.traffic.types import Trip, Unfiltered, time_filter_from_slider


def window_minutes(center: int) -> List[int]:
    """
    Minutes visited for a window centred on `center`, offset-ascending.

    Wraps across midnight: center=5 starts at 1385.
    """
    return [
        (center + i + MINUTES_PER_DAY) % MINUTES_PER_DAY
        for i in range(-WINDOW_HALF_WIDTH, WINDOW_HALF_WIDTH + 1)
    ]


def filter_by_minute(trips_by_minute: Sequence[Sequence[Trip]], time_filter) -> List[Trip]:
    """
    Flatten the buckets selected by `time_filter`.

    Unfiltered -> every bucket in order.
    At(m)      -> the 121 buckets around m.

    Raw slider ints are accepted too (-1 = unfiltered).
    """
    time_filter = time_filter_from_slider(time_filter)

    if isinstance(time_filter, Unfiltered):
        return [trip for bucket in trips_by_minute for trip in bucket]

    filtered: List[Trip] = []
    for minute in window_minutes(time_filter.minute):
        filtered.extend(trips_by_minute[minute])
    return filtered
