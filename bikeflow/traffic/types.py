# bikeflow/traffic/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple, Union

from bikeflow.constants import MINUTES_PER_DAY, UNFILTERED_SENTINEL


class MalformedInput(ValueError):
    """A trip or station record that can't be used (missing field, bad timestamp)."""


@dataclass(frozen=True)
class Trip:
    start_station_id: str
    end_station_id: str
    started_at: Any  # datetime / pd.Timestamp / ISO string
    ended_at: Any


@dataclass(frozen=True)
class Station:
    short_name: str
    lon: float
    lat: float
    name: str


@dataclass(frozen=True)
class StationTraffic:
    """
    Station annotated with the counts for one time filter.

    A new list of these is produced on every aggregation pass,
    so counts never carry over from a previous filter.
    """
    station: Station
    arrivals: int = 0
    departures: int = 0
    total_traffic: int = 0

    @property
    def short_name(self) -> str:
        return self.station.short_name

    @property
    def name(self) -> str:
        return self.station.name

    @property
    def lat(self) -> float:
        return self.station.lat

    @property
    def lon(self) -> float:
        return self.station.lon


@dataclass(frozen=True)
class MinuteBuckets:
    """
    departures[m] = trips that started at minute-of-day m
    arrivals[m]   = trips that ended at minute-of-day m
    """
    departures: Tuple[Tuple[Trip, ...], ...]
    arrivals: Tuple[Tuple[Trip, ...], ...]

    @property
    def trip_count(self) -> int:
        return sum(len(b) for b in self.departures)


# ----------------------------
# Time filter
# ----------------------------

@dataclass(frozen=True)
class Unfiltered:
    pass


@dataclass(frozen=True)
class At:
    minute: int

    def __post_init__(self):
        if isinstance(self.minute, bool) or not isinstance(self.minute, int):
            raise ValueError(f"minute must be an int, got {self.minute!r}")
        if not (0 <= self.minute < MINUTES_PER_DAY):
            raise ValueError(
                f"minute must be in [0, {MINUTES_PER_DAY - 1}], got {self.minute}"
            )


TimeFilter = Union[Unfiltered, At]

UNFILTERED = Unfiltered()


def time_filter_from_slider(value) -> TimeFilter:
    """
    Convert a raw slider value into a TimeFilter.

      -1        -> Unfiltered
      0..1439   -> At(minute)

    TimeFilter instances pass through unchanged.
    """
    if isinstance(value, (Unfiltered, At)):
        return value

    if isinstance(value, bool):
        raise ValueError(f"Not a time filter value: {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"Not a time filter value: {value!r}")

    try:
        minute = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Not a time filter value: {value!r}") from None

    if minute == UNFILTERED_SENTINEL:
        return UNFILTERED
    return At(minute)
