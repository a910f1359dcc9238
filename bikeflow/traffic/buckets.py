# bikeflow/traffic/buckets.py
from __future__ import annotations

from typing import Iterable, List

import pandas as pd
from colorama import Fore, Style
from tqdm import tqdm

from bikeflow.constants import MINUTES_PER_DAY
from bikeflow.traffic.types import MalformedInput, MinuteBuckets, Trip


def minute_of_day(ts) -> int:
    """
    hour * 60 + minute of a timestamp, ignoring the date.

    Accepts datetime / pd.Timestamp / np.datetime64 / parseable strings.
    Timezone-aware values are read as wall-clock time in their own zone,
    not converted to the machine's local zone; convert upstream if needed.
    """
    try:
        t = pd.Timestamp(ts)
    except (TypeError, ValueError) as e:
        raise MalformedInput(f"Unparseable timestamp {ts!r}: {e}") from e

    if pd.isna(t):
        raise MalformedInput(f"Missing timestamp {ts!r}")

    minute = int(t.hour) * 60 + int(t.minute)
    if not (0 <= minute < MINUTES_PER_DAY):
        raise MalformedInput(f"Timestamp {ts!r} maps outside the day ({minute})")

    return minute


def bucketize(trips: Iterable[Trip], *, progress: bool = False) -> MinuteBuckets:
    """
    Put every trip in exactly one departure bucket (by started_at)
    and one arrival bucket (by ended_at).
    """
    departures: List[List[Trip]] = [[] for _ in range(MINUTES_PER_DAY)]
    arrivals: List[List[Trip]] = [[] for _ in range(MINUTES_PER_DAY)]

    it = trips
    if progress:
        total = len(trips) if hasattr(trips, "__len__") else None
        print(f"{Fore.CYAN}Bucketing trips by minute of day…{Style.RESET_ALL}")
        it = tqdm(trips, total=total, desc="Bucketing trips")

    for trip in it:
        try:
            start_min = minute_of_day(trip.started_at)
            end_min = minute_of_day(trip.ended_at)
        except MalformedInput as e:
            raise MalformedInput(f"{trip!r}: {e}") from e

        departures[start_min].append(trip)
        arrivals[end_min].append(trip)

    buckets = MinuteBuckets(
        departures=tuple(tuple(b) for b in departures),
        arrivals=tuple(tuple(b) for b in arrivals),
    )

    if progress:
        print(
            f"{Fore.GREEN}Bucketed {buckets.trip_count:,} trips "
            f"into {MINUTES_PER_DAY} minute slots.{Style.RESET_ALL}"
        )

    return buckets


def hourly_profile(buckets: MinuteBuckets) -> pd.DataFrame:
    """
    Departures / arrivals per hour of day.

    Returns DataFrame (index=hour 0..23) with columns departures, arrivals.
    """
    dep = [len(b) for b in buckets.departures]
    arr = [len(b) for b in buckets.arrivals]

    df = pd.DataFrame(
        {
            "hour": [m // 60 for m in range(MINUTES_PER_DAY)],
            "departures": dep,
            "arrivals": arr,
        }
    )

    out = df.groupby("hour")[["departures", "arrivals"]].sum()
    out = out.reindex(index=list(range(24)), fill_value=0).astype(int)
    return out
