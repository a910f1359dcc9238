# bikeflow/util/records.py
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence

import pandas as pd

from bikeflow.traffic.types import MalformedInput, Station, StationTraffic, Trip

TRIP_COLUMNS = ["start_station_id", "end_station_id", "started_at", "ended_at"]


def stations_from_records(records: Iterable[Dict[str, Any]]) -> List[Station]:
    """
    Build Stations from station_information style dicts
    (the entries of data.stations), keeping only the fields we use.
    """
    stations = []
    for s in records:
        try:
            stations.append(
                Station(
                    short_name=str(s["short_name"]),
                    lon=float(s["lon"]),
                    lat=float(s["lat"]),
                    name=s["name"],
                )
            )
        except KeyError as e:
            raise MalformedInput(f"Station record missing {e.args[0]!r}: {s!r}") from e
        except (TypeError, ValueError) as e:
            raise MalformedInput(f"Bad station record {s!r}: {e}") from e

    return stations


def trips_from_frame(df: pd.DataFrame) -> List[Trip]:
    """
    Build Trips from an already-loaded DataFrame with columns:

      start_station_id, end_station_id, started_at, ended_at

    Timestamps are parsed with pd.to_datetime; ids are kept as strings.
    """
    missing = [c for c in TRIP_COLUMNS if c not in df.columns]
    if missing:
        raise MalformedInput(f"Trips frame missing columns: {missing}")

    started = pd.to_datetime(df["started_at"], errors="coerce")
    ended = pd.to_datetime(df["ended_at"], errors="coerce")

    bad = started.isna() | ended.isna()
    if bad.any():
        first = df.index[bad.to_numpy()][0]
        raise MalformedInput(
            f"{int(bad.sum())} trips with unparseable timestamps (first at row {first!r})"
        )

    return [
        Trip(
            start_station_id=str(s0),
            end_station_id=str(s1),
            started_at=t0,
            ended_at=t1,
        )
        for s0, s1, t0, t1 in zip(
            df["start_station_id"], df["end_station_id"], started, ended
        )
    ]


def snapshot_to_frame(snapshot: Sequence[StationTraffic]) -> pd.DataFrame:
    """One row per station: short_name, name, lat, lon, arrivals, departures, total_traffic."""
    return pd.DataFrame(
        [
            {
                "short_name": s.short_name,
                "name": s.name,
                "lat": s.lat,
                "lon": s.lon,
                "arrivals": s.arrivals,
                "departures": s.departures,
                "total_traffic": s.total_traffic,
            }
            for s in snapshot
        ],
        columns=[
            "short_name", "name", "lat", "lon",
            "arrivals", "departures", "total_traffic",
        ],
    )
