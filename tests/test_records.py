import pandas as pd
import pytest

from bikeflow.traffic.aggregate import compute_station_traffic
from bikeflow.traffic.buckets import bucketize
from bikeflow.traffic.types import MalformedInput, Station
from bikeflow.util.records import snapshot_to_frame, stations_from_records, trips_from_frame


def test_stations_from_records_keeps_used_fields():
    raw = [
        {"station_id": "abc-1", "short_name": "A32000", "name": "Kendall T",
         "lat": 42.36, "lon": "-71.09", "capacity": 19},
    ]

    (st,) = stations_from_records(raw)
    assert st == Station(short_name="A32000", lon=-71.09, lat=42.36, name="Kendall T")


def test_stations_from_records_missing_field():
    with pytest.raises(MalformedInput, match="short_name"):
        stations_from_records([{"name": "x", "lat": 1, "lon": 2}])


def test_trips_from_frame():
    df = pd.DataFrame(
        {
            "start_station_id": ["A32000", "B32001"],
            "end_station_id": ["B32001", "A32000"],
            "started_at": ["2024-03-01 00:05:12", "2024-03-01 08:00:00"],
            "ended_at": ["2024-03-01 00:10:40", "2024-03-01 08:25:00"],
            "rideable_type": ["classic_bike", "electric_bike"],
        }
    )

    trips = trips_from_frame(df)
    buckets = bucketize(trips)

    assert len(trips) == 2
    assert trips[0].start_station_id == "A32000"
    assert buckets.departures[5] == (trips[0],)
    assert buckets.arrivals[505] == (trips[1],)


def test_trips_from_frame_rejects_bad_rows():
    df = pd.DataFrame(
        {
            "start_station_id": ["A"],
            "end_station_id": ["B"],
            "started_at": ["yesterday-ish"],
            "ended_at": ["2024-03-01 08:25:00"],
        }
    )
    with pytest.raises(MalformedInput, match="unparseable"):
        trips_from_frame(df)


def test_trips_from_frame_missing_columns():
    with pytest.raises(MalformedInput, match="ended_at"):
        trips_from_frame(pd.DataFrame({"start_station_id": [], "end_station_id": [],
                                       "started_at": []}))


def test_snapshot_to_frame(stations, one_trip):
    snapshot = compute_station_traffic(stations, bucketize(one_trip))
    df = snapshot_to_frame(snapshot)

    assert list(df["short_name"]) == ["A32000", "B32001", "C32002"]
    assert list(df["total_traffic"]) == [1, 1, 0]
    assert df.loc[0, "departures"] == 1
    assert df.loc[1, "arrivals"] == 1


def test_snapshot_to_frame_empty():
    df = snapshot_to_frame([])
    assert df.empty
    assert "total_traffic" in df.columns
