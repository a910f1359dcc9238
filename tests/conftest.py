from datetime import datetime

import pytest

from bikeflow.traffic.types import Station, Trip


def at(hh, mm, day=1):
    return datetime(2024, 3, day, hh, mm)


@pytest.fixture
def stations():
    return [
        Station(short_name="A32000", lon=-71.09, lat=42.36, name="Kendall T"),
        Station(short_name="B32001", lon=-71.10, lat=42.37, name="Central Square"),
        Station(short_name="C32002", lon=-71.11, lat=42.38, name="Harvard Square"),
    ]


@pytest.fixture
def one_trip():
    return [Trip("A32000", "B32001", at(0, 5), at(0, 10))]


@pytest.fixture
def day_trips():
    return [
        Trip("A32000", "B32001", at(0, 5), at(0, 10)),
        Trip("A32000", "C32002", at(8, 0), at(8, 25)),
        Trip("B32001", "A32000", at(8, 30), at(8, 45)),
        Trip("C32002", "A32000", at(17, 15, day=2), at(17, 40, day=2)),
        Trip("A32000", "A32000", at(23, 50), at(0, 20, day=2)),
    ]
