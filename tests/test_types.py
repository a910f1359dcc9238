import pytest

from bikeflow.traffic.types import UNFILTERED, At, Unfiltered, time_filter_from_slider


def test_at_validates_minute():
    assert At(0).minute == 0
    assert At(1439).minute == 1439
    for bad in (-1, 1440, 99999):
        with pytest.raises(ValueError):
            At(bad)


def test_at_rejects_non_int():
    with pytest.raises(ValueError):
        At(12.5)
    with pytest.raises(ValueError):
        At(True)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (-1, UNFILTERED),
        ("-1", UNFILTERED),
        (0, At(0)),
        ("720", At(720)),
        (1439.0, At(1439)),
        (At(3), At(3)),
        (UNFILTERED, UNFILTERED),
    ],
)
def test_time_filter_from_slider(raw, expected):
    assert time_filter_from_slider(raw) == expected


@pytest.mark.parametrize("raw", [-2, 1440, "noon", None, 3.5, False])
def test_time_filter_from_slider_rejects(raw):
    with pytest.raises(ValueError):
        time_filter_from_slider(raw)


def test_unfiltered_is_a_singleton_value():
    assert Unfiltered() == UNFILTERED
