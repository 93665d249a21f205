import pytest

from typedrill.window import WindowedAverage


def test_empty_window_returns_default():
    w = WindowedAverage()
    assert w.average(45.0) == 45.0
    assert w.average(0) == 0
    assert w.average(-3.5) == -3.5


def test_single_value():
    w = WindowedAverage()
    w.append(1.0)
    assert w.average(13.0) == 1.0


def test_mean_of_all_values_below_capacity():
    w = WindowedAverage()
    values = [0.1, 0.2, 0.3, 0.45, 1.25]
    for v in values:
        w.append(v)
    assert w.length == len(values)
    assert w.average(0) == pytest.approx(sum(values) / len(values))


def test_mean_of_last_ten_values_past_capacity():
    w = WindowedAverage()
    for v in range(1, 16):
        w.append(float(v))
    assert w.length == 10
    assert w.average(0) == pytest.approx(sum(range(6, 16)) / 10)


def test_values_stored_in_milliseconds():
    w = WindowedAverage()
    w.append(0.12345)
    assert w.values[0] == 123
    assert w.average(0) == pytest.approx(0.123)


def test_serialized_layout():
    w = WindowedAverage()
    w.append(0.5)
    w.append(0.25)
    data = w.to_dict()
    assert data == {"l": 2, "i": 2, "v": [500, 250, 0, 0, 0, 0, 0, 0, 0, 0]}
    assert WindowedAverage.from_dict(data) == w


def test_from_dict_pads_short_values():
    w = WindowedAverage.from_dict({"l": 1, "i": 1, "v": [700]})
    assert len(w.values) == 10
    assert w.average(0) == pytest.approx(0.7)


def test_from_dict_rejects_non_numeric_values():
    with pytest.raises(ValueError):
        WindowedAverage.from_dict({"l": 1, "i": 1, "v": ["x"]})
