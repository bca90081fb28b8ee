import pytest

from minengine.time_step import TimeStep


def test_default_is_zero():
    ts = TimeStep()
    assert ts.seconds() == 0.0
    assert ts.milliseconds() == 0.0
    assert float(ts) == 0.0


def test_seconds_and_float_agree():
    ts = TimeStep(0.016)
    assert ts.seconds() == 0.016
    assert float(ts) == ts.seconds()


def test_milliseconds_worked_example():
    assert TimeStep(1.5).milliseconds() == pytest.approx(1500.0)


@pytest.mark.parametrize("value", [0.001, 0.25, 2.0, 10.0])
def test_milliseconds_scale_seconds(value):
    ts = TimeStep(value)
    assert ts.milliseconds() == pytest.approx(ts.seconds() * 1000.0)


def test_immutable():
    ts = TimeStep(1.0)
    with pytest.raises(AttributeError):
        ts.time = 2.0  # type: ignore[misc]
    assert ts.seconds() == 1.0