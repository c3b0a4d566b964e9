import pytest

from blockfall.main import IntervalTimer


def test_fires_once_interval_has_passed():
    timer = IntervalTimer(2.0)
    assert timer.triggered(2.0) is True
    assert timer.last_update == 2.0


def test_does_not_fire_before_interval():
    timer = IntervalTimer(2.0)
    assert timer.triggered(1.0) is False
    assert timer.last_update == 0.0


def test_restarts_from_last_firing():
    timer = IntervalTimer(2.0)
    assert timer.triggered(3.0) is True
    assert timer.triggered(4.0) is False
    assert timer.triggered(5.0) is True
    assert timer.last_update == 5.0


@pytest.mark.parametrize("now", [10.0, 100.0, 1000.0])
def test_long_gap_fires_only_once(now):
    timer = IntervalTimer(1.0)
    assert timer.triggered(now) is True
    assert timer.triggered(now) is False


def test_custom_start_time():
    timer = IntervalTimer(1.0, last_update=5.0)
    assert timer.triggered(5.5) is False
    assert timer.triggered(6.0) is True