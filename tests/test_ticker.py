from ponggame.ticker import Ticker


def _clock(*values):
    return iter(values).__next__


def test_not_ticking_until_started():
    ticker = Ticker(clock=_clock(5.0))
    assert ticker.is_ticking() is False
    ticker.start()
    assert ticker.is_ticking() is True


def test_elapsed_measures_since_start_and_previous_call():
    ticker = Ticker(clock=_clock(10.0, 10.25, 11.0))
    ticker.start()
    assert ticker.elapsed() == 10.25 - 10.0
    assert ticker.elapsed() == 11.0 - 10.25


def test_reset_moves_reference_point_without_ticking():
    ticker = Ticker(clock=_clock(1.0, 4.0, 4.5))
    ticker.start()
    ticker.reset()
    assert ticker.elapsed() == 4.5 - 4.0
    assert ticker.is_ticking() is True


def test_real_clock_is_non_negative():
    ticker = Ticker()
    ticker.start()
    assert ticker.elapsed() >= 0.0