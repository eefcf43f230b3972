import itertools
import time
from fractions import Fraction

import pytest

from chproto.timing import MeasuresCollector, Timer, collect


def test_elapsed_counts_in_unit():
    timer = Timer(Fraction(1, 1000))
    time.sleep(0.02)
    assert timer.elapsed() >= 20


def test_nanosecond_default_is_finer_than_milliseconds():
    timer = Timer()
    time.sleep(0.005)
    assert timer.elapsed() >= 5 * 10**6


def test_restart_resets():
    timer = Timer(0.001)
    time.sleep(0.03)
    before = timer.elapsed()
    timer.restart()
    after = timer.elapsed()
    assert before >= 30
    assert after < before


def test_invalid_unit():
    with pytest.raises(ValueError):
        Timer(0)


def test_collector_records_in_order():
    counter = itertools.count()
    collector = MeasuresCollector(lambda: next(counter))
    collector.add("first")
    collector.add("second")
    assert collector.results() == [("first", 0), ("second", 1)]


def test_collect_helper_and_results_copy():
    collector = collect(lambda: "value")
    collector.add("name")
    results = collector.results()
    results.clear()
    assert collector.results() == [("name", "value")]


def test_collect_with_timer():
    timer = Timer(Fraction(1, 1000))
    collector = collect(timer.elapsed)
    collector.add("start")
    time.sleep(0.01)
    collector.add("end")
    (start_name, start), (end_name, end) = collector.results()
    assert (start_name, end_name) == ("start", "end")
    assert end - start >= 10