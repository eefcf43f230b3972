"""Elapsed-time measurement and collection of named measurements."""

from __future__ import annotations

import time
from fractions import Fraction
from typing import Callable, Generic, List, Tuple, TypeVar, Union

R = TypeVar("R")


def _fraction(value: Union[int, float, str, Fraction]) -> Fraction:
    if isinstance(value, (int, Fraction)):
        return Fraction(value)
    return Fraction(str(value))


class Timer:
    """Measures time since creation or last restart, in whole ``unit`` seconds."""

    def __init__(self, unit: Union[int, float, str, Fraction] = Fraction(1, 10**9)) -> None:
        self.unit = _fraction(unit)
        if self.unit <= 0:
            raise ValueError(f"unit must be positive: {unit}")
        self._started_at = time.perf_counter_ns()

    def restart(self) -> None:
        """Start measuring again from now."""
        self._started_at = time.perf_counter_ns()

    def elapsed(self) -> int:
        """Elapsed time, truncated to a whole number of units."""
        nanoseconds = time.perf_counter_ns() - self._started_at
        return int(Fraction(nanoseconds, 10**9) / self.unit)


class MeasuresCollector(Generic[R]):
    """Records the result of a measuring function under a name each time."""

    def __init__(self, measure: Callable[[], R]) -> None:
        self._measure = measure
        self._results: List[Tuple[str, R]] = []

    def add(self, name: str) -> None:
        """Take a measurement and store it under ``name``."""
        self._results.append((name, self._measure()))

    def results(self) -> List[Tuple[str, R]]:
        """All (name, measurement) pairs in the order taken."""
        return list(self._results)


def collect(measure: Callable[[], R]) -> MeasuresCollector[R]:
    """A collector using ``measure``."""
    return MeasuresCollector(measure)