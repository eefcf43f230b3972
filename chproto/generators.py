"""Deterministic sample values for exercising column types."""

from __future__ import annotations

import math
import random
import struct
import sys
from ipaddress import IPv4Address, IPv6Address
from typing import Callable, Iterable, List, Sequence, Tuple, TypeVar, Union

T = TypeVar("T")
Number = Union[int, float]

_LONG_LINE = "long string to test how those are handled. Here goes more text. "

_FLOAT_LIMITS = {
    # bits: (min normal, max, epsilon, max_exponent, min_exponent, min_exponent10)
    32: (
        1.1754943508222875e-38,
        3.4028234663852886e38,
        2.0**-23,
        128,
        -125,
        -37,
    ),
    64: (
        sys.float_info.min,
        sys.float_info.max,
        sys.float_info.epsilon,
        sys.float_info.max_exp,
        sys.float_info.min_exp,
        sys.float_info.min_10_exp,
    ),
}


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _make_int128(high: int, low: int) -> int:
    return _to_signed((high << 64) | (low & ((1 << 64) - 1)), 128)


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def make_numbers() -> List[int]:
    """A short list of small unsigned numbers."""
    return [1, 2, 3, 7, 11, 13, 17, 19, 23, 29, 31]


def make_int_numbers(bits: int, signed: bool = True) -> List[int]:
    """Integers from the type's minimum to its maximum in about 32 even steps."""
    if bits < 8:
        raise ValueError(f"unsupported integer width: {bits}")
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    step = 1 << (bits - 5)
    result = list(range(low, high - step + 1, step))
    result.append(high)
    return result


def make_float_numbers(bits: int = 64) -> List[float]:
    """Special and range-covering values of a 32- or 64-bit float."""
    try:
        fmin, fmax, eps, max_exp, min_exp, min_exp10 = _FLOAT_LIMITS[bits]
    except KeyError:
        raise ValueError(f"unsupported float width: {bits}") from None
    narrow = _to_float32 if bits == 32 else float

    result = [fmin, fmax, math.nan, math.inf, -math.inf, 0.0, eps, -eps]

    total_steps = 100
    step = 10.0 ** ((max_exp - min_exp) // total_steps)
    min_value = 10.0**min_exp10

    value = fmax
    while value >= min_value * step:
        result.append(value)
        result.append(-value)
        value = narrow(value / step)
    result.append(narrow(min_value))
    result.append(narrow(-min_value))
    return result


def make_bools() -> List[int]:
    """A fixed pattern of 0/1 values."""
    return [1, 0, 0, 0, 1, 1, 0, 1, 1, 1, 0]


def make_strings() -> List[str]:
    """Short strings and one long string."""
    return ["a", "ab", "abc", "abcd", _LONG_LINE * 19]


def make_fixed_strings(size: int) -> List[str]:
    """The strings of make_strings, padded with NULs or cut to ``size``."""
    return [value[:size].ljust(size, "\0") for value in make_strings()]


def make_uuids() -> List[Tuple[int, int]]:
    """UUIDs as (high, low) pairs of unsigned 64-bit halves."""
    return [
        (0, 0),
        (0xBB6A8C699AB2414C, 0x86697B7FD27F0825),
        (0x84B9F24BC26B49C6, 0xA03B4AB723341951),
        (0x3507213C178649F9, 0x9FAF035D662F60AE),
    ]


def make_datetime64s(scale: int, count: int = 200) -> List[int]:
    """Ticks spread over roughly 200 years around the epoch, at ``scale`` digits."""
    multiplier = 10**scale
    year = 86400 * 365 * multiplier
    return generate(
        count,
        lambda i: _to_signed((i - 100) * year * 2 + (i * 10) * multiplier + i, 64),
    )


def make_dates(in_seconds: bool = False) -> List[int]:
    """Day numbers, or the same days in seconds since the epoch."""
    days = [0, 1, 2, 4, 8, 16, 32, 64, 128, 256, 512, 1024, 2048, 4096, 8192,
            16384, 32768, 65536 - 1]
    if in_seconds:
        return [day * 86400 for day in days]
    return days


def make_dates32() -> List[int]:
    """Day numbers followed by their negations, for pre-epoch dates."""
    days = make_dates()
    return days + [-day for day in days]


def make_datetimes() -> List[int]:
    """Unsigned 32-bit timestamps: zero, powers of two and the maximum."""
    return [0] + [1 << power for power in range(32)] + [4294967296 - 1]


def make_int128s() -> List[int]:
    """Edge-case signed 128-bit integers."""
    all_ones = 0xFFFFFFFFFFFFFFFF
    return [
        _make_int128(all_ones, all_ones),
        _make_int128(0, all_ones),
        _make_int128(all_ones, 0),
        _make_int128(0x8000000000000000, 0),
        0,
    ]


def make_decimals(precision: int, scale: int) -> List[int]:
    """Raw decimal values with a non-zero fractional part at ``scale``."""
    multiplier = 10**scale
    fraction = 12345678910 % multiplier
    values = [0, 1, 2, 4, 8, 16, 32, 64, 128, 256, 512, 1024, 2048, 4096, 8192,
              16384, 32768, 65536 - 1]
    return [value * multiplier + fraction for value in values]


def foo_bar(index: int) -> str:
    """"Foo" for multiples of 3, "Bar" for 5, both for 15, else the number."""
    result = ("Foo" if index % 3 == 0 else "") + ("Bar" if index % 5 == 0 else "")
    return result or str(index)


def make_ipv4s() -> List[IPv4Address]:
    """IPv4 addresses built from 32-bit values laid out little-endian in memory."""
    raw = [0x12345678, 0x0100007F, 3585395774, 0, 0x12345678]
    return [IPv4Address(value.to_bytes(4, "little")) for value in raw]


def make_ipv6s() -> List[IPv6Address]:
    """A few IPv6 addresses, including loopback, unspecified and v4-mapped."""
    def tail(*octets: int) -> IPv6Address:
        return IPv6Address(bytes(10) + bytes(octets))

    return [
        IPv6Address(bytes(range(16))),
        tail(0, 0, 0, 0, 0, 1),
        tail(0, 0, 0, 0, 0, 0),
        tail(0xFF, 0xFF, 204, 152, 189, 116),
    ]


def make_arrays(generator: Callable[[], Sequence[T]]) -> List[List[T]]:
    """Prefixes of the generated values: lengths 0 to n - 1."""
    values = list(generator())
    return [values[:length] for length in range(len(values))]


def generate(count: int, generator: Callable[[int], T]) -> List[T]:
    """Call ``generator`` with indices 0 to ``count - 1``."""
    return [generator(index) for index in range(count)]


def same_value(value: T) -> Callable[[int], T]:
    """A generator that always yields ``value``."""
    return lambda _index: value


def alternate(
    first: Callable[[int], T], second: Callable[[int], T]
) -> Callable[[int], T]:
    """Interleave two generators: even indices from ``first``, odd from ``second``."""
    def pick(index: int) -> T:
        source = first if index % 2 == 0 else second
        return source(index // 2)

    return pick


def concat(first: Iterable[T], second: Iterable[T]) -> List[T]:
    """Both sequences joined into one list."""
    return [*first, *second]


class RandomGenerator:
    """Seeded uniform values in [low, high]; floats if either bound is a float."""

    def __init__(
        self,
        seed: int = 0,
        low: Number = -(1 << 63),
        high: Number = (1 << 63) - 1,
    ) -> None:
        if low > high:
            raise ValueError(f"empty range: [{low}, {high}]")
        self._random = random.Random(seed)
        self.low = low
        self.high = high
        self._real = isinstance(low, float) or isinstance(high, float)

    def __call__(self, position: object = None) -> Number:
        if self._real:
            return self._random.uniform(self.low, self.high)
        return self._random.randint(int(self.low), int(self.high))


class ChoiceGenerator:
    """Seeded random picks from a fixed list of values."""

    def __init__(self, values: Iterable[T]) -> None:
        self.values = list(values)
        if not self.values:
            raise ValueError("can't generate values from empty vector")
        self._index = RandomGenerator(0, 0, len(self.values) - 1)

    def __call__(self, position: object = None) -> T:
        return self.values[self._index(position)]