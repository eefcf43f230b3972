import math
import struct
import sys
from ipaddress import IPv4Address

import pytest

from chproto import generators as g
from chproto.helpers import uuid_to_string


def test_make_numbers():
    assert g.make_numbers() == [1, 2, 3, 7, 11, 13, 17, 19, 23, 29, 31]


def test_make_bools():
    assert g.make_bools() == [1, 0, 0, 0, 1, 1, 0, 1, 1, 1, 0]


@pytest.mark.parametrize("bits", [8, 16, 32, 64])
@pytest.mark.parametrize("signed", [True, False])
def test_make_int_numbers_span_range(bits, signed):
    values = g.make_int_numbers(bits, signed)
    low = -(1 << (bits - 1)) if signed else 0
    high = (1 << (bits - 1)) - 1 if signed else (1 << bits) - 1
    assert values[0] == low
    assert values[-1] == high
    assert all(a < b for a, b in zip(values, values[1:]))
    steps = {b - a for a, b in zip(values, values[1:-1])}
    assert steps == {1 << (bits - 5)}


def test_make_int_numbers_rejects_tiny_width():
    with pytest.raises(ValueError):
        g.make_int_numbers(4, True)


def test_make_float_numbers_64():
    values = g.make_float_numbers(64)
    assert sys.float_info.max in values
    assert -sys.float_info.max in values
    assert math.inf in values and -math.inf in values
    assert any(math.isnan(v) for v in values)
    assert 0.0 in values


def test_make_float_numbers_32_fit_in_float32():
    for value in g.make_float_numbers(32):
        if math.isnan(value):
            continue
        assert struct.unpack("<f", struct.pack("<f", value))[0] == value


def test_make_float_numbers_unknown_width():
    with pytest.raises(ValueError):
        g.make_float_numbers(16)


def test_make_strings():
    strings = g.make_strings()
    assert strings[:4] == ["a", "ab", "abc", "abcd"]
    assert strings[4].startswith("long string to test how those are handled.")


def test_make_fixed_strings():
    strings = g.make_fixed_strings(3)
    assert all(len(s) == 3 for s in strings)
    assert strings[0] == "a\0\0"
    assert strings[3] == "abc"


def test_make_uuids():
    uuids = g.make_uuids()
    assert uuids[0] == (0, 0)
    assert uuid_to_string(*uuids[0]) == "00000000-0000-0000-0000-000000000000"
    assert len(set(uuids)) == len(uuids)


def test_make_datetime64s():
    values = g.make_datetime64s(3, 200)
    assert len(values) == 200
    assert all(a < b for a, b in zip(values, values[1:]))
    assert values[0] < 0 < values[-1]


def test_make_dates():
    days = g.make_dates()
    assert days[0] == 0
    assert days[-1] == 65536 - 1
    assert g.make_dates(True) == [d * 86400 for d in days]


def test_make_dates32():
    days = g.make_dates()
    values = g.make_dates32()
    assert values[: len(days)] == days
    assert values[len(days):] == [-d for d in days]


def test_make_datetimes():
    values = g.make_datetimes()
    assert values[0] == 0
    assert values[-1] == 4294967296 - 1
    assert all(v & (v - 1) == 0 for v in values[1:-1])


def test_make_int128s():
    values = g.make_int128s()
    assert values[0] == -1
    assert values[-1] == 0
    assert -(1 << 127) in values
    assert all(-(1 << 127) <= v < (1 << 127) for v in values)


def test_make_decimals():
    base = g.make_decimals(10, 0)
    assert base[0] == 0 and base[-1] == 65536 - 1
    scaled = g.make_decimals(10, 4)
    assert [v // 10**4 for v in scaled] == base
    assert len({v % 10**4 for v in scaled}) == 1


@pytest.mark.parametrize(
    "index, expected", [(3, "Foo"), (5, "Bar"), (15, "FooBar"), (7, "7")]
)
def test_foo_bar(index, expected):
    assert g.foo_bar(index) == expected


def test_make_ipv4s():
    ips = g.make_ipv4s()
    assert ips[1] == IPv4Address("127.0.0.1")
    assert ips[0] == ips[-1]
    assert ips[3] == IPv4Address(0)


def test_make_ipv6s():
    ips = g.make_ipv6s()
    assert str(ips[0]) == "1:203:405:607:809:a0b:c0d:e0f"
    assert str(ips[1]) == "::1"
    assert str(ips[2]) == "::"
    assert ips[3].ipv4_mapped == IPv4Address("204.152.189.116")


def test_make_arrays():
    arrays = g.make_arrays(g.make_strings)
    assert 0 < len(arrays)
    strings = g.make_strings()
    assert all(array == strings[: len(array)] for array in arrays)
    assert [len(a) for a in arrays] == list(range(len(strings)))


def test_generate_and_same_value():
    assert g.generate(4, str) == ["0", "1", "2", "3"]
    assert g.generate(3, g.same_value("x")) == ["x", "x", "x"]


def test_alternate():
    gen = g.alternate(lambda i: ("a", i), lambda i: ("b", i))
    assert g.generate(4, gen) == [("a", 0), ("b", 0), ("a", 1), ("b", 1)]


def test_concat():
    assert g.concat([1, 2], (3,)) == [1, 2, 3]


def test_random_generator_reproducible_and_bounded():
    first = g.generate(50, g.RandomGenerator(7, -5, 5))
    second = g.generate(50, g.RandomGenerator(7, -5, 5))
    assert first == second
    assert all(-5 <= v <= 5 and isinstance(v, int) for v in first)


def test_random_generator_floats():
    values = g.generate(50, g.RandomGenerator(1, 0.0, 1.0))
    assert all(0.0 <= v <= 1.0 and isinstance(v, float) for v in values)


def test_random_generator_empty_range():
    with pytest.raises(ValueError):
        g.RandomGenerator(0, 3, 2)


def test_choice_generator():
    pool = ["x", "y", "z"]
    picks = g.generate(30, g.ChoiceGenerator(pool))
    assert set(picks) <= set(pool)
    assert picks == g.generate(30, g.ChoiceGenerator(pool))


def test_choice_generator_empty():
    with pytest.raises(ValueError):
        g.ChoiceGenerator([])