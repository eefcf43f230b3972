from fractions import Fraction

import pytest

from chproto.helpers import (
    format_container,
    format_duration,
    get_env_or_default,
    unit_prefix,
    uuid_to_string,
    version_number,
)


def test_uuid_to_string():
    assert (
        uuid_to_string(0x0102030405060708, 0x090A0B0C0D0E0F10)
        == "01020304-0506-0708-090a-0b0c0d0e0f10"
    )


def test_uuid_to_string_shape():
    text = uuid_to_string(0xBB6A8C699AB2414C, 0x86697B7FD27F0825)
    assert len(text) == 36
    assert [len(p) for p in text.split("-")] == [8, 4, 4, 4, 12]
    assert int(text.replace("-", ""), 16) == (0xBB6A8C699AB2414C << 64) | 0x86697B7FD27F0825


def test_uuid_zero_padded():
    assert uuid_to_string(0, 0).replace("-", "") == "0" * 32


def test_uuid_out_of_range():
    with pytest.raises(ValueError):
        uuid_to_string(1 << 64, 0)
    with pytest.raises(ValueError):
        uuid_to_string(0, -1)


def test_env_present(monkeypatch):
    monkeypatch.setenv("CHPROTO_TEST_PORT", "9440")
    assert get_env_or_default("CHPROTO_TEST_PORT", "9000", int) == 9440


def test_env_default(monkeypatch):
    monkeypatch.delenv("CHPROTO_TEST_HOST", raising=False)
    assert get_env_or_default("CHPROTO_TEST_HOST", "localhost") == "localhost"


def test_env_missing_without_default(monkeypatch):
    monkeypatch.delenv("CHPROTO_TEST_MISSING", raising=False)
    with pytest.raises(LookupError):
        get_env_or_default("CHPROTO_TEST_MISSING")


def test_version_number_revision_is_additive():
    assert version_number(21, 8, 3, 54449) - version_number(21, 8, 3) == 54449


def test_version_number_ordering():
    assert version_number(21, 8) < version_number(21, 9)
    assert version_number(21, 9, 9999) < version_number(21, 10)
    assert version_number(999, 9999, 9999, 99999999) < version_number(1000, 0)


@pytest.mark.parametrize(
    "ratio, prefix",
    [
        (Fraction(1, 10**9), "n"),
        (Fraction(1, 10**6), "u"),
        (Fraction(1, 1000), "m"),
        (Fraction(1, 100), "c"),
        (Fraction(1, 10), "d"),
        (1, ""),
        (60, "?"),
    ],
)
def test_unit_prefix(ratio, prefix):
    assert unit_prefix(ratio) == prefix


def test_unit_prefix_from_float():
    assert unit_prefix(1e-3) == unit_prefix(Fraction(1, 1000))


def test_format_duration():
    assert format_duration(5, Fraction(1, 1000)) == "5" + unit_prefix(Fraction(1, 1000)) + "s"
    assert format_duration(7) == "7s"


def test_format_container_numbers():
    assert format_container([1, 2, 3]) == "[1, 2, 3] (3 items)"


def test_format_container_empty():
    assert format_container([]) == "[] (0 items)"


def test_format_container_quotes_strings():
    assert format_container(["a", "b"]).startswith('["a", "b"]')


def test_format_container_nested():
    inner = format_container([1, 2])
    text = format_container([[1, 2], []])
    assert text.startswith("[" + inner + ", " + format_container([]) + "]")
    assert text.endswith("(2 items)")


def test_format_container_accepts_generator():
    assert format_container(x for x in [1, 2, 3]) == format_container([1, 2, 3])