"""Small utilities: environment lookup, version numbers, value formatting."""

from __future__ import annotations

import os
from fractions import Fraction
from typing import Any, Callable, Iterable, Optional, TypeVar, Union

T = TypeVar("T")

_UINT64_MAX = (1 << 64) - 1

_PREFIXES = {
    Fraction(1, 10**9): "n",
    Fraction(1, 10**6): "u",
    Fraction(1, 10**3): "m",
    Fraction(1, 100): "c",
    Fraction(1, 10): "d",
    Fraction(1): "",
}


def get_env_or_default(
    name: str,
    default: Optional[str] = None,
    convert: Callable[[str], T] = str,  # type: ignore[assignment]
) -> T:
    """Read an environment variable, falling back to ``default``, then convert it."""
    value = os.environ.get(name, default)
    if value is None:
        raise LookupError(f"Environment var '{name}' is not set.")
    return convert(value)


def version_number(major: int, minor: int, patch: int = 0, revision: int = 0) -> int:
    """Combine a server version into one comparable integer."""
    revision_places = 8
    patch_places = 4
    minor_places = 4
    return (
        major * 10 ** (minor_places + patch_places + revision_places)
        + minor * 10 ** (patch_places + revision_places)
        + patch * 10**revision_places
        + revision
    )


def uuid_to_string(high: int, low: int) -> str:
    """Format a UUID given as two unsigned 64-bit halves."""
    for half in (high, low):
        if not 0 <= half <= _UINT64_MAX:
            raise ValueError(f"UUID half out of 64-bit range: {half}")
    return (
        f"{high >> 32:08x}-{(high >> 16) & 0xFFFF:04x}-{high & 0xFFFF:04x}"
        f"-{low >> 48:04x}-{low & 0xFFFFFFFFFFFF:012x}"
    )


def _as_fraction(ratio: Union[int, float, str, Fraction]) -> Fraction:
    if isinstance(ratio, (int, Fraction)):
        return Fraction(ratio)
    return Fraction(str(ratio))


def unit_prefix(ratio: Union[int, float, str, Fraction]) -> str:
    """SI prefix for a unit ratio such as 1/1000; "?" when unsupported."""
    return _PREFIXES.get(_as_fraction(ratio), "?")


def format_duration(count: Any, ratio: Union[int, float, str, Fraction] = 1) -> str:
    """Render a duration as its count followed by the unit, e.g. "5ms"."""
    return f"{count}{unit_prefix(ratio)}s"


def _is_container(value: Any) -> bool:
    if isinstance(value, (str, bytes, bytearray)):
        return False
    try:
        iter(value)
    except TypeError:
        return False
    return True


def format_container(values: Iterable[Any]) -> str:
    """Render a container as "[a, b] (2 items)", quoting strings, recursing into nesting."""
    items = list(values)
    parts = []
    for item in items:
        if isinstance(item, str):
            parts.append(f'"{item}"')
        elif _is_container(item):
            parts.append(format_container(item))
        else:
            parts.append(str(item))
    return f"[{', '.join(parts)}] ({len(items)} items)"