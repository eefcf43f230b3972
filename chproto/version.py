"""Library version number."""

VERSION_MAJOR = 2
VERSION_MINOR = 5
VERSION_PATCH = 1
VERSION_BUILD = 0


def encode_version(major: int, minor: int, patch: int, build: int = 0) -> int:
    """Pack version components, each below 100, into one integer."""
    for component in (major, minor, patch, build):
        if not 0 <= component < 100:
            raise ValueError(f"version component out of range: {component}")
    return major * 100 * 100 * 100 + minor * 100 * 100 + patch * 100 + build


def library_version() -> int:
    """The packed version number of this library."""
    return encode_version(VERSION_MAJOR, VERSION_MINOR, VERSION_PATCH, VERSION_BUILD)