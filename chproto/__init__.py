"""ClickHouse native protocol constants, error types and test-support helpers."""

__version__ = "2.5.1"

__all__ = [
    "error_codes",
    "exceptions",
    "protocol",
    "version",
    "helpers",
    "generators",
    "tcpserver",
    "timing",
]