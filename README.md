# chproto

Building blocks for working with the ClickHouse native protocol from Python:
protocol constants, server error codes, the exception hierarchy, and a set of
helpers for writing tests against a server. It has no dependencies outside
the standard library.

## Installation

    pip install chproto

For running the test suite:

    pip install "chproto[test]"

## What is inside

- `chproto.error_codes`: `ErrorCode`, an integer enumeration of server error
  codes (for example `ErrorCode.TABLE_ALREADY_EXISTS`).
- `chproto.exceptions`: the error hierarchy rooted at `Error` (a
  `RuntimeError`): `ValidationError`, `ProtocolError`, `UnimplementedError`,
  `InternalAssertionError`, `OpenSSLError`, `CompressionError`, and
  `ServerException` (also available as `ServerError`). A `ServerException`
  wraps a `ServerExceptionInfo` dataclass (`code`, `name`, `display_text`,
  `stack_trace`, `nested`), exposes it as `.exception`, its code as the
  `.code` property, and uses `display_text` as its message.
- `chproto.protocol`: packet and state codes `ServerCode`, `ClientCode`,
  `CompressionState` and `Stage`.
- `chproto.version`: `library_version()` returns the packed version number of
  this library; `encode_version(major, minor, patch, build=0)` packs components
  below 100 into one integer and raises `ValueError` otherwise.
- `chproto.helpers`:
  - `get_env_or_default(name, default=None, convert=str)` reads an environment
    variable, falls back to `default`, and raises `LookupError` if neither is set;
  - `version_number(major, minor, patch=0, revision=0)` combines a server
    version into one comparable integer;
  - `uuid_to_string(high, low)` formats a UUID given as two 64-bit halves;
  - `unit_prefix(ratio)` and `format_duration(count, ratio=1)` render
    durations such as `"5ms"`;
  - `format_container(values)` renders `[a, b] (2 items)`, quoting strings and
    recursing into nested containers.
- `chproto.generators`: deterministic sample values (`make_numbers`,
  `make_int_numbers`, `make_float_numbers`, `make_bools`, `make_strings`,
  `make_fixed_strings`, `make_uuids`, `make_datetime64s`, `make_dates`,
  `make_dates32`, `make_datetimes`, `make_int128s`, `make_decimals`,
  `make_ipv4s`, `make_ipv6s`, `foo_bar`), combinators (`make_arrays`,
  `generate`, `same_value`, `alternate`, `concat`), and seeded random
  generators `RandomGenerator` and `ChoiceGenerator`.
- `chproto.tcpserver`: `LocalTcpServer`, a socket listening on `127.0.0.1`
  that never accepts connections; usable as a context manager. With port `0`
  the port chosen by the system is stored in `.port` after `start()`.
- `chproto.timing`: `Timer` (elapsed time in whole units, nanoseconds by
  default), `MeasuresCollector` and `collect` for named measurements.

## Example

```python
from chproto.error_codes import ErrorCode
from chproto.exceptions import ServerException, ServerExceptionInfo
from chproto.helpers import uuid_to_string

info = ServerExceptionInfo(
    code=ErrorCode.TABLE_ALREADY_EXISTS,
    name="DB::Exception",
    display_text="Table already exists",
)
try:
    raise ServerException(info)
except ServerException as exc:
    assert exc.code == ErrorCode.TABLE_ALREADY_EXISTS
    print(exc)  # Table already exists

print(uuid_to_string(0x0102030405060708, 0x090A0B0C0D0E0F10))
# 01020304-0506-0708-090a-0b0c0d0e0f10
```

Using the local server in a test:

```python
from chproto.tcpserver import LocalTcpServer

with LocalTcpServer(0) as server:
    ...  # connect to 127.0.0.1:server.port
```

Timing a piece of work:

```python
from chproto.timing import Timer, collect

timer = Timer("0.001")   # milliseconds
collector = collect(timer.elapsed)
collector.add("start")
collector.add("end")
print(collector.results())
```

## What it does not do

This package is not a database client. It does not open connections to a
server, send queries, encode or decode blocks and columns, compress data or
speak TLS. It provides the constants, error types and test helpers that such
a client uses.

## Running the tests

    pytest