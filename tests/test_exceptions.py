import pytest

from chproto.error_codes import ErrorCode
from chproto.exceptions import (
    CompressionError,
    Error,
    InternalAssertionError,
    OpenSSLError,
    ProtocolError,
    ServerError,
    ServerException,
    ServerExceptionInfo,
    UnimplementedError,
    ValidationError,
)


@pytest.mark.parametrize(
    "cls",
    [
        ValidationError,
        ProtocolError,
        UnimplementedError,
        InternalAssertionError,
        OpenSSLError,
        CompressionError,
    ],
)
def test_errors_carry_message_and_are_caught_as_error(cls):
    err = cls("broken input")
    assert str(err) == "broken input"
    assert isinstance(err, Error)
    assert isinstance(err, RuntimeError)
    with pytest.raises(Error, match="broken input"):
        raise err


def test_server_exception_text_and_code():
    details = ServerExceptionInfo(
        code=ErrorCode.TABLE_ALREADY_EXISTS,
        name="DB::Exception",
        display_text="Table already exists",
    )
    err = ServerException(details)
    assert str(err) == "Table already exists"
    assert err.code == ErrorCode.TABLE_ALREADY_EXISTS
    assert err.exception is details


def test_server_exception_caught_as_error():
    details = ServerExceptionInfo(code=ErrorCode.SYNTAX_ERROR, display_text="bad query")
    err = ServerException(details)
    assert err.code == ErrorCode.SYNTAX_ERROR
    assert str(err) == "bad query"
    with pytest.raises(Error, match="bad query"):
        raise err


def test_server_error_alias():
    details = ServerExceptionInfo(code=ErrorCode.ABORTED, display_text="aborted")
    err = ServerError(details)
    assert str(err) == "aborted"
    assert err.code == ErrorCode.ABORTED
    assert err.exception is details


def test_nested_exception_chain():
    inner = ServerExceptionInfo(code=ErrorCode.NETWORK_ERROR, display_text="inner")
    outer = ServerExceptionInfo(code=ErrorCode.ABORTED, display_text="outer", nested=inner)
    err = ServerException(outer)
    assert err.exception.nested is inner
    assert err.exception.nested.nested is None
    assert err.exception.nested.code == ErrorCode.NETWORK_ERROR


def test_default_exception_info():
    info = ServerExceptionInfo()
    assert info.code == ErrorCode.OK
    assert (info.name, info.display_text, info.stack_trace) == ("", "", "")
    assert info.nested is None