import socket

import pytest

from chproto.tcpserver import LocalTcpServer


def _connect(port):
    return socket.create_connection(("127.0.0.1", port), timeout=2)


def test_accepts_connections_while_running():
    server = LocalTcpServer(0)
    server.start()
    try:
        assert server.port > 0
        with _connect(server.port) as conn:
            assert conn.getpeername()[1] == server.port
    finally:
        server.stop()


def test_refuses_after_stop():
    server = LocalTcpServer(0)
    server.start()
    port = server.port
    assert port > 0
    with _connect(port) as conn:
        assert conn.getpeername()[1] == port
    server.stop()
    with pytest.raises(ConnectionRefusedError):
        _connect(port)


def test_context_manager():
    with LocalTcpServer(0) as server:
        with _connect(server.port) as conn:
            assert conn.getpeername()[0] == "127.0.0.1"
        port = server.port
    with pytest.raises(ConnectionRefusedError):
        _connect(port)


def test_stop_is_idempotent():
    server = LocalTcpServer(0)
    server.stop()
    server.start()
    port = server.port
    assert port > 0
    with _connect(port) as conn:
        assert conn.getpeername()[1] == port
    server.stop()
    server.stop()
    with pytest.raises(ConnectionRefusedError):
        _connect(port)


def test_bind_conflict_raises():
    with LocalTcpServer(0) as first:
        second = LocalTcpServer(first.port)
        with pytest.raises(RuntimeError, match="Error binding socket"):
            second.start()