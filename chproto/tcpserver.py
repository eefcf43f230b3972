"""A listening TCP socket on the loopback interface, for connection tests."""

from __future__ import annotations

import socket
from typing import Optional


class LocalTcpServer:
    """Listens on 127.0.0.1 without ever accepting connections."""

    def __init__(self, port: int) -> None:
        self.port = port
        self._socket: Optional[socket.socket] = None

    def start(self) -> None:
        """Bind and listen; with port 0 the chosen port is stored in ``port``."""
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as exc:
            raise RuntimeError("Error establishing server socket") from exc
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        except OSError:
            pass
        try:
            sock.bind(("127.0.0.1", self.port))
        except OSError as exc:
            sock.close()
            raise RuntimeError(
                f"Error binding socket to local address: {exc.strerror or exc}"
            ) from exc
        sock.listen(3)
        self.port = sock.getsockname()[1]
        self._socket = sock

    def stop(self) -> None:
        """Shut down and close the socket; does nothing if not started."""
        if self._socket is None:
            return
        try:
            self._socket.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass
        self._socket.close()
        self._socket = None

    def __enter__(self) -> LocalTcpServer:
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()