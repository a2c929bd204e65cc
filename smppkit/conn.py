"""SMPP connections over TCP, optionally TLS, and a switchable wrapper."""

from __future__ import annotations

import socket
import ssl
import threading
from typing import Any, BinaryIO, Callable

from smppkit.header import HEADER_LEN, Header, _read_exact, decode_header

DEFAULT_ADDR = "localhost:2775"

Decoder = Callable[[BinaryIO], Any]


class NotConnectedError(ConnectionError):
    """An attempt was made to use a dead connection."""

    def __init__(self, message: str = "not connected") -> None:
        super().__init__(message)


class NotBoundError(ConnectionError):
    """A transmitter, receiver or transceiver was used before binding."""

    def __init__(self, message: str = "not bound") -> None:
        super().__init__(message)


class ResponseTimeoutError(TimeoutError):
    """No response arrived in time."""

    def __init__(self, message: str = "timeout waiting for response") -> None:
        super().__init__(message)


def _split_host_port(addr: str) -> tuple[str, int]:
    host, sep, port = addr.rpartition(":")
    if not sep or not port:
        raise ValueError(f"missing port in address: {addr!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, int(port)


def _read_frame(stream: BinaryIO) -> tuple[Header, bytes]:
    header = decode_header(stream)
    body = _read_exact(stream, header.length - HEADER_LEN) if header.length > HEADER_LEN else b""
    return header, body


class Conn:
    """A single client connection to an SMPP server.

    ``read`` returns whatever ``decoder`` makes of the stream; by default a
    tuple of the decoded header and the raw body bytes. ``write`` takes raw
    bytes or any object with a ``serialize()`` method returning bytes.
    """

    def __init__(
        self,
        addr: str = "",
        ssl_context: ssl.SSLContext | None = None,
        decoder: Decoder | None = None,
        timeout: float | None = None,
    ) -> None:
        host, port = _split_host_port(addr or DEFAULT_ADDR)
        sock = socket.create_connection((host, port), timeout=timeout)
        if ssl_context is not None:
            try:
                sock = ssl_context.wrap_socket(sock, server_hostname=host)
            except BaseException:
                sock.close()
                raise
        self._sock = sock
        self._reader = sock.makefile("rb")
        self._decoder = decoder or _read_frame

    def read(self) -> Any:
        """Read one PDU off the wire."""
        return self._decoder(self._reader)

    def write(self, pdu: Any) -> None:
        """Serialize ``pdu`` and send it."""
        if isinstance(pdu, (bytes, bytearray, memoryview)):
            data = bytes(pdu)
        else:
            data = pdu.serialize()
        self._sock.sendall(data)

    def close(self) -> None:
        """Close the connection."""
        try:
            self._reader.close()
        finally:
            self._sock.close()

    def __enter__(self) -> Conn:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class ConnSwitch:
    """A connection whose underlying connection can be swapped.

    With nothing set, read, write and close raise NotConnectedError.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._conn: Any = None

    def set(self, conn: Any) -> None:
        """Replace the underlying connection, closing any previous one."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
            self._conn = conn

    def read(self) -> Any:
        """Read from the underlying connection."""
        with self._lock:
            conn = self._conn
        if conn is None:
            raise NotConnectedError()
        return conn.read()

    def write(self, pdu: Any) -> None:
        """Write to the underlying connection."""
        with self._lock:
            if self._conn is None:
                raise NotConnectedError()
            self._conn.write(pdu)

    def close(self) -> None:
        """Close and drop the underlying connection."""
        with self._lock:
            if self._conn is None:
                raise NotConnectedError()
            conn, self._conn = self._conn, None
            conn.close()