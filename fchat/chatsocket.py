"""WebSocket connection to the chat server with an optional keep-alive ping."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

import websocket

from .textutil import debug_message

__all__ = ["CHAT_SERVER", "KEEP_ALIVE_INTERVAL", "SocketClosedError", "ChatSocket"]

CHAT_SERVER = "wss://chat.f-list.net/chat2"
KEEP_ALIVE_INTERVAL = 30.0

ConnectionFactory = Callable[[str], Any]


class SocketClosedError(Exception):
    """The socket is closed or failed; a new connection is needed."""


def _default_factory(host: str) -> Any:
    return websocket.create_connection(host, origin="file:///")


_FAILURES = (websocket.WebSocketException, OSError)


class ChatSocket:
    """A text WebSocket to ``host``.

    ``connection_factory`` is called with the host and returns an open
    connection with ``send``, ``recv``, ``ping``, ``close`` and ``abort``.
    Any failure drops the connection and raises :class:`SocketClosedError`
    carrying the name of the error.
    """

    def __init__(self, host: str = CHAT_SERVER, connection_factory: ConnectionFactory | None = None) -> None:
        self.host = host
        self.connection_factory: ConnectionFactory = connection_factory or _default_factory
        self._connection: Any = None
        self._lock = threading.Lock()
        self._keep_alive_stop: threading.Event | None = None
        self._keep_alive_thread: threading.Thread | None = None

    @property
    def connected(self) -> bool:
        return self._connection is not None

    def _fail(self, exc: BaseException) -> SocketClosedError:
        error_type = type(exc).__name__
        debug_message(f"FSocket::wSocketError() - Socket encountered error. -> {error_type}")
        with self._lock:
            connection, self._connection = self._connection, None
        if connection is not None:
            try:
                connection.abort()
            except Exception:
                pass
        return SocketClosedError(error_type)

    def _current(self) -> Any:
        connection = self._connection
        if connection is None:
            raise SocketClosedError("Socket invalid, please reconnect.")
        return connection

    def connect(self) -> None:
        """Open the connection to the host."""
        debug_message(f"FSocket::socketConnect() - Opening connection to host: {self.host}")
        try:
            connection = self.connection_factory(self.host)
        except _FAILURES as exc:
            raise self._fail(exc) from exc
        with self._lock:
            self._connection = connection

    def send(self, message: str) -> None:
        """Send a text message."""
        connection = self._current()
        try:
            connection.send(message)
        except _FAILURES as exc:
            raise self._fail(exc) from exc

    def receive(self) -> str:
        """Wait for and return the next text message."""
        connection = self._current()
        try:
            data = connection.recv()
        except _FAILURES as exc:
            raise self._fail(exc) from exc
        if isinstance(data, bytes):
            return data.decode("utf-8", errors="replace")
        return data

    def ping(self) -> None:
        """Send a ping frame to the server."""
        connection = self._current()
        try:
            connection.ping()
        except _FAILURES as exc:
            raise self._fail(exc) from exc

    def close(self) -> None:
        """Stop the keep-alive and close the connection."""
        self.stop_keep_alive()
        with self._lock:
            connection, self._connection = self._connection, None
        if connection is not None:
            try:
                connection.close()
            except _FAILURES:
                pass

    def __enter__(self) -> "ChatSocket":
        self.connect()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _keep_alive(self, stop: threading.Event, interval: float) -> None:
        while not stop.wait(interval):
            try:
                self.ping()
            except SocketClosedError:
                return

    def start_keep_alive(self, interval: float = KEEP_ALIVE_INTERVAL) -> None:
        """Ping the server every ``interval`` seconds until stopped."""
        self.stop_keep_alive()
        stop = threading.Event()
        thread = threading.Thread(target=self._keep_alive, args=(stop, interval), daemon=True)
        self._keep_alive_stop = stop
        self._keep_alive_thread = thread
        thread.start()

    def stop_keep_alive(self) -> None:
        stop, thread = self._keep_alive_stop, self._keep_alive_thread
        self._keep_alive_stop = None
        self._keep_alive_thread = None
        if stop is not None:
            stop.set()
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    @property
    def keep_alive_active(self) -> bool:
        return self._keep_alive_thread is not None and self._keep_alive_thread.is_alive()