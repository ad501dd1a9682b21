"""A TCP server that feeds raw RDS groups to RDS Spy compatible clients."""

from __future__ import annotations

import os
import socket
import threading
from collections.abc import Sequence

_POLL_INTERVAL = 0.1
_BACKLOG = 4
_ERROR_MASKS = (192, 48, 12, 3)


class RdsSpyError(Exception):
    """Raised when the RDS Spy link cannot be set up."""


def format_group(blocks: Sequence[int], errors: int) -> str:
    """Format one RDS group; blocks flagged by ``errors`` are sent as dashes."""
    if len(blocks) != 4:
        raise ValueError(f"an RDS group has 4 blocks, not {len(blocks)}")
    parts = []
    for block, mask in zip(blocks, _ERROR_MASKS):
        if not 0 <= block <= 0xFFFF:
            raise ValueError(f"RDS block out of range: {block}")
        parts.append("----" if errors & mask else f"{block:04X}")
    return f"G:\r\n{''.join(parts)}\r\n\r\n"


def format_reset() -> str:
    """Return the message that tells the client to reset its decoder."""
    return "G:\r\nRESET\r\n\r\n"


class RdsSpyServer:
    """Listens on a TCP port and forwards RDS groups to one client at a time."""

    def __init__(self, port: int) -> None:
        self.port = port
        self._listener: socket.socket | None = None
        self._client: socket.socket | None = None
        self._thread: threading.Thread | None = None
        self._stopping = threading.Event()
        self._lock = threading.Lock()

    @property
    def address(self) -> int | None:
        """The port actually bound, or None when the server is down."""
        with self._lock:
            if self._listener is None:
                return None
            return self._listener.getsockname()[1]

    def start(self) -> None:
        """Bind the port and start accepting clients in the background."""
        if self.is_up():
            return
        listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            if os.name != "nt":
                listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            listener.bind(("", self.port))
            listener.listen(_BACKLOG)
        except OSError as exc:
            listener.close()
            raise RdsSpyError(
                f"Failed to bind to a port: {self.port}.\n"
                "It may be already in use by another application."
            ) from exc
        listener.settimeout(_POLL_INTERVAL)
        self._stopping.clear()
        with self._lock:
            self._listener = listener
        self._thread = threading.Thread(target=self._serve, args=(listener,), name="rdsspy", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop listening and drop the connected client."""
        self._stopping.set()
        with self._lock:
            client = self._client
        if client is not None:
            try:
                client.shutdown(socket.SHUT_RDWR)
            except OSError:
                pass
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=5.0)
        self._thread = None

    def is_up(self) -> bool:
        with self._lock:
            return self._listener is not None

    def is_connected(self) -> bool:
        with self._lock:
            return self._listener is not None and self._client is not None

    def send(self, blocks: Sequence[int], errors: int) -> None:
        """Send one group to the client, if one is connected."""
        self._send(format_group(blocks, errors))

    def reset(self) -> None:
        """Ask the client to reset its decoder, if one is connected."""
        self._send(format_reset())

    def _send(self, message: str) -> None:
        with self._lock:
            client = self._client if self._listener is not None else None
        if client is None:
            return
        try:
            client.sendall(message.encode("ascii"))
        except OSError:
            pass

    def _serve(self, listener: socket.socket) -> None:
        try:
            while not self._stopping.is_set():
                try:
                    client, _ = listener.accept()
                except socket.timeout:
                    continue
                except OSError:
                    break
                client.settimeout(_POLL_INTERVAL)
                with self._lock:
                    self._client = client
                try:
                    self._drain(client)
                finally:
                    with self._lock:
                        self._client = None
                    client.close()
        finally:
            with self._lock:
                self._listener = None
            listener.close()

    def _drain(self, client: socket.socket) -> None:
        while not self._stopping.is_set():
            try:
                data = client.recv(1024)
            except socket.timeout:
                continue
            except OSError:
                return
            if not data:
                return