"""
Guess channel: one text message per turn over a TCP connection.

Wire format after the handshake: raw UTF-8 bytes, no length prefix and no
terminator. A message is complete as soon as the accumulated bytes decode
as valid UTF-8. This is only sound when each side sends one short line per
turn and the receiver reads before the next one arrives; two messages sent
back to back may be read as one.

The socket is switched to non-blocking mode. Waiting for the remote peer is
a poll loop: recv, and on would-block sleep `poll_interval` and try again.
With `timeout=None` (the default) a silent peer stalls the game forever;
a clean close from the peer raises ConnectionAbortedError.

The handshake uses newline-terminated records on the same channel (see
net.handshake); bytes that arrive after a record's newline stay buffered
and are served by the next read.
"""

from __future__ import annotations

import logging
import socket
import time
from typing import Optional

from ..game.settings import POLL_INTERVAL, RECV_BUFSIZE

logger = logging.getLogger(__name__)


class GuessChannel:
    def __init__(
            self,
            sock: socket.socket,
            *,
            poll_interval: float = POLL_INTERVAL,
            bufsize: int = RECV_BUFSIZE,
            timeout: Optional[float] = None,
    ):
        self.sock = sock
        self.poll_interval = float(poll_interval)
        self.bufsize = int(bufsize)
        self.timeout = timeout
        self._buffer = bytearray()
        sock.setblocking(False)

    # ---- sending ----

    def _send_all(self, data: bytes) -> None:
        view = memoryview(data)
        while view:
            try:
                sent = self.sock.send(view)
            except BlockingIOError:
                time.sleep(self.poll_interval)
                continue
            view = view[sent:]

    def send_local_input(self, text: str) -> None:
        """Relay one line typed by the local player to the peer."""
        self._send_all(text.encode("utf-8"))
        logger.debug("Sent %r", text)

    def send_line(self, text: str) -> None:
        self._send_all(text.encode("utf-8") + b"\n")

    # ---- receiving ----

    def _fill(self, deadline: Optional[float]) -> None:
        """
        Append at least one chunk to the buffer, polling while the socket
        would block.
        """
        while True:
            try:
                chunk = self.sock.recv(self.bufsize)
            except BlockingIOError:
                if deadline is not None and time.monotonic() >= deadline:
                    raise TimeoutError(f"no message from peer within {self.timeout}s")
                time.sleep(self.poll_interval)
                continue
            if not chunk:
                raise ConnectionAbortedError("Connection closed")
            self._buffer.extend(chunk)
            return

    def _deadline(self) -> Optional[float]:
        return None if self.timeout is None else time.monotonic() + self.timeout

    def receive_remote_guess(self) -> str:
        """
        Block until the buffered bytes decode as UTF-8, then return them and
        clear the buffer. A multi-byte character split across reads waits for
        its remaining bytes; any other invalid byte is replaced with U+FFFD so
        the message is still delivered (and fails the guess gates).
        """
        deadline = self._deadline()
        while True:
            if self._buffer:
                try:
                    text = self._buffer.decode("utf-8")
                except UnicodeDecodeError as e:
                    if e.reason == "unexpected end of data" and e.end == len(self._buffer):
                        self._fill(deadline)
                        continue
                    text = self._buffer.decode("utf-8", errors="replace")
                    logger.warning("Peer sent invalid UTF-8: %r", bytes(self._buffer))
                    self._buffer.clear()
                    return text
                else:
                    self._buffer.clear()
                    logger.debug("Received %r", text)
                    return text
            self._fill(deadline)

    def receive_line(self) -> str:
        """Block until a full newline-terminated line is buffered; return it without the newline."""
        deadline = self._deadline()
        while b"\n" not in self._buffer:
            self._fill(deadline)
        idx = self._buffer.index(b"\n")
        line = bytes(self._buffer[:idx])
        del self._buffer[:idx + 1]
        return line.decode("utf-8")

    def close(self) -> None:
        try:
            self.sock.shutdown(socket.SHUT_RDWR)
        except OSError:
            # Already disconnected
            pass
        self.sock.close()

    def __enter__(self) -> "GuessChannel":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
