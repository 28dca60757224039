"""Console peer — prints every payload to a text stream."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from peerlink.peers.base import ConnectionClosed

log = logging.getLogger(__name__)


def _display(data: object) -> str:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data).decode("utf-8", errors="replace")
    return str(data)


class ConsolePeer:
    """Writes ``"<payload> from <name>"`` for each send and receive."""

    def __init__(self, name: str = "MyClient", stream: TextIO | None = None) -> None:
        self.name = name
        self._stream = stream
        self.closed = False

    @property
    def stream(self) -> TextIO:
        # Looked up per call; sys.stdout may be swapped after construction
        return self._stream if self._stream is not None else sys.stdout

    def _write(self, op: str, data: object) -> None:
        if self.closed:
            raise ConnectionClosed(f"{self.name} is closed", peer=self.name)
        log.debug("%s %s", self.name, op)
        print(f"{_display(data)} from {self.name}", file=self.stream, flush=True)

    def send(self, data: bytes) -> None:
        self._write("send", data)

    def receive(self, data: bytes) -> None:
        self._write("receive", data)

    def close(self) -> None:
        if not self.closed:
            self.closed = True
            log.info("Console peer closed: %s", self.name)

    def __repr__(self) -> str:
        return f"ConsolePeer(name={self.name!r})"
