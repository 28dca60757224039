"""Recording peer — keeps every call in memory, for tests and dry runs."""

from __future__ import annotations

import logging

from peerlink.peers.base import ConnectionClosed

log = logging.getLogger(__name__)

_OPS = ("send", "receive")


class RecordingPeer:
    name = "recorder"

    def __init__(self, name: str | None = None) -> None:
        if name is not None:
            self.name = name
        self.calls: list[tuple[str, bytes]] = []
        self.closed = False
        self._failures: dict[str, BaseException] = {}

    def fail_with(self, exc: BaseException, *, on: str = "send") -> None:
        """Make every following ``on`` call raise ``exc`` until cleared."""
        if on not in _OPS:
            raise ValueError(f"on must be one of {_OPS}, got {on!r}")
        self._failures[on] = exc

    def clear_failure(self, on: str | None = None) -> None:
        if on is None:
            self._failures.clear()
        else:
            self._failures.pop(on, None)

    def _record(self, op: str, data: bytes) -> None:
        if self.closed:
            raise ConnectionClosed(f"{self.name} is closed", peer=self.name)
        exc = self._failures.get(op)
        if exc is not None:
            raise exc
        self.calls.append((op, data))
        log.debug("%s recorded %s (#%d)", self.name, op, len(self.calls))

    def send(self, data: bytes) -> None:
        self._record("send", data)

    def receive(self, data: bytes) -> None:
        self._record("receive", data)

    def close(self) -> None:
        if not self.closed:
            self.closed = True
            log.info("Recording peer closed: %s (%d calls)", self.name, len(self.calls))

    def __repr__(self) -> str:
        return f"RecordingPeer(name={self.name!r}, calls={len(self.calls)})"
