"""In-memory loopback — two linked peers, one's send is the other's receive."""

from __future__ import annotations

import logging

from peerlink.peers.base import ConnectionClosed

log = logging.getLogger(__name__)


class _Link:
    __slots__ = ("closed",)

    def __init__(self) -> None:
        self.closed = False


class LoopbackPeer:
    """One end of an in-memory link. Build linked ends with :meth:`pair`."""

    def __init__(self, name: str = "loopback", *, link: _Link | None = None) -> None:
        self.name = name
        self.inbox: list[bytes] = []
        self._link = link or _Link()
        self._other: LoopbackPeer | None = None

    @classmethod
    def pair(cls, a: str = "left", b: str = "right") -> tuple[LoopbackPeer, LoopbackPeer]:
        link = _Link()
        left, right = cls(a, link=link), cls(b, link=link)
        left._other, right._other = right, left
        return left, right

    @property
    def closed(self) -> bool:
        return self._link.closed

    @property
    def other(self) -> LoopbackPeer | None:
        return self._other

    def _check_open(self) -> None:
        if self._link.closed:
            raise ConnectionClosed(f"loopback {self.name} is closed", peer=self.name)

    def send(self, data: bytes) -> None:
        self._check_open()
        if self._other is None:
            raise ConnectionClosed(f"loopback {self.name} has no other end", peer=self.name)
        log.debug("%s -> %s", self.name, self._other.name)
        self._other.receive(data)

    def receive(self, data: bytes) -> None:
        self._check_open()
        self.inbox.append(data)

    def close(self) -> None:
        if not self._link.closed:
            self._link.closed = True
            log.info("Loopback closed: %s", self.name)

    def __repr__(self) -> str:
        other = self._other.name if self._other else None
        return f"LoopbackPeer(name={self.name!r}, other={other!r})"


def open_loopback(name: str = "left", other: str = "right") -> LoopbackPeer:
    """Return the ``name`` end of a fresh pair; reach the far end via ``.other``."""
    return LoopbackPeer.pair(name, other)[0]
