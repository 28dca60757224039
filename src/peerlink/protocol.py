"""ProtocolChannel — forwards send/receive to a pluggable peer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from peerlink.peers.base import Peer


class ProtocolChannel:
    """Thin wrapper that delegates every call to its peer, unchanged.

    The channel owns no resources and never catches, wraps or logs what the
    peer raises. The caller keeps ownership of the peer.
    """

    __slots__ = ("_peer",)

    def __init__(self, peer: Peer) -> None:
        self._peer = peer

    @property
    def peer(self) -> Peer:
        return self._peer

    def send(self, data: bytes) -> None:
        self._peer.send(data)

    def receive(self, data: bytes) -> None:
        self._peer.receive(data)

    def __repr__(self) -> str:
        return f"ProtocolChannel(peer={self._peer!r})"
