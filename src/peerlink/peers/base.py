"""Peer protocol — capability interface consumed by ProtocolChannel."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Peer(Protocol):
    """Anything that can send and receive a payload."""

    def send(self, data: bytes) -> None:
        """Push an outgoing payload to the peer."""
        ...

    def receive(self, data: bytes) -> None:
        """Hand an incoming payload to the peer."""
        ...


class PeerError(Exception):
    """Exception raised by built-in peers and the peer registry."""

    def __init__(
        self,
        message: str,
        *,
        peer: str = "unknown",
        raw: Any = None,
    ) -> None:
        super().__init__(message)
        self.peer = peer
        self.raw = raw


class ConnectionClosed(PeerError):
    """Raised when a closed peer is asked to send or receive."""


class UnknownPeerError(PeerError, LookupError):
    """Raised when the registry has no entry for a peer kind."""
