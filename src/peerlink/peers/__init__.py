"""Peer capability interface and built-in peers."""

from peerlink.peers.base import ConnectionClosed, Peer, PeerError, UnknownPeerError
from peerlink.peers.registry import available_peers, get_peer, register_peer, reset_registry

__all__ = [
    "ConnectionClosed",
    "Peer",
    "PeerError",
    "UnknownPeerError",
    "available_peers",
    "get_peer",
    "register_peer",
    "reset_registry",
]
